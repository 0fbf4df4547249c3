"""Errors raised while assembling an association index."""


class SourceReadError(OSError):
    """An association source could not be read or parsed.

    Fatal to index construction; ``source`` names the offending source.
    """

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
