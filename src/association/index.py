"""Read-only association index."""

from types import MappingProxyType
from typing import Dict, Mapping

from .models import ArtifactIdentity

_EMPTY: Mapping[str, str] = MappingProxyType({})


class AssociationIndex:
    """Artifact identity to version token to value, frozen at construction.

    The only query is ``lookup``; an unknown identity yields an empty map, so
    callers never distinguish "absent" from "no associations".
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[ArtifactIdentity, Mapping[str, str]]):
        self._entries: Dict[ArtifactIdentity, Mapping[str, str]] = {
            identity: MappingProxyType(dict(versions))
            for identity, versions in entries.items()
        }

    def lookup(self, identity: ArtifactIdentity) -> Mapping[str, str]:
        """Return the version token map for ``identity`` (empty when unknown)."""
        return self._entries.get(identity, _EMPTY)
