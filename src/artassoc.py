"""artassoc - look up the command associated with an artifact version.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import apply_overrides
from association import ArtifactAssociation, KeyKind, SourceReadError, classify


def _setup_logging(args, level=None):
    """Configure logging from the resolved level and optional --logfile."""
    configure_logging(level)
    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logging.getLogger().addHandler(file_handler)
        logging.info("Logging to file: %s", log_file)


def parse_requests(tokens):
    """Turn group/name/version tokens into (token, classified key) pairs.

    Returns None when any token is not a versioned artifact key.
    """
    requests = []
    for token in tokens:
        classified = classify(token.strip())
        if classified.kind is not KeyKind.VERSIONED:
            logging.error("Invalid artifact '%s'. Expected 'group/name/version'.", token)
            return None
        requests.append((token.strip(), classified))
    return requests


def format_results(results, as_json=False):
    """Render (token, value) results as text lines or a JSON document."""
    if as_json:
        return json.dumps(
            [{"artifact": token, "value": value} for token, value in results], indent=2
        )
    return "\n".join(
        f"{token}: {value if value is not None else Constants.NONE_MARKER}"
        for token, value in results
    )


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)
    settings = apply_overrides(args)
    _setup_logging(args, settings.log_level)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(
                event="function_entry", component="cli", action="main",
                resource=settings.resource, selector=settings.selector,
            ),
        )

    requests = parse_requests(args.ARTIFACTS)
    if requests is None:
        return ExitCodes.USAGE_ERROR.value

    try:
        associations = ArtifactAssociation.from_search_path(
            settings.resource, settings.search_path, settings.selector
        )
    except SourceReadError as e:
        logging.error("Cannot read association source %s: %s, aborting", e.source, e.reason)
        return ExitCodes.FILE_ERROR.value

    results = []
    for token, key in requests:
        value = associations.resolve(key.identity, key.version)
        if value is None:
            logging.warning("No association found for %s", token)
        results.append((token, value))

    print(format_results(results, args.JSON))

    missing = [token for token, value in results if value is None]
    if missing and args.ERROR_ON_MISSING:
        return ExitCodes.EXIT_MISSING.value
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
