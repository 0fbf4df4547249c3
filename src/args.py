"""Argument parsing functionality for artassoc."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="artassoc",
        description=(
            "artassoc - Look up the command associated with an artifact version"
        ),
        add_help=True,
    )

    parser.add_argument("-a", "--artifact",
                        dest="ARTIFACTS",
                        help="Artifact to resolve as group/name/version (repeatable)",
                        action="append", type=str,
                        required=True)
    parser.add_argument("-s", "--search-dir",
                        dest="SEARCH_DIRS",
                        help="Directory searched for the association resource, "
                             "in increasing precedence (repeatable)",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-r", "--resource",
                        dest="RESOURCE",
                        help=f"Resource path relative to each search directory "
                             f"(default: {Constants.RESOURCE_PATH})",
                        action="store", type=str)
    parser.add_argument("--selector",
                        dest="SELECTOR",
                        help="Version selection strategy (default: maven)",
                        action="store", type=str.lower,
                        choices=Constants.SUPPORTED_SELECTORS)
    parser.add_argument("-j", "--json",
                        dest="JSON",
                        help="Print results as JSON.",
                        action="store_true")
    parser.add_argument("--error-on-missing",
                        dest="ERROR_ON_MISSING",
                        help="Exit with a non-zero status code if any artifact has no association.",
                        action="store_true")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    # Config file (general)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
