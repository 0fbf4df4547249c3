"""Constants used in the project."""

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    USAGE_ERROR = 2
    EXIT_MISSING = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    WILDCARD = "*"
    RESOURCE_PATH = "artassoc/commands.properties"
    SEARCH_PATH = ["/etc", os.path.join(os.path.expanduser("~"), ".config")]
    DEFAULT_SELECTOR = "maven"
    SUPPORTED_SELECTORS = ["exact", "maven", "semver"]
    SOURCE_SUFFIXES = [".properties", ".yaml", ".yml", ".json"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    NONE_MARKER = "<none>"

    # Environment
    ENV_SEARCH_PATH = "ARTASSOC_PATH"
    ENV_LOG_LEVEL = "ARTASSOC_LOG_LEVEL"
    ENV_CONFIG = "ARTASSOC_CONFIG"

    # Config file lookup order when no explicit --config is given
    CONFIG_LOCATIONS = [
        "artassoc.yml",
        "artassoc.yaml",
        os.path.join(os.path.expanduser("~"), ".config", "artassoc", "artassoc.yml"),
    ]
    CONFIG_KEYS = ["resource", "search_path", "selector", "log_level"]


def _find_config_file(path: Optional[str] = None) -> Optional[str]:
    """Return the first usable config file path, honoring an explicit path first."""
    if path:
        return path
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path:
        return env_path
    for candidate in Constants.CONFIG_LOCATIONS:
        if os.path.isfile(candidate):
            return candidate
    return None


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML configuration file, returning only recognised keys.

    A missing default config is not an error. An explicit path that cannot be
    read or parsed is logged and treated as empty so that defaults still apply.

    Args:
        path: Explicit config path (from --config), or None to search defaults.

    Returns:
        Dict of configuration values keyed by ``Constants.CONFIG_KEYS``.
    """
    config_path = _find_config_file(path)
    if not config_path:
        return {}
    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    import yaml

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config %s: %s", config_path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level must be a mapping", config_path)
        return {}

    unknown = sorted(set(data) - set(Constants.CONFIG_KEYS))
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", config_path, ", ".join(unknown))
    return {k: v for k, v in data.items() if k in Constants.CONFIG_KEYS}
