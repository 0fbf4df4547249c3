"""Effective runtime settings for the CLI.

Precedence, highest first: CLI arguments, environment, YAML config file,
built-in defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from constants import Constants, _load_yaml_config

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Resolved settings used to build and query the association index."""
    resource: str = Constants.RESOURCE_PATH
    search_path: List[str] = field(default_factory=lambda: list(Constants.SEARCH_PATH))
    selector: str = Constants.DEFAULT_SELECTOR
    log_level: Optional[str] = None


def _as_path_list(value: Any) -> List[str]:
    """Accept a list of directories or a single os.pathsep separated string."""
    if isinstance(value, str):
        return [p for p in value.split(os.pathsep) if p]
    if isinstance(value, (list, tuple)):
        return [str(p) for p in value if p]
    logger.warning("Ignoring search_path of unexpected type %s", type(value).__name__)
    return []


def _search_path(args, config: Dict[str, Any]) -> List[str]:
    cli_dirs = getattr(args, "SEARCH_DIRS", None)
    if cli_dirs:
        return list(cli_dirs)
    env_value = os.environ.get(Constants.ENV_SEARCH_PATH)
    if env_value:
        return _as_path_list(env_value)
    if config.get("search_path"):
        configured = _as_path_list(config["search_path"])
        if configured:
            return configured
    return list(Constants.SEARCH_PATH)


def _selector(args, config: Dict[str, Any]) -> str:
    if getattr(args, "SELECTOR", None):
        return args.SELECTOR
    configured = str(config.get("selector") or "").strip().lower()
    if configured:
        if configured in Constants.SUPPORTED_SELECTORS:
            return configured
        logger.warning(
            "Unknown selector '%s' in config, using %s", configured, Constants.DEFAULT_SELECTOR
        )
    return Constants.DEFAULT_SELECTOR


def apply_overrides(args) -> Settings:
    """Combine CLI arguments, environment and config file into Settings."""
    config = _load_yaml_config(getattr(args, "CONFIG", None))
    log_level = (
        getattr(args, "LOG_LEVEL", None)
        or os.environ.get(Constants.ENV_LOG_LEVEL)
        or config.get("log_level")
    )
    return Settings(
        resource=getattr(args, "RESOURCE", None) or config.get("resource") or Constants.RESOURCE_PATH,
        search_path=_search_path(args, config),
        selector=_selector(args, config),
        log_level=str(log_level).upper() if log_level else None,
    )
