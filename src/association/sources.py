"""Discover and load association sources from disk.

A source is one file holding flat ``key = value`` entries. Java properties,
YAML and JSON files are supported; the format is chosen by file suffix.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple

import yaml
from jproperties import Properties, PropertyError

from common.logging_utils import extra_context, is_debug_enabled
from .errors import SourceReadError
from .interpolate import resolve_pairs

logger = logging.getLogger(__name__)


@dataclass
class Source:
    """One loaded source: its name (path) and its resolved pairs in file order."""
    name: str
    pairs: List[Tuple[str, str]] = field(default_factory=list)


def _load_properties(path: str) -> List[Tuple[str, Any]]:
    props = Properties()
    with open(path, "rb") as fh:
        props.load(fh, "utf-8")
    return [(key, prop.data) for key, prop in props.items()]


def _load_mapping(data: Any, path: str) -> List[Tuple[str, Any]]:
    if data is None:
        return []
    if not isinstance(data, dict):
        raise SourceReadError(path, "top level must be a mapping")
    return list(data.items())


def _load_yaml(path: str) -> List[Tuple[str, Any]]:
    with open(path, "r", encoding="utf-8") as fh:
        return _load_mapping(yaml.safe_load(fh), path)


def _load_json(path: str) -> List[Tuple[str, Any]]:
    with open(path, "r", encoding="utf-8") as fh:
        return _load_mapping(json.load(fh), path)


FILE_LOADERS: Dict[str, Callable[[str], List[Tuple[str, Any]]]] = {
    ".properties": _load_properties,
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".json": _load_json,
}
"""Mapping of file suffixes to loader callables."""


def _as_text(key: Any, value: Any, path: str) -> Tuple[str, str]:
    """Coerce a loaded entry to strings; only scalar values are accepted."""
    if isinstance(value, bool):
        return str(key), "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(key), str(value)
    raise SourceReadError(path, f"value for key '{key}' must be a scalar")


def load_source(path: str) -> Source:
    """Load one source file and interpolate its values.

    Raises:
        SourceReadError: On unsupported suffix, I/O failure or malformed content.
    """
    suffix = os.path.splitext(path)[1].lower()
    loader = FILE_LOADERS.get(suffix)
    if loader is None:
        supported = ", ".join(sorted(FILE_LOADERS))
        raise SourceReadError(path, f"unsupported file extension '{suffix}' (supported: {supported})")

    try:
        raw = loader(path)
    except SourceReadError:
        raise
    except (OSError, ValueError, PropertyError, yaml.YAMLError) as e:
        raise SourceReadError(path, str(e)) from e

    pairs = resolve_pairs([_as_text(k, v, path) for k, v in raw])
    logger.info("Loaded %d entries from %s", len(pairs), path)
    return Source(name=path, pairs=pairs)


def load_sources(paths: Iterable[str]) -> List[Source]:
    """Load every path in order; the first failure aborts the whole load."""
    return [load_source(p) for p in paths]


def discover_sources(resource: str, search_path: Sequence[str]) -> List[str]:
    """Return ``<dir>/<resource>`` for each directory of ``search_path`` where it exists.

    The result keeps search path order, which is also the precedence order:
    sources found later override earlier ones.
    """
    found = []
    for directory in search_path:
        if not directory:
            continue
        candidate = os.path.join(os.path.expanduser(directory), resource)
        if os.path.isfile(candidate):
            found.append(candidate)
        elif is_debug_enabled(logger):
            logger.debug(
                "No association source in directory",
                extra=extra_context(
                    event="decision", component="sources", action="discover",
                    outcome="missing", target=candidate,
                ),
            )
    if not found:
        logger.warning("No association sources named %s found on the search path", resource)
    return found
