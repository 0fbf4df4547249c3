"""Aggregate raw key/value sources into an association index."""

import logging
from typing import Any, Dict, Iterable, Mapping, Tuple

from common.logging_utils import Timer, extra_context, is_debug_enabled
from .classifier import classify
from .errors import SourceReadError
from .index import AssociationIndex
from .models import ArtifactIdentity

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]


def _pairs(source: Any) -> Iterable[Pair]:
    """Yield the (key, value) pairs of a source in its native order."""
    if isinstance(source, Mapping):
        return source.items()
    pairs = getattr(source, "pairs", None)
    if pairs is not None:
        return pairs
    return source


def build(sources: Iterable[Any]) -> AssociationIndex:
    """Merge ``sources`` into an AssociationIndex.

    Each source is a mapping, an iterable of ``(key, value)`` pairs, or an
    object exposing ``name`` and ``pairs``. Sources are consumed in order and
    a later value for the same artifact and version token replaces an
    earlier one. Keys that are not artifact keys are skipped.

    Raises:
        SourceReadError: If reading any source fails; nothing is returned.
    """
    entries: Dict[ArtifactIdentity, Dict[str, str]] = {}
    loaded = skipped = 0
    with Timer() as t:
        for position, source in enumerate(sources):
            source_name = getattr(source, "name", None) or f"source[{position}]"
            try:
                for key, value in _pairs(source):
                    classified = classify(key)
                    if not classified.is_artifact:
                        skipped += 1
                        if is_debug_enabled(logger):
                            logger.debug(
                                "Skipping non-artifact key",
                                extra=extra_context(
                                    event="decision", component="aggregator",
                                    action="classify", outcome="skipped",
                                    key=key, source=source_name,
                                ),
                            )
                        continue
                    versions = entries.setdefault(classified.identity, {})
                    versions[classified.token] = value
                    loaded += 1
            except SourceReadError:
                raise
            except OSError as e:
                raise SourceReadError(source_name, str(e)) from e

    if is_debug_enabled(logger):
        logger.debug(
            "Association index built",
            extra=extra_context(
                event="function_exit", component="aggregator", action="build",
                outcome="success", count=loaded, skipped=skipped,
                artifacts=len(entries), duration_ms=t.duration_ms(),
            ),
        )
    return AssociationIndex(entries)
