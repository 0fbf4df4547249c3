"""Base class shared by all version selectors."""

import logging
from abc import ABC, abstractmethod
from typing import Collection, List, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from ..models import SelectorKind, VersionRequest
from ..parser import parse_version_request

logger = logging.getLogger(__name__)


class VersionSelector(ABC):
    """Choose at most one candidate version for a requested version.

    Subclasses implement ``pick``; ``select`` (and calling the instance)
    normalizes input so every selector is deterministic: candidates are
    de-duplicated and sorted before ``pick`` sees them.
    """

    @property
    @abstractmethod
    def kind(self) -> SelectorKind:
        """Return the selection strategy implemented."""

    @abstractmethod
    def pick(
        self, req: VersionRequest, candidates: List[str]
    ) -> Tuple[Optional[str], int, Optional[str]]:
        """Select a version from candidates.

        Returns:
            Tuple of (selected_version, candidate_count, error_message)
        """

    def select(self, requested: str, candidates: Collection[str]) -> Optional[str]:
        """Return the best matching candidate for ``requested`` or None."""
        ordered = sorted(set(candidates))
        if not ordered:
            return None
        req = parse_version_request(requested)
        chosen, count, error = self.pick(req, ordered)
        if is_debug_enabled(logger):
            logger.debug(
                "Version selection",
                extra=extra_context(
                    event="decision",
                    component="selector",
                    action=self.kind.value,
                    outcome="match" if chosen is not None else "no_match",
                    requested=req.raw,
                    candidate_count=count,
                    error=error,
                ),
            )
        return chosen

    def __call__(self, requested: str, candidates: Collection[str]) -> Optional[str]:
        return self.select(requested, candidates)
