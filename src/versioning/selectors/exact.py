"""Selector accepting only a literal match of the requested version."""

from typing import List, Optional, Tuple

from ..models import SelectorKind, VersionRequest
from .base import VersionSelector


class ExactVersionSelector(VersionSelector):
    """Selector matching the requested version string literally."""

    @property
    def kind(self) -> SelectorKind:
        return SelectorKind.EXACT

    def pick(
        self, req: VersionRequest, candidates: List[str]
    ) -> Tuple[Optional[str], int, Optional[str]]:
        if req.raw in candidates:
            return req.raw, len(candidates), None
        return None, len(candidates), f"Version {req.raw} not found"
