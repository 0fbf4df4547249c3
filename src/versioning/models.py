"""Data models for version selection."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Collection, Optional


class SelectorKind(Enum):
    """Enum for supported version selection strategies."""
    EXACT = "exact"
    MAVEN = "maven"
    SEMVER = "semver"


class RequestMode(Enum):
    """Selection strategy derived from the requested version string."""
    EXACT = "exact"
    RANGE = "range"


@dataclass(frozen=True)
class VersionRequest:
    """Normalized representation of a requested version and derived behavior flags."""
    raw: str
    mode: RequestMode
    include_prerelease: bool


# Signature every selector satisfies: (requested, candidates) -> chosen or None.
SelectFn = Callable[[str, Collection[str]], Optional[str]]
