"""Version selectors for different versioning schemes."""

from typing import Union

from ..models import SelectorKind
from .base import VersionSelector
from .exact import ExactVersionSelector
from .maven import MavenVersionSelector
from .semver import SemverVersionSelector

_SELECTORS = {
    SelectorKind.EXACT: ExactVersionSelector,
    SelectorKind.MAVEN: MavenVersionSelector,
    SelectorKind.SEMVER: SemverVersionSelector,
}


def get_selector(kind: Union[str, SelectorKind]) -> VersionSelector:
    """Return a selector instance for ``kind`` (a SelectorKind or its name).

    Raises:
        ValueError: If ``kind`` names no known selector.
    """
    if not isinstance(kind, SelectorKind):
        kind = SelectorKind(str(kind).strip().lower())
    return _SELECTORS[kind]()


__all__ = [
    "VersionSelector",
    "ExactVersionSelector",
    "MavenVersionSelector",
    "SemverVersionSelector",
    "get_selector",
]
