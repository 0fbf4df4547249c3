"""Maven version selector using Maven version range semantics."""

from typing import List, Optional, Tuple

from packaging import version

from ..models import RequestMode, SelectorKind, VersionRequest
from .base import VersionSelector


def _parse(v: str) -> Optional[version.Version]:
    """Parse a version string, returning None when it is not comparable."""
    try:
        return version.Version(v)
    except version.InvalidVersion:
        return None


def _highest(matching: List[str]) -> Optional[str]:
    """Return the highest comparable version; ties break on the literal string."""
    parsed = [(_parse(v), v) for v in matching]
    ranked = [(ver, v) for ver, v in parsed if ver is not None]
    if not ranked:
        return None
    ranked.sort(reverse=True)
    return ranked[0][1]


class MavenVersionSelector(VersionSelector):
    """Selector for Maven-style requests: exact versions, prefixes and bracket ranges."""

    @property
    def kind(self) -> SelectorKind:
        """Return Maven selection."""
        return SelectorKind.MAVEN

    def pick(
        self, req: VersionRequest, candidates: List[str]
    ) -> Tuple[Optional[str], int, Optional[str]]:
        """Apply Maven version rules to select a version.

        Args:
            req: Parsed requested version
            candidates: Available version strings

        Returns:
            Tuple of (selected_version, candidate_count, error_message)
        """
        if not candidates:
            return None, 0, "No versions available"

        if req.raw in candidates:
            return req.raw, len(candidates), None

        pool = self._eligible(candidates, req.include_prerelease)
        if req.mode == RequestMode.RANGE:
            return self._pick_range(req.raw, pool, len(candidates))
        return self._pick_exact(req.raw, pool, len(candidates))

    def _eligible(self, candidates: List[str], include_prerelease: bool) -> List[str]:
        """Drop SNAPSHOT and pre-release candidates unless the request asked for one."""
        if include_prerelease:
            return list(candidates)
        eligible = []
        for v in candidates:
            if v.upper().endswith("-SNAPSHOT"):
                continue
            parsed = _parse(v)
            if parsed is not None and parsed.is_prerelease:
                continue
            eligible.append(v)
        return eligible

    def _pick_exact(
        self, version_str: str, candidates: List[str], count: int
    ) -> Tuple[Optional[str], int, Optional[str]]:
        """Match a plain version: numerically equal first, then the highest prefix match."""
        wanted = _parse(version_str)
        if wanted is not None:
            equal = [v for v in candidates if _parse(v) == wanted]
            if equal:
                return equal[0], count, None

        prefixed = [v for v in candidates if v.startswith(version_str + ".")]
        chosen = _highest(prefixed)
        if chosen is not None:
            return chosen, count, None
        return None, count, f"Version {version_str} not found"

    def _pick_range(
        self, range_spec: str, candidates: List[str], count: int
    ) -> Tuple[Optional[str], int, Optional[str]]:
        """Apply Maven version range and pick highest matching version."""
        matching = self._filter_by_range(range_spec, candidates)
        chosen = _highest(matching)
        if chosen is None:
            return None, count, f"No versions match range '{range_spec}'"
        return chosen, count, None

    def _filter_by_range(self, range_spec: str, candidates: List[str]) -> List[str]:
        """Filter candidates by Maven version range specification."""
        range_spec = range_spec.strip()
        if not range_spec.startswith(('[', '(')):
            return []

        ranges = self._split_ranges(range_spec)
        if len(ranges) == 1:
            return self._parse_bracket_range(ranges[0], candidates)

        # Union of every range, keeping candidate order
        matched = set()
        for r in ranges:
            matched.update(self._parse_bracket_range(r, candidates))
        return [v for v in candidates if v in matched]

    def _split_ranges(self, range_spec: str) -> List[str]:
        """Split comma-separated ranges like [1.0,2.0),[3.0,4.0] into single ranges."""
        ranges = []
        current = ""
        depth = 0
        for char in range_spec:
            if char in '[(':
                if depth == 0:
                    current = ""
                depth += 1
                current += char
            elif char in '])':
                depth -= 1
                current += char
                if depth == 0:
                    ranges.append(current)
                    current = ""
            elif depth > 0:
                current += char
        return ranges

    def _parse_bracket_range(self, range_spec: str, candidates: List[str]) -> List[str]:
        """Parse Maven bracket range notation like [1.0,2.0), (1.0,], or [1.2]."""
        if len(range_spec) < 2:
            return []
        inner = range_spec[1:-1]
        parts = inner.split(',') if ',' in inner else [inner]

        # Single-element bracket [1.2] means that version (or its prefix family)
        if len(parts) == 1:
            base = parts[0].strip()
            if not base:
                return []
            wanted = _parse(base)
            return [
                v for v in candidates
                if v == base or v.startswith(base + ".") or (wanted is not None and _parse(v) == wanted)
            ]

        lower_str, upper_str = parts[0].strip(), parts[1].strip()
        lower_inclusive = range_spec.startswith('[')
        upper_inclusive = range_spec.endswith(']')
        lower_ver = _parse(lower_str) if lower_str else None
        upper_ver = _parse(upper_str) if upper_str else None
        if (lower_str and lower_ver is None) or (upper_str and upper_ver is None):
            return []

        matching = []
        for v in candidates:
            ver = _parse(v)
            if ver is None:
                continue

            if lower_ver is not None:
                if lower_inclusive and ver < lower_ver:
                    continue
                if not lower_inclusive and ver <= lower_ver:
                    continue

            if upper_ver is not None:
                if upper_inclusive and ver > upper_ver:
                    continue
                if not upper_inclusive and ver >= upper_ver:
                    continue

            matching.append(v)

        return matching
