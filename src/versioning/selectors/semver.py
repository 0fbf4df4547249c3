"""Semantic version selector using npm range semantics."""

import re
from typing import List, Optional, Tuple

import semantic_version

from ..models import SelectorKind, VersionRequest
from .base import VersionSelector


class SemverVersionSelector(VersionSelector):
    """Selector using semantic versioning and npm-style ranges."""

    @property
    def kind(self) -> SelectorKind:
        """Return semver selection."""
        return SelectorKind.SEMVER

    def pick(
        self, req: VersionRequest, candidates: List[str]
    ) -> Tuple[Optional[str], int, Optional[str]]:
        """Apply semver rules to select a version.

        A literal match always wins. Anything else, plain partial versions
        like ``1.2`` included, is evaluated as an npm range and the highest
        matching candidate is returned.

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
        return self._pick_range(req.raw, candidates, req.include_prerelease)

    def _normalize_spec(self, spec_str: str) -> str:
        """Normalize npm range syntax (hyphen, x-ranges) into SimpleSpec-compatible form."""
        s = spec_str.strip()

        # Hyphen ranges: "1.2.3 - 1.4.5" => ">=1.2.3,<=1.4.5"
        m = re.match(r'^\s*([0-9A-Za-z\.\-\+]+)\s+-\s+([0-9A-Za-z\.\-\+]+)\s*$', s)
        if m:
            return f">={m.group(1)},<={m.group(2)}"

        s2 = s.replace('*', 'x').lower()
        m = re.match(r'^\s*(\d+)\.(\d+)\.x\s*$', s2)
        if m:
            major, minor = int(m.group(1)), int(m.group(2))
            return f">={major}.{minor}.0,<{major}.{minor + 1}.0"

        m = re.match(r'^\s*(\d+)(\.x)?\s*$', s2)
        if m:
            major = int(m.group(1))
            return f">={major}.0.0,<{major + 1}.0.0"

        return spec_str

    def _build_spec(self, spec_str: str):
        """Prefer NpmSpec; fall back to a normalized SimpleSpec."""
        try:
            return semantic_version.NpmSpec(spec_str)
        except ValueError:
            return semantic_version.SimpleSpec(self._normalize_spec(spec_str))

    def _pick_range(
        self, spec_str: str, candidates: List[str], include_prerelease: bool
    ) -> Tuple[Optional[str], int, Optional[str]]:
        """Apply semver range and pick highest matching version."""
        try:
            spec = self._build_spec(spec_str)
        except ValueError as e:
            return None, len(candidates), f"Invalid semver spec: {str(e)}"

        matching = []
        for v in candidates:
            try:
                ver = semantic_version.Version.coerce(v)
            except ValueError:
                continue  # Skip invalid versions
            if ver.prerelease and not include_prerelease:
                continue
            if spec.match(ver):
                matching.append((ver, v))

        if not matching:
            return None, len(candidates), f"No versions match spec '{spec_str}'"

        matching.sort(reverse=True)
        return matching[0][1], len(candidates), None
