"""Requested-version parsing utilities for version selection."""

import re

from .models import RequestMode, VersionRequest

_RANGE_OPS = ['^', '~', '*', '<', '>', '=', '!', '[', ']', '(', ')', ',', '||', ' - ']
_X_RANGE = re.compile(r'(^|\.)[xX](\.|$)')
_PRERELEASE_MARKERS = ['pre', 'rc', 'alpha', 'beta', 'snapshot']


def _determine_request_mode(raw: str) -> RequestMode:
    """Determine request mode from the raw version string."""
    if any(op in raw for op in _RANGE_OPS) or _X_RANGE.search(raw):
        return RequestMode.RANGE
    return RequestMode.EXACT


def _determine_include_prerelease(raw: str) -> bool:
    """Pre-releases are only candidates when the request itself names one."""
    lowered = raw.lower()
    return any(marker in lowered for marker in _PRERELEASE_MARKERS)


def parse_version_request(raw: str) -> VersionRequest:
    """Parse a requested version string into a VersionRequest."""
    spec = raw.strip()
    return VersionRequest(
        raw=spec,
        mode=_determine_request_mode(spec),
        include_prerelease=_determine_include_prerelease(spec),
    )
