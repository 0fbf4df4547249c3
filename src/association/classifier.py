"""Classify raw configuration keys as artifact references."""

import re

from .models import NOT_AN_ARTIFACT_KEY, ClassifiedKey, KeyKind

UNVERSIONED_ARTIFACT = re.compile(r"([^/]+)/([^/]+)")
VERSIONED_ARTIFACT = re.compile(r"([^/]+)/([^/]+)/([^/]+)")


def classify(raw_key: str) -> ClassifiedKey:
    """Classify ``raw_key`` as ``group/name``, ``group/name/version`` or neither.

    The unversioned shape is tested first and the versioned shape only when
    it fails. Keys of any other shape classify as not-an-artifact.
    """
    m = UNVERSIONED_ARTIFACT.fullmatch(raw_key)
    if m:
        return ClassifiedKey(KeyKind.UNVERSIONED, group=m.group(1), name=m.group(2))
    m = VERSIONED_ARTIFACT.fullmatch(raw_key)
    if m:
        return ClassifiedKey(
            KeyKind.VERSIONED, group=m.group(1), name=m.group(2), version=m.group(3)
        )
    return NOT_AN_ARTIFACT_KEY
