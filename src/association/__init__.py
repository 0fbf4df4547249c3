"""Artifact associations: map artifact coordinates to configured values."""

from .errors import SourceReadError
from .models import ArtifactIdentity, ClassifiedKey, KeyKind
from .classifier import classify
from .aggregator import build
from .index import AssociationIndex
from .resolver import ArtifactAssociation

__all__ = [
    "ArtifactAssociation",
    "ArtifactIdentity",
    "AssociationIndex",
    "ClassifiedKey",
    "KeyKind",
    "SourceReadError",
    "build",
    "classify",
]
