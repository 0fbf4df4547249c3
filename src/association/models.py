"""Data models for artifact associations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from constants import Constants

WILDCARD = Constants.WILDCARD


class KeyKind(Enum):
    """Shape of a raw configuration key."""
    UNVERSIONED = "unversioned"
    VERSIONED = "versioned"
    NOT_ARTIFACT = "not_artifact"


@dataclass(frozen=True)
class ArtifactIdentity:
    """An artifact without its version: the index key."""
    group: str
    name: str

    def __str__(self) -> str:
        return f"{self.group}/{self.name}"


@dataclass(frozen=True)
class ClassifiedKey:
    """Outcome of classifying a raw key."""
    kind: KeyKind
    group: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None

    @property
    def is_artifact(self) -> bool:
        return self.kind is not KeyKind.NOT_ARTIFACT

    @property
    def identity(self) -> ArtifactIdentity:
        """Identity of the classified key; only valid for artifact keys."""
        if not self.is_artifact:
            raise ValueError("Key does not name an artifact")
        return ArtifactIdentity(self.group, self.name)

    @property
    def token(self) -> str:
        """Version token: the version segment, or the wildcard when unversioned."""
        if self.kind is KeyKind.VERSIONED:
            return self.version
        if self.kind is KeyKind.UNVERSIONED:
            return WILDCARD
        raise ValueError("Key does not name an artifact")


NOT_AN_ARTIFACT_KEY = ClassifiedKey(KeyKind.NOT_ARTIFACT)
