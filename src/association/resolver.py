"""Resolve a requested artifact version to its associated value."""

import logging
from typing import Any, Iterable, Optional, Sequence, Union

from common.logging_utils import extra_context, is_debug_enabled
from versioning.models import SelectFn
from versioning.selectors import VersionSelector, get_selector
from .aggregator import build
from .index import AssociationIndex
from .models import WILDCARD, ArtifactIdentity
from .sources import discover_sources, load_sources

logger = logging.getLogger(__name__)


class ArtifactAssociation:
    """Associates artifacts read from configuration sources with a string value.

    Used to find the command that installs or builds an artifact. The index
    is built once and never mutated; to pick up changed configuration build
    a new instance and replace the reference to the old one.
    """

    def __init__(
        self,
        index: AssociationIndex,
        selector: Union[VersionSelector, SelectFn, str, None] = None,
    ):
        """Initialize with a built index and a version selector.

        Args:
            index: The association index to query.
            selector: A VersionSelector, any callable taking
                (requested, candidates), a selector name, or None for the
                default Maven selector.
        """
        self._index = index
        if selector is None or isinstance(selector, str):
            selector = get_selector(selector or "maven")
        self._selector = selector

    @classmethod
    def from_sources(
        cls,
        sources: Iterable[Any],
        selector: Union[VersionSelector, SelectFn, str, None] = None,
    ) -> "ArtifactAssociation":
        """Build the index from ``sources`` (see ``aggregator.build``)."""
        return cls(build(sources), selector)

    @classmethod
    def from_search_path(
        cls,
        resource: str,
        search_path: Sequence[str],
        selector: Union[VersionSelector, SelectFn, str, None] = None,
    ) -> "ArtifactAssociation":
        """Load every ``resource`` found along ``search_path`` and build the index.

        Raises:
            SourceReadError: If any discovered source cannot be read.
        """
        paths = discover_sources(resource, search_path)
        return cls.from_sources(load_sources(paths), selector)

    @property
    def index(self) -> AssociationIndex:
        return self._index

    def resolve(self, identity: ArtifactIdentity, requested_version: str) -> Optional[str]:
        """Get the value associated with ``identity`` at ``requested_version``.

        The selector chooses among the concrete versions; when it finds no
        match the wildcard entry applies. Returns None when neither exists.
        """
        versions = self._index.lookup(identity)
        candidates = [token for token in versions if token != WILDCARD]
        token = self._selector(requested_version, candidates)
        if token is None and WILDCARD in versions:
            token = WILDCARD
        value = versions.get(token) if token is not None else None

        if is_debug_enabled(logger):
            logger.debug(
                "Association lookup",
                extra=extra_context(
                    event="decision", component="resolver", action="resolve",
                    outcome="found" if value is not None else "absent",
                    artifact=str(identity), requested=requested_version, token=token,
                ),
            )
        return value

    def get(self, group: str, name: str, requested_version: str) -> Optional[str]:
        """Resolve by coordinates; see ``resolve``."""
        return self.resolve(ArtifactIdentity(group, name), requested_version)
