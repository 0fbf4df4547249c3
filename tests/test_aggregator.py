"""Tests for aggregating sources into an association index."""

import pytest

from association.aggregator import build
from association.errors import SourceReadError
from association.models import ArtifactIdentity
from association.sources import Source

AB = ArtifactIdentity("a", "b")


class TestBuild:
    """Test index construction from ordered sources."""

    def test_unversioned_key_becomes_wildcard(self):
        index = build([{"a/b": "install-a"}])
        assert dict(index.lookup(AB)) == {"*": "install-a"}

    def test_versioned_and_unversioned_share_identity(self):
        index = build([{"a/b": "all", "a/b/1.0": "one", "a/b/2.0": "two"}])
        assert dict(index.lookup(AB)) == {"*": "all", "1.0": "one", "2.0": "two"}

    def test_last_writer_wins_across_sources(self):
        index = build([{"a/b/1.0": "x"}, {"a/b/1.0": "y"}])
        assert index.lookup(AB)["1.0"] == "y"

    def test_last_writer_wins_within_source(self):
        index = build([[("a/b", "first"), ("a/b", "second")]])
        assert index.lookup(AB)["*"] == "second"

    def test_later_source_only_overrides_matching_token(self):
        index = build([{"a/b": "all", "a/b/1.0": "one"}, {"a/b/1.0": "override"}])
        assert dict(index.lookup(AB)) == {"*": "all", "1.0": "override"}

    def test_non_artifact_keys_are_skipped(self):
        index = build([{"a/b/c/d": "deep", "mix.home": "/opt/mix", "x/y": "ok"}])
        assert dict(index.lookup(ArtifactIdentity("x", "y"))) == {"*": "ok"}
        assert dict(index.lookup(ArtifactIdentity("a", "b"))) == {}

    def test_accepts_pairs_and_source_objects(self):
        index = build([
            [("a/b/1.0", "pairs")],
            Source(name="/etc/artassoc/commands.properties", pairs=[("a/b/2.0", "object")]),
        ])
        assert dict(index.lookup(AB)) == {"1.0": "pairs", "2.0": "object"}

    def test_empty_sources(self):
        index = build([])
        assert dict(index.lookup(AB)) == {}

    def test_idempotent(self):
        sources = [{"a/b": "all", "a/b/1.0": "one"}, {"c/d/2": "two", "a/b/1.0": "uno"}]
        first, second = build(sources), build(sources)
        for identity in (AB, ArtifactIdentity("c", "d"), ArtifactIdentity("e", "f")):
            assert dict(first.lookup(identity)) == dict(second.lookup(identity))

    def test_read_failure_aborts_build(self):
        """An I/O error while reading a source propagates as SourceReadError."""

        def broken():
            yield ("a/b", "x")
            raise OSError("device not ready")

        with pytest.raises(SourceReadError) as excinfo:
            build([{"a/b": "y"}, broken()])
        assert excinfo.value.source == "source[1]"
        assert "device not ready" in excinfo.value.reason

    def test_read_failure_names_source_object(self):
        class Unreadable:
            name = "/broken/commands.properties"

            @property
            def pairs(self):
                raise OSError("permission denied")

        with pytest.raises(SourceReadError) as excinfo:
            build([Unreadable()])
        assert excinfo.value.source == "/broken/commands.properties"
