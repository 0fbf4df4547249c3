"""Tests for the artassoc command line entry point."""

import json

import pytest

from artassoc import format_results, main, parse_requests
from constants import Constants, ExitCodes


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config and environment out of CLI runs."""
    monkeypatch.chdir(tmp_path)
    for var in (Constants.ENV_SEARCH_PATH, Constants.ENV_CONFIG, Constants.ENV_LOG_LEVEL):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(Constants, "CONFIG_LOCATIONS", [])


def write_source(directory, body, resource="artassoc/commands.properties"):
    path = directory / resource
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path


class TestMain:
    """Test end-to-end CLI runs."""

    def test_resolves_artifacts(self, tmp_path, capsys):
        write_source(tmp_path / "etc", "a/b = install-a\na/b/2.0 = install-a2\n")
        rc = main(["-a", "a/b/1.0", "-a", "a/b/2.0", "-s", str(tmp_path / "etc")])
        assert rc == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out.splitlines() == [
            "a/b/1.0: install-a",
            "a/b/2.0: install-a2",
        ]

    def test_missing_association(self, tmp_path, capsys):
        write_source(tmp_path / "etc", "a/b/1.0 = x\n")
        rc = main(["-a", "a/b/2.0", "-s", str(tmp_path / "etc")])
        assert rc == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out.strip() == "a/b/2.0: <none>"

    def test_error_on_missing(self, tmp_path):
        write_source(tmp_path / "etc", "a/b/1.0 = x\n")
        rc = main(["-a", "a/b/2.0", "-s", str(tmp_path / "etc"), "--error-on-missing"])
        assert rc == ExitCodes.EXIT_MISSING.value

    def test_invalid_artifact(self, tmp_path):
        rc = main(["-a", "a/b", "-s", str(tmp_path)])
        assert rc == ExitCodes.USAGE_ERROR.value

    def test_unreadable_source(self, tmp_path, capsys):
        write_source(tmp_path / "etc", "{broken", resource="assoc.json")
        rc = main(["-a", "a/b/1.0", "-s", str(tmp_path / "etc"), "-r", "assoc.json"])
        assert rc == ExitCodes.FILE_ERROR.value
        assert capsys.readouterr().out == ""

    def test_json_output(self, tmp_path, capsys):
        write_source(tmp_path / "etc", "a/b = all\n")
        rc = main(["-a", "a/b/1.0", "-a", "c/d/1.0", "-s", str(tmp_path / "etc"), "-j"])
        assert rc == ExitCodes.SUCCESS.value
        assert json.loads(capsys.readouterr().out) == [
            {"artifact": "a/b/1.0", "value": "all"},
            {"artifact": "c/d/1.0", "value": None},
        ]

    def test_selector_option(self, tmp_path, capsys):
        write_source(tmp_path / "etc", "a/b/1.4.0 = one-four\n")
        main(["-a", "a/b/^1.0.0", "-s", str(tmp_path / "etc"), "--selector", "semver"])
        assert capsys.readouterr().out.strip() == "a/b/^1.0.0: one-four"

    def test_config_file(self, tmp_path, capsys):
        write_source(tmp_path / "etc", "a/b/1.0 = exact-one\n", resource="cmds.properties")
        config = tmp_path / "artassoc-config.yml"
        config.write_text(
            f"resource: cmds.properties\nsearch_path:\n  - {tmp_path / 'etc'}\nselector: exact\n",
            encoding="utf-8",
        )
        rc = main(["-a", "a/b/1.0", "-a", "a/b/1", "-c", str(config)])
        assert rc == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out.splitlines() == ["a/b/1.0: exact-one", "a/b/1: <none>"]


class TestHelpers:
    """Test CLI helper functions."""

    def test_parse_requests(self):
        requests = parse_requests(["a/b/1.0", " c/d/2 "])
        assert [(token, key.version) for token, key in requests] == [("a/b/1.0", "1.0"), ("c/d/2", "2")]

    def test_parse_requests_rejects_unversioned(self):
        assert parse_requests(["a/b/1.0", "a/b"]) is None

    def test_format_results_text(self):
        assert format_results([("a/b/1", "x"), ("c/d/1", None)]) == "a/b/1: x\nc/d/1: <none>"
