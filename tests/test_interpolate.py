"""Tests for variable substitution in association values."""

from association.interpolate import interpolate, resolve_pairs


def test_simple_reference():
    assert interpolate("${tool} install", {"tool": "mix"}) == "mix install"


def test_recursive_reference():
    variables = {"home": "/opt/mix", "bin": "${home}/bin"}
    assert interpolate("${bin}/install", variables) == "/opt/mix/bin/install"


def test_unknown_reference_left_verbatim():
    assert interpolate("${missing} run", {}) == "${missing} run"


def test_no_references():
    assert interpolate("plain", {"plain": "x"}) == "plain"


def test_cycle_left_verbatim():
    pairs = resolve_pairs([("a", "${b}"), ("b", "${a}"), ("c", "${c}!")])
    assert pairs == [("a", "${a}"), ("b", "${b}"), ("c", "${c}!")]


def test_resolve_pairs_keeps_order():
    pairs = resolve_pairs([("x/y", "${cmd} y"), ("cmd", "mix")])
    assert pairs == [("x/y", "mix y"), ("cmd", "mix")]
