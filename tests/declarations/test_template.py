"""Tests for `${name}` template substitution."""

from __future__ import annotations

from esbridge.declarations.template import apply_template, placeholder


def test_apply_template_replaces_every_occurrence() -> None:
    assert apply_template("${a} and ${a}", {"a": "x"}) == "x and x"


def test_apply_template_leaves_unknown_placeholders() -> None:
    assert apply_template("${a} ${b}", {"a": "1"}) == "1 ${b}"


def test_apply_template_ignores_unused_keys() -> None:
    assert apply_template("plain ${a}", {"a": "text", "unused": "zzz"}) == "plain text"


def test_apply_template_does_not_rescan_values() -> None:
    result = apply_template("${a}|${b}", {"a": "${b}", "b": "B"})
    assert result == "${b}|B"


def test_apply_template_prefers_longer_keys() -> None:
    assert apply_template("${ab}${a}", {"a": "1", "ab": "2"}) == "21"


def test_apply_template_supports_successive_passes() -> None:
    partial = apply_template("class ${name} {${body}}", {"body": "x;"})
    assert partial == "class ${name} {x;}"
    assert apply_template(partial, {"name": "Node"}) == "class Node {x;}"


def test_apply_template_is_idempotent_for_plain_values() -> None:
    values = {"name": "Sprite", "type": "Texture"}
    once = apply_template("${name}: ${type} ${missing}", values)
    assert apply_template(once, values) == once


def test_apply_template_with_empty_mapping_returns_template() -> None:
    assert apply_template("${a}", {}) == "${a}"


def test_placeholder_format() -> None:
    assert placeholder("methods") == "${methods}"
