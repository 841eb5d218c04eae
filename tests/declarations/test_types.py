"""Tests for host type name mapping."""

from __future__ import annotations

import pytest

from esbridge.declarations.types import map_type


@pytest.mark.parametrize(
    ("host", "expected"),
    [
        ("", "void"),
        ("int", "number"),
        ("float", "number"),
        ("bool", "boolean"),
        ("String", "string"),
        ("MyClass", "MyClass"),
        ("Vector2", "Vector2"),
        ("void", "void"),
        ("string", "string"),
    ],
)
def test_map_type(host: str, expected: str) -> None:
    assert map_type(host) == expected
