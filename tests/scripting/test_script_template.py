"""Tests for new-script templates."""

from __future__ import annotations

from pathlib import Path

from esbridge.scripting import ScriptTemplateRenderer, fill_template_placeholders


def test_default_template_extends_host_class() -> None:
    source = ScriptTemplateRenderer().render("Player", "KinematicBody2D")

    assert source.startswith("export default class Player extends godot.KinematicBody2D {\n")
    assert "constructor() {\n        super();\n    }" in source
    assert "_process(delta) {" in source
    assert source.endswith("}\n")


def test_object_namespace_is_configurable() -> None:
    source = ScriptTemplateRenderer(object_namespace="engine").render("Hud", "Control")
    assert source.startswith("export default class Hud extends engine.Control {")


def test_templates_dir_overrides_bundled_template(tmp_path: Path) -> None:
    (tmp_path / "script_class.jsx.j2").write_text(
        "class {{ class_name }} : {{ base_class_name }}", encoding="utf-8"
    )

    source = ScriptTemplateRenderer(tmp_path).render("A", "B")

    assert source == "class A : B\n"


def test_fill_template_placeholders() -> None:
    source = "export default class %CLASS% extends godot.%BASE% {}\n// %CLASS%"
    assert fill_template_placeholders(source, "Enemy", "Area2D") == (
        "export default class Enemy extends godot.Area2D {}\n// Enemy"
    )


def test_project_template_placeholders_are_filled(tmp_path: Path) -> None:
    (tmp_path / "script_class.jsx.j2").write_text(
        "export default class %CLASS% extends godot.%BASE% {}", encoding="utf-8"
    )

    source = ScriptTemplateRenderer(tmp_path).render("Player", "Node2D")

    assert "%CLASS%" not in source
    assert source == "export default class Player extends godot.Node2D {}\n"
