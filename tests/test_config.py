"""Tests for esbridge.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from esbridge.config import ConfigError, EsBridgeConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, EsBridgeConfig)
    assert config.root == tmp_path.resolve()
    assert config.declarations.namespace == "godot"
    assert config.declarations.output is None
    assert config.declaration_output == tmp_path.resolve() / "godot.d.ts"
    assert config.declarations.ignored_classes == ["Array", "Nil", "bool", "float", "int"]
    assert config.scripts.templates_dir is None
    assert config.editor.exec_path == ""
    assert config.editor.exec_flags == ""


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".esbridge.yml"
    config_file.write_text(
        """
declarations:
  namespace: engine
  output: "types/engine.d.ts"
  virtual_prefix: "_"
  ignored_classes: [Nil, Variant]
  codeblock_language: js
scripts:
  templates_dir: "editor/templates"
  object_namespace: engine
editor:
  exec_path: code
  exec_flags: "{file}:{line}:{col}"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)
    root = tmp_path.resolve()

    assert config.declarations.namespace == "engine"
    assert config.declaration_output == root / "types" / "engine.d.ts"
    assert config.scripts.templates_dir == root / "editor" / "templates"
    assert config.scripts.object_namespace == "engine"
    assert config.editor.exec_path == "code"
    assert config.editor.exec_flags == "{file}:{line}:{col}"

    settings = config.declarations.to_settings()
    assert settings.namespace == "engine"
    assert settings.virtual_prefix == "_"
    assert settings.ignored_classes == frozenset({"Nil", "Variant"})
    assert settings.codeblock_language == "js"


def test_load_config_accepts_directory_and_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".esbridge.yml").write_text("\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.declarations.namespace == "godot"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".esbridge.yml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".esbridge.yml").write_text("declarations: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)
