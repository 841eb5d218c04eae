"""Configuration loading for esbridge (.esbridge.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .declarations.compiler import DeclarationSettings
from .declarations.constants import (
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_NAMESPACE,
    DEFAULT_OUTPUT_FILE,
    IGNORED_CLASSES,
    VIRTUAL_CLASS_PREFIX,
)

CONFIG_FILE_NAME = ".esbridge.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DeclarationConfig:
    """TypeScript declaration export settings."""

    namespace: str = DEFAULT_NAMESPACE
    output: Optional[Path] = None
    virtual_prefix: str = VIRTUAL_CLASS_PREFIX
    ignored_classes: List[str] = field(default_factory=lambda: sorted(IGNORED_CLASSES))
    codeblock_language: str = DEFAULT_CODE_LANGUAGE

    def to_settings(self) -> DeclarationSettings:
        return DeclarationSettings(
            namespace=self.namespace,
            virtual_prefix=self.virtual_prefix,
            ignored_classes=frozenset(self.ignored_classes),
            codeblock_language=self.codeblock_language,
        )


@dataclass
class ScriptConfig:
    """New-script template settings."""

    templates_dir: Optional[Path] = None
    object_namespace: Optional[str] = None


@dataclass
class EditorConfig:
    """External editor invocation."""

    exec_path: str = ""
    exec_flags: str = ""


@dataclass
class EsBridgeConfig:
    """Represents the settings defined in .esbridge.yml."""

    root: Path
    declarations: DeclarationConfig = field(default_factory=DeclarationConfig)
    scripts: ScriptConfig = field(default_factory=ScriptConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)

    @property
    def declaration_output(self) -> Path:
        return self.declarations.output or (self.root / DEFAULT_OUTPUT_FILE)


def load_config(config_path: Path) -> EsBridgeConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return EsBridgeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    declarations = DeclarationConfig()
    declaration_data = _as_dict(data.get("declarations"))
    if declaration_data:
        declarations.namespace = _as_str(declaration_data.get("namespace")) or declarations.namespace
        output = _as_str(declaration_data.get("output"))
        declarations.output = root / output if output else None
        if "virtual_prefix" in declaration_data:
            declarations.virtual_prefix = _as_str(declaration_data.get("virtual_prefix")) or ""
        if "ignored_classes" in declaration_data:
            declarations.ignored_classes = _as_str_list(declaration_data.get("ignored_classes"))
        declarations.codeblock_language = (
            _as_str(declaration_data.get("codeblock_language")) or declarations.codeblock_language
        )

    scripts = ScriptConfig()
    script_data = _as_dict(data.get("scripts"))
    if script_data:
        templates_dir = _as_str(script_data.get("templates_dir"))
        scripts.templates_dir = root / templates_dir if templates_dir else None
        scripts.object_namespace = _as_str(script_data.get("object_namespace"))

    editor = EditorConfig()
    editor_data = _as_dict(data.get("editor"))
    if editor_data:
        editor.exec_path = _as_str(editor_data.get("exec_path")) or ""
        editor.exec_flags = _as_str(editor_data.get("exec_flags")) or ""

    return EsBridgeConfig(root=root, declarations=declarations, scripts=scripts, editor=editor)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "DeclarationConfig",
    "EditorConfig",
    "EsBridgeConfig",
    "ScriptConfig",
    "load_config",
]
