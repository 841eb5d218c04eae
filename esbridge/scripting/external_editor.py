"""Helpers for opening compiled class scripts in an external editor."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, List, Mapping, Optional

from ..logging import get_logger
from .language import EXT_JSCLASS, EXT_TSCLASS

RESOURCE_PREFIX = "res://"
TSCONFIG_NAME = "tsconfig.json"

logger = get_logger("editor")


class ExternalEditorError(RuntimeError):
    """Raised when the TypeScript source of a compiled script cannot be found."""


def _replace_nocase(text: str, old: str, new: str) -> str:
    if not old:
        return text
    return re.sub(re.escape(old), lambda _: new, text, flags=re.IGNORECASE)


def locate_typescript_source(script_path: str, compiler_options: Mapping[str, Any]) -> Optional[str]:
    """Map a compiled ``.jsx`` path to the ``.tsx`` it was built from.

    ``outDir`` and ``rootDir`` are taken from tsconfig's compiler options with
    their leading ``.`` removed, so ``./dist`` matches ``res://dist``.
    """
    suffix = "." + EXT_JSCLASS
    if not script_path.lower().endswith(suffix):
        return None
    root_dir = str(compiler_options.get("rootDir") or "").replace(".", "", 1)
    out_dir = str(compiler_options.get("outDir") or "").replace(".", "", 1)
    source_path = script_path[: -len(suffix)] + "." + EXT_TSCLASS
    return _replace_nocase(source_path, out_dir, root_dir)


def globalize_path(path: str, project_root: Path) -> Path:
    """Turn a ``res://`` path into a filesystem path under ``project_root``."""
    if path.startswith(RESOURCE_PREFIX):
        return project_root / path[len(RESOURCE_PREFIX) :]
    return Path(path)


def read_compiler_options(project_root: Path) -> Mapping[str, Any]:
    tsconfig = project_root / TSCONFIG_NAME
    try:
        data = json.loads(tsconfig.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ExternalEditorError(f"Failed to read {TSCONFIG_NAME} at project root") from exc
    except json.JSONDecodeError as exc:
        raise ExternalEditorError(f"Failed parsing {TSCONFIG_NAME}: {exc}") from exc
    options = data.get("compilerOptions") if isinstance(data, dict) else None
    return options if isinstance(options, dict) else {}


def find_typescript_source(script_path: str, project_root: Path) -> Path:
    """Return the existing ``.tsx`` source file for a compiled class script."""
    source = locate_typescript_source(script_path, read_compiler_options(project_root))
    if source is None:
        raise ExternalEditorError(f"{script_path} is not a compiled class script")
    source_file = globalize_path(source, project_root)
    if not source_file.exists():
        raise ExternalEditorError(f"TypeScript source doesn't exist at: {source}")
    logger.debug("Mapped %s to %s", script_path, source_file)
    return source_file


def split_editor_flags(flags: str) -> List[str]:
    """Split on unquoted spaces; ``"`` groups words unless escaped with ``\\``."""
    args: List[str] = []
    current: List[str] = []
    inside_quotes = False
    previous = ""
    for char in flags:
        if char == '"' and previous != "\\":
            inside_quotes = not inside_quotes
        elif char == " " and not inside_quotes:
            if current:
                args.append("".join(current))
            current = []
        else:
            current.append(char)
        previous = char
    if current:
        args.append("".join(current))
    return args


def build_editor_arguments(
    flags: str,
    script_path: str,
    project_path: str,
    line: int = 0,
    column: int = 0,
) -> List[str]:
    """Expand the editor's exec flags into an argument list.

    ``{line}`` and ``{col}`` are substituted before splitting, ``{project}``
    and ``{file}`` per argument so paths with spaces stay intact. The script
    path is appended when no argument mentions ``{file}``.
    """
    args: List[str] = []
    has_file_flag = False
    if flags:
        expanded = _replace_nocase(flags, "{line}", str(max(line, 0)))
        expanded = _replace_nocase(expanded, "{col}", str(column))
        expanded = expanded.strip().replace("\\\\", "\\")
        for arg in split_editor_flags(expanded):
            if "{file}" in arg:
                has_file_flag = True
            arg = _replace_nocase(arg, "{project}", project_path)
            arg = _replace_nocase(arg, "{file}", script_path)
            args.append(arg)
    if not has_file_flag:
        args.append(script_path)
    return args


def editor_command(
    script_path: str,
    project_root: Path,
    exec_path: str,
    flags: str = "",
    *,
    line: int = 0,
    column: int = 0,
) -> List[str]:
    """Return the command that opens the TypeScript source of ``script_path``.

    The source file is globalized before the flags are expanded, and
    ``{project}`` is the project root on disk.
    """
    if not exec_path:
        raise ExternalEditorError("No external editor configured (editor.exec_path)")
    source_file = find_typescript_source(script_path, project_root)
    args = build_editor_arguments(flags, str(source_file), str(project_root), line, column)
    logger.debug("Editor command for %s: %s %s", script_path, exec_path, args)
    return [exec_path, *args]


__all__ = [
    "ExternalEditorError",
    "build_editor_arguments",
    "editor_command",
    "find_typescript_source",
    "globalize_path",
    "locate_typescript_source",
    "read_compiler_options",
    "split_editor_flags",
]
