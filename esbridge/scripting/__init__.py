"""Scripting language metadata and editor integration helpers."""

from .external_editor import (
    ExternalEditorError,
    build_editor_arguments,
    editor_command,
    find_typescript_source,
    locate_typescript_source,
)
from .language import RESERVED_WORDS, is_recognized_extension, is_reserved_word
from .script_template import ScriptTemplateRenderer, fill_template_placeholders

__all__ = [
    "ExternalEditorError",
    "RESERVED_WORDS",
    "ScriptTemplateRenderer",
    "build_editor_arguments",
    "editor_command",
    "fill_template_placeholders",
    "find_typescript_source",
    "is_recognized_extension",
    "is_reserved_word",
    "locate_typescript_source",
]
