"""TypeScript declaration generation from host class documentation."""

from .compiler import DeclarationCompiler, DeclarationExportError, DeclarationSettings
from .doctext import format_doc_text
from .template import apply_template
from .types import map_type

__all__ = [
    "DeclarationCompiler",
    "DeclarationExportError",
    "DeclarationSettings",
    "apply_template",
    "format_doc_text",
    "map_type",
]
