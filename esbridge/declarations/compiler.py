"""Compiles host class documentation into a TypeScript declaration module."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping

from ..logging import get_logger
from ..models import ArgumentDoc, ClassDoc, ConstantDoc, MethodDoc, PropertyDoc
from .constants import (
    CLASS_DOC_INDENT,
    CLASS_TEMPLATE,
    CONSTANT_TEMPLATE,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_NAMESPACE,
    IGNORED_CLASSES,
    MEMBER_DOC_INDENT,
    METHOD_TEMPLATE,
    MODULE_TEMPLATE,
    PROPERTY_TEMPLATE,
    VIRTUAL_CLASS_PREFIX,
)
from .doctext import format_doc_text
from .template import apply_template
from .types import map_type


class DeclarationExportError(RuntimeError):
    """Raised when the declaration file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write declaration file {path}: {reason}")
        self.path = path


@dataclass(frozen=True)
class DeclarationSettings:
    """Knobs for the emitted module; defaults match the host editor export."""

    namespace: str = DEFAULT_NAMESPACE
    virtual_prefix: str = VIRTUAL_CLASS_PREFIX
    ignored_classes: frozenset[str] = IGNORED_CLASSES
    codeblock_language: str = DEFAULT_CODE_LANGUAGE


class DeclarationCompiler:
    """Renders class documentation through the declaration templates."""

    def __init__(self, settings: DeclarationSettings | None = None) -> None:
        self.settings = settings or DeclarationSettings()
        self.logger = get_logger("declarations")

    def compile(self, classes: Iterable[ClassDoc] | Mapping[str, ClassDoc]) -> str:
        """Return the full declaration module for the given classes."""
        if isinstance(classes, Mapping):
            classes = classes.values()
        blocks: List[str] = []
        skipped = 0
        for class_doc in classes:
            if not self.should_export(class_doc):
                skipped += 1
                continue
            blocks.append(self.render_class(class_doc))
        self.logger.debug("Rendered %d classes, skipped %d", len(blocks), skipped)
        return apply_template(
            MODULE_TEMPLATE,
            {"namespace": self.settings.namespace, "classes": "".join(blocks)},
        )

    def export(
        self, classes: Iterable[ClassDoc] | Mapping[str, ClassDoc], destination: Path | str
    ) -> Path:
        """Compile and write the module to ``destination``, replacing its content."""
        path = Path(destination)
        text = self.compile(classes)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise DeclarationExportError(path, exc.strerror or str(exc)) from exc
        self.logger.info("Wrote TypeScript declarations to %s", path)
        return path

    def should_export(self, class_doc: ClassDoc) -> bool:
        prefix = self.settings.virtual_prefix
        if prefix and class_doc.name.startswith(prefix):
            return False
        return class_doc.name not in self.settings.ignored_classes

    def render_class(self, class_doc: ClassDoc) -> str:
        brief_description = self._format(class_doc.brief_description, CLASS_DOC_INDENT)
        description = self._format(class_doc.description, CLASS_DOC_INDENT)
        if description == brief_description:
            description = ""
        values = {
            "name": class_doc.name,
            "inherits": class_doc.inherits,
            "extends": " extends " if class_doc.inherits else "",
            "brief_description": brief_description,
            "description": description,
            "constants": "".join(self.render_constant(doc) for doc in class_doc.constants),
            "properties": "".join(self.render_property(doc) for doc in class_doc.properties),
            "methods": "".join(self.render_method(doc) for doc in class_doc.methods),
        }
        return apply_template(CLASS_TEMPLATE, values)

    def render_constant(self, constant: ConstantDoc) -> str:
        return apply_template(
            CONSTANT_TEMPLATE,
            {
                "description": self._format(constant.description, MEMBER_DOC_INDENT),
                "name": constant.name,
                "value": constant.value,
            },
        )

    def render_property(self, prop: PropertyDoc) -> str:
        return apply_template(
            PROPERTY_TEMPLATE,
            {
                "description": self._format(prop.description, MEMBER_DOC_INDENT),
                "name": prop.name,
                "type": map_type(prop.type),
            },
        )

    def render_method(self, method: MethodDoc) -> str:
        return apply_template(
            METHOD_TEMPLATE,
            {
                "description": self._format(method.description, MEMBER_DOC_INDENT),
                "name": method.name,
                "params": self.render_parameters(method.arguments),
                "return_type": map_type(method.return_type),
            },
        )

    @staticmethod
    def render_parameters(arguments: Iterable[ArgumentDoc]) -> str:
        params = []
        for argument in arguments:
            param = f"{argument.name}: {map_type(argument.type)}"
            if argument.is_optional:
                param += f" = {argument.default_value}"
            params.append(param)
        return ", ".join(params)

    def _format(self, text: str, indent: str) -> str:
        return format_doc_text(text, indent, code_language=self.settings.codeblock_language)


__all__ = ["DeclarationCompiler", "DeclarationExportError", "DeclarationSettings"]
