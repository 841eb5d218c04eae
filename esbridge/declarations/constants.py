"""Templates and fixed tables used when emitting TypeScript declarations."""

from __future__ import annotations

DEFAULT_NAMESPACE = "godot"
DEFAULT_OUTPUT_FILE = "godot.d.ts"
DEFAULT_CODE_LANGUAGE = "gdscript"

# Classes whose names start with this marker are global scopes, not classes.
VIRTUAL_CLASS_PREFIX = "@"

# Primitive aliases and the "no value" sentinel have no declaration of their own.
IGNORED_CLASSES: frozenset[str] = frozenset({"int", "float", "bool", "Array", "Nil"})

TYPE_NAME_MAP: dict[str, str] = {
    "int": "number",
    "float": "number",
    "bool": "boolean",
    "String": "string",
}

CLASS_DOC_INDENT = "\t "
MEMBER_DOC_INDENT = "\t\t "

CONSTANT_TEMPLATE = (
    "\n"
    "\t\t/**\n"
    "${description}\n"
    "\t\t*/\n"
    "\t\tstatic readonly ${name}: number = ${value};\n"
)

PROPERTY_TEMPLATE = (
    "\n"
    "\t\t/**\n"
    "${description}\n"
    "\t\t*/\n"
    "\t\t${name}: ${type};\n"
)

METHOD_TEMPLATE = (
    "\n"
    "\t\t/**\n"
    "${description}\n"
    "\t\t*/\n"
    "\t\t${name}(${params}): ${return_type};\n"
)

CLASS_TEMPLATE = (
    "\n"
    "\t/**\n"
    "${brief_description}\n"
    "\n"
    "${description}\n"
    "\t*/\n"
    "\tclass ${name}${extends}${inherits} {\n"
    "${constants}\n"
    "${properties}\n"
    "${methods}\n"
    "\t}\n"
)

MODULE_TEMPLATE = "declare module ${namespace} {${classes}}\n"


__all__ = [
    "CLASS_DOC_INDENT",
    "CLASS_TEMPLATE",
    "CONSTANT_TEMPLATE",
    "DEFAULT_CODE_LANGUAGE",
    "DEFAULT_NAMESPACE",
    "DEFAULT_OUTPUT_FILE",
    "IGNORED_CLASSES",
    "MEMBER_DOC_INDENT",
    "METHOD_TEMPLATE",
    "MODULE_TEMPLATE",
    "PROPERTY_TEMPLATE",
    "TYPE_NAME_MAP",
    "VIRTUAL_CLASS_PREFIX",
]
