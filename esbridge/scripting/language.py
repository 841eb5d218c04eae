"""Static metadata the editor needs about the scripting language."""

from __future__ import annotations

OBJECT_NAMESPACE = "godot"

EXT_JSMODULE = "js"
EXT_JSCLASS = "jsx"
EXT_JSON = "json"
EXT_JSMODULE_ENCRYPTED = "jse"
EXT_JSMODULE_BYTECODE = "jsb"
EXT_JSCLASS_ENCRYPTED = "jsxe"
EXT_JSCLASS_BYTECODE = "jsxb"
EXT_TSCLASS = "tsx"

RECOGNIZED_EXTENSIONS: tuple[str, ...] = (
    EXT_JSMODULE,
    EXT_JSCLASS,
    EXT_JSON,
    EXT_JSMODULE_ENCRYPTED,
    EXT_JSMODULE_BYTECODE,
    EXT_JSCLASS_ENCRYPTED,
    EXT_JSCLASS_BYTECODE,
)

COMMENT_DELIMITERS: tuple[str, ...] = ("//", "/* */")
STRING_DELIMITERS: tuple[str, ...] = ("' '", '" "', "` `")

_KEYWORDS = (
    "null", "false", "true", "if", "else", "return", "var", "this", "delete",
    "void", "typeof", "new", "in", "instanceof", "do", "while", "for", "break",
    "continue", "switch", "case", "default", "throw", "try", "catch", "finally",
    "function", "debugger", "with", "class", "const", "enum", "export",
    "extends", "import", "super", "implements", "interface", "let", "package",
    "private", "protected", "public", "static", "yield", "await", "prototype",
    "constructor", "get", "set", "of", "__proto__", "undefined", "number",
    "boolean", "string", "object", "symbol", "arguments", "join", "global",
    "as", "from", "*", "then", "resolve", "reject", "promise", "proxy",
    "revoke", "async", "globalThis",
)

_BUILTIN_OBJECTS = (
    "Object", "Array", "Error", "Number", "String", "Boolean", "Symbol",
    "Arguments", "Math", "JSON", "Date", "Function", "GeneratorFunction",
    "ForInIterator", "RegExp", "ArrayBuffer", "SharedArrayBuffer",
    "Uint8ClampedArray", "Int8Array", "Uint8Array", "Int16Array",
    "Uint16Array", "Int32Array", "Uint32Array", "BigInt64Array",
    "BigUint64Array", "Float32Array", "Float64Array", "DataView", "Map", "Set",
    "WeakMap", "WeakSet", "Generator", "Proxy", "Promise",
)

RESERVED_WORDS: tuple[str, ...] = _KEYWORDS + _BUILTIN_OBJECTS

_RESERVED_SET = frozenset(RESERVED_WORDS)


def is_reserved_word(word: str) -> bool:
    return word in _RESERVED_SET


def is_recognized_extension(path: str) -> bool:
    """Return True when ``path`` ends with an extension the script loader handles."""
    _, dot, extension = path.rpartition(".")
    return bool(dot) and extension.lower() in RECOGNIZED_EXTENSIONS


__all__ = [
    "COMMENT_DELIMITERS",
    "EXT_JSCLASS",
    "EXT_TSCLASS",
    "OBJECT_NAMESPACE",
    "RECOGNIZED_EXTENSIONS",
    "RESERVED_WORDS",
    "STRING_DELIMITERS",
    "is_recognized_extension",
    "is_reserved_word",
]
