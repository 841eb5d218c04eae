"""Loads host class documentation from XML class references or JSON dumps."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from ..logging import get_logger
from ..models import (
    ArgumentDoc,
    ClassDoc,
    ConstantDoc,
    DocumentationModel,
    MethodDoc,
    PropertyDoc,
)

logger = get_logger("docdata")


class DocumentationError(RuntimeError):
    """Raised when documentation input cannot be read or understood."""


def load_documentation(path: Path | str) -> DocumentationModel:
    """Load a documentation model from a directory, XML file or JSON file.

    Classes are ordered by name, the same order the editor keeps them in.
    """
    source = Path(path).expanduser()
    if source.is_dir():
        classes = _load_xml_directory(source)
    elif not source.exists():
        raise DocumentationError(f"Documentation source not found: {source}")
    elif source.suffix.lower() == ".json":
        classes = _load_json_file(source)
    else:
        classes = _load_xml_file(source)

    model = DocumentationModel.from_classes(sorted(classes, key=lambda doc: doc.name))
    logger.debug("Loaded %d documented classes from %s", len(model), source)
    return model


def _load_xml_directory(directory: Path) -> List[ClassDoc]:
    classes: List[ClassDoc] = []
    for xml_path in sorted(directory.glob("*.xml")):
        classes.extend(_load_xml_file(xml_path))
    return classes


def _load_xml_file(path: Path) -> List[ClassDoc]:
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise DocumentationError(f"Failed to parse {path.name}: {exc}") from exc
    except OSError as exc:
        raise DocumentationError(f"Failed to read {path}: {exc}") from exc
    return parse_xml_classes(root, source=path.name)


def parse_xml_classes(root: ET.Element, *, source: str = "<xml>") -> List[ClassDoc]:
    """Parse a ``<class>`` element, or a container of them."""
    if root.tag == "class":
        return [_class_from_xml(root, source)]
    return [_class_from_xml(element, source) for element in root.iter("class")]


def _class_from_xml(element: ET.Element, source: str) -> ClassDoc:
    name = element.get("name")
    if not name:
        raise DocumentationError(f"{source}: <class> element without a name")

    constants = tuple(
        ConstantDoc(
            name=_required_attr(item, "name", source),
            value=item.get("value", ""),
            description=item.text or "",
        )
        for item in _children(element, "constants", "constant")
    )
    properties = tuple(
        PropertyDoc(
            name=_required_attr(item, "name", source),
            type=item.get("type", ""),
            description=item.text or "",
        )
        for item in _children(element, "members", "member")
    )
    methods = tuple(_method_from_xml(item, source) for item in _children(element, "methods", "method"))

    return ClassDoc(
        name=name,
        inherits=element.get("inherits", ""),
        brief_description=element.findtext("brief_description", default=""),
        description=element.findtext("description", default=""),
        constants=constants,
        properties=properties,
        methods=methods,
    )


def _method_from_xml(element: ET.Element, source: str) -> MethodDoc:
    return_element = element.find("return")
    return_type = return_element.get("type", "") if return_element is not None else ""
    arguments = sorted(element.findall("argument"), key=lambda item: _as_index(item.get("index")))
    return MethodDoc(
        name=_required_attr(element, "name", source),
        return_type=return_type,
        arguments=tuple(
            ArgumentDoc(
                name=_required_attr(item, "name", source),
                type=item.get("type", ""),
                default_value=item.get("default", ""),
            )
            for item in arguments
        ),
        description=element.findtext("description", default=""),
    )


def _children(element: ET.Element, group: str, tag: str) -> List[ET.Element]:
    container = element.find(group)
    if container is None:
        return []
    return container.findall(tag)


def _required_attr(element: ET.Element, name: str, source: str) -> str:
    value = element.get(name)
    if not value:
        raise DocumentationError(f"{source}: <{element.tag}> element without a {name}")
    return value


def _as_index(value: str | None) -> int:
    try:
        return int(value) if value is not None else 0
    except ValueError:
        return 0


def _load_json_file(path: Path) -> List[ClassDoc]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DocumentationError(f"Failed to parse {path.name}: {exc}") from exc
    except OSError as exc:
        raise DocumentationError(f"Failed to read {path}: {exc}") from exc
    return parse_json_classes(data, source=path.name)


def parse_json_classes(data: Any, *, source: str = "<json>") -> List[ClassDoc]:
    """Parse ``{"classes": [...]}``, ``{"classes": {name: {...}}}`` or a bare list."""
    entries: Any = data.get("classes") if isinstance(data, Mapping) else data
    if isinstance(entries, Mapping):
        entries = [
            {"name": key, **value} if isinstance(value, Mapping) else value
            for key, value in entries.items()
        ]
    if not isinstance(entries, list):
        raise DocumentationError(f"{source}: expected a list of classes")
    return [class_from_dict(entry, source=source) for entry in entries]


def class_from_dict(entry: Any, *, source: str = "<json>") -> ClassDoc:
    """Build a :class:`ClassDoc` from its JSON object form."""
    if not isinstance(entry, Mapping) or not entry.get("name"):
        raise DocumentationError(f"{source}: class entries need a name")
    return ClassDoc(
        name=str(entry["name"]),
        inherits=_text(entry.get("inherits")),
        brief_description=_text(entry.get("brief_description")),
        description=_text(entry.get("description")),
        constants=tuple(
            ConstantDoc(
                name=str(item["name"]),
                value=_text(item.get("value")),
                description=_text(item.get("description")),
            )
            for item in _items(entry.get("constants"), source)
        ),
        properties=tuple(
            PropertyDoc(
                name=str(item["name"]),
                type=_text(item.get("type")),
                description=_text(item.get("description")),
            )
            for item in _items(entry.get("properties", entry.get("members")), source)
        ),
        methods=tuple(
            MethodDoc(
                name=str(item["name"]),
                return_type=_text(item.get("return_type")),
                arguments=tuple(
                    ArgumentDoc(
                        name=str(argument["name"]),
                        type=_text(argument.get("type")),
                        default_value=_text(argument.get("default_value", argument.get("default"))),
                    )
                    for argument in _items(item.get("arguments"), source)
                ),
                description=_text(item.get("description")),
            )
            for item in _items(entry.get("methods"), source)
        ),
    )


def _items(value: Any, source: str) -> Iterable[Dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        isinstance(item, Mapping) and item.get("name") for item in value
    ):
        raise DocumentationError(f"{source}: members must be a list of named objects")
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    # Values and defaults are emitted verbatim, so keep JSON's spelling of literals.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "DocumentationError",
    "class_from_dict",
    "load_documentation",
    "parse_json_classes",
    "parse_xml_classes",
]
