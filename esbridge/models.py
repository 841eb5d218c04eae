"""Documentation records shared by the declaration compiler and loaders."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class ArgumentDoc:
    """A single method argument; a non-empty default makes it optional."""

    name: str
    type: str = ""
    default_value: str = ""

    @property
    def is_optional(self) -> bool:
        return bool(self.default_value)


@dataclass(frozen=True)
class ConstantDoc:
    """Named numeric constant, value kept as source text."""

    name: str
    value: str
    description: str = ""


@dataclass(frozen=True)
class PropertyDoc:
    name: str
    type: str = ""
    description: str = ""


@dataclass(frozen=True)
class MethodDoc:
    """Method signature and documentation. An empty return type means no value."""

    name: str
    return_type: str = ""
    arguments: Tuple[ArgumentDoc, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class ClassDoc:
    """Reflection documentation for one host class."""

    name: str
    inherits: str = ""
    brief_description: str = ""
    description: str = ""
    constants: Tuple[ConstantDoc, ...] = ()
    properties: Tuple[PropertyDoc, ...] = ()
    methods: Tuple[MethodDoc, ...] = ()


@dataclass
class DocumentationModel:
    """Ordered collection of class documentation keyed by class name."""

    classes: Dict[str, ClassDoc] = field(default_factory=dict)

    @classmethod
    def from_classes(cls, classes: Iterable[ClassDoc]) -> "DocumentationModel":
        return cls(classes={doc.name: doc for doc in classes})

    def __iter__(self) -> Iterator[ClassDoc]:
        return iter(self.classes.values())

    def __len__(self) -> int:
        return len(self.classes)

    def __contains__(self, name: object) -> bool:
        return name in self.classes

    def get(self, name: str) -> Optional[ClassDoc]:
        return self.classes.get(name)


__all__ = [
    "ArgumentDoc",
    "ClassDoc",
    "ConstantDoc",
    "DocumentationModel",
    "MethodDoc",
    "PropertyDoc",
]
