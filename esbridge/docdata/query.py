"""Filtering helpers for class listings."""

from __future__ import annotations

from typing import Iterable, List

from ..models import ClassDoc


def is_subsequence_of(needle: str, haystack: str, *, ignore_case: bool = True) -> bool:
    """Return True when the characters of ``needle`` appear in order in ``haystack``."""
    if ignore_case:
        needle = needle.lower()
        haystack = haystack.lower()
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


def filter_classes(classes: Iterable[ClassDoc], text: str = "") -> List[ClassDoc]:
    """Keep classes whose name or base class fuzzily matches ``text``, sorted by name."""
    selected = [
        class_doc
        for class_doc in classes
        if not text
        or is_subsequence_of(text, class_doc.name)
        or is_subsequence_of(text, class_doc.inherits)
    ]
    return sorted(selected, key=lambda class_doc: class_doc.name)


__all__ = ["filter_classes", "is_subsequence_of"]
