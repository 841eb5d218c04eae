"""Resolution of relative module specifiers against the importing directory.

Paths follow the host editor's conventions: ``res://`` style scheme prefixes
and a leading ``/`` are roots, and both ``/`` and ``\\`` separate segments.
Climbing above a root is clamped at the root rather than reported, which the
script loader has always relied on.
"""

from __future__ import annotations

from ..logging import get_logger


def _split_root(path: str) -> tuple[str, str]:
    scheme_end = path.find("://")
    if scheme_end != -1:
        return path[: scheme_end + 3], path[scheme_end + 3 :]
    if path.startswith("/"):
        return "/", path[1:]
    return "", path


def get_base_dir(path: str) -> str:
    """Return the parent directory of ``path``; the parent of a root is itself."""
    root, rest = _split_root(path)
    separator = max(rest.rfind("/"), rest.rfind("\\"))
    if separator == -1:
        return root
    return root + rest[:separator]


def get_basename(path: str) -> str:
    """Return ``path`` without the extension of its last segment."""
    dot = path.rfind(".")
    if dot < 0 or dot < max(path.rfind("/"), path.rfind("\\")):
        return path
    return path[:dot]


def _normalise_base_dir(base_dir: str) -> str:
    base = base_dir
    while base.endswith("."):
        if base.endswith(".."):
            base = get_base_dir(get_base_dir(base))
        else:
            base = get_base_dir(base)
    return base


def resolve_specifier(specifier: str, base_dir: str) -> str:
    """Resolve ``specifier`` against ``base_dir``.

    Non-relative specifiers (no leading ``.``) are returned unchanged.
    """
    if not specifier.startswith("."):
        return specifier

    base = _normalise_base_dir(base_dir)
    tail = specifier
    while tail.startswith("."):
        if tail.startswith("../"):
            base = get_base_dir(base)
            tail = tail[3:]
        elif tail.startswith("./"):
            tail = tail[2:]
        else:
            tail = get_basename(tail)
            break

    if not base.endswith("/"):
        base += "/"
    return base + tail


class ModuleResolver:
    """Resolves import specifiers on behalf of the script loader."""

    def __init__(self) -> None:
        self.logger = get_logger("modules")

    def resolve(self, specifier: str, importer: str) -> str:
        """Resolve ``specifier`` as written inside the file ``importer``."""
        return self.resolve_in(specifier, get_base_dir(importer))

    def resolve_in(self, specifier: str, base_dir: str) -> str:
        resolved = resolve_specifier(specifier, base_dir)
        if resolved != specifier:
            self.logger.debug("Resolved %s from %s to %s", specifier, base_dir, resolved)
        return resolved


__all__ = ["ModuleResolver", "get_base_dir", "get_basename", "resolve_specifier"]
