"""Module specifier resolution for the script loader."""

from .resolver import ModuleResolver, get_base_dir, get_basename, resolve_specifier

__all__ = ["ModuleResolver", "get_base_dir", "get_basename", "resolve_specifier"]
