"""Documentation model input for the declaration compiler."""

from .loader import DocumentationError, load_documentation
from .query import filter_classes, is_subsequence_of

__all__ = ["DocumentationError", "filter_classes", "is_subsequence_of", "load_documentation"]
