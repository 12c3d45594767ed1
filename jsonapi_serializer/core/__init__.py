"""Core JSON:API document, classification and error helpers."""

from .classifier import ReferenceListMode, is_reference, is_reference_list
from .document import JSONAPIDocumentBuilder
from .errors import JSONAPIErrorBuilder
from .included import IncludedTable

__all__ = [
    "IncludedTable",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "ReferenceListMode",
    "is_reference",
    "is_reference_list",
]
