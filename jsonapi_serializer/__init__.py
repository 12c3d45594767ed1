"""Serialize nested reference trees into JSON:API v1.1 documents."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import (
    CyclicReferenceError,
    DecodeError,
    EncodeError,
    JSONAPIErrorBuilder,
    SerializerError,
)
from .core.included import IncludedTable
from .serializers.base import JSONAPISerializer, serialize, serialize_text

__all__ = [
    "CyclicReferenceError",
    "DecodeError",
    "EncodeError",
    "IncludedTable",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPISerializer",
    "SerializerError",
    "serialize",
    "serialize_text",
]
