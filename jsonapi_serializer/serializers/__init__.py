"""Reference tree serializers."""

from .base import JSONAPISerializer, serialize, serialize_text

__all__ = ["JSONAPISerializer", "serialize", "serialize_text"]
