"""Serializer exceptions and JSON:API error object builders."""

from typing import Any


class SerializerError(Exception):
    """Base class for failures reported by the serializer."""

    status = "500"
    title = "Serialization failed"


class DecodeError(SerializerError, ValueError):
    """Input text is not a JSON document the serializer can process."""

    status = "400"
    title = "Invalid JSON document"


class EncodeError(SerializerError, ValueError):
    """The assembled document could not be encoded back to JSON text."""

    status = "500"
    title = "Document encoding failed"


class CyclicReferenceError(SerializerError):
    """A container was reached again while it was still being processed."""

    status = "422"
    title = "Cyclic reference"

    def __init__(self, type_: Any = None, id_: Any = None) -> None:
        self.type_ = type_
        self.id_ = id_
        if type_ is None and id_ is None:
            message = "Input tree contains a cycle."
        else:
            message = f"Reference {type_}/{id_} embeds itself."
        super().__init__(message)


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def from_exception(self, exc: BaseException) -> dict[str, Any]:
        """Return an error object describing ``exc``."""
        if isinstance(exc, SerializerError):
            return self.error_object(
                status=exc.status, title=exc.title, detail=str(exc) or None
            )
        return self.error_object(
            status="500", title="Internal Server Error", detail=str(exc) or None
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}
