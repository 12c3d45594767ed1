"""JSON:API top-level document assembly."""

from typing import Any, Iterable, Mapping


class JSONAPIDocumentBuilder:
    """Build JSON:API documents from processed data and included resources."""

    def build(
        self,
        data: Any,
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Return ``{"data": ...}`` plus ``included`` when there is any."""
        document: dict[str, Any] = {"data": data}
        included_list = [dict(item) for item in included or ()]
        if included_list:
            document["included"] = included_list
        return document

    def build_error(self, errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API error document from error objects."""
        return {"errors": [dict(error) for error in errors]}
