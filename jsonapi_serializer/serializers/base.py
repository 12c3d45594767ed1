"""Serialize reference trees into JSON:API documents."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from jsonapi_serializer.core.classifier import (
    ID_KEY,
    TYPE_KEY,
    ReferenceListMode,
    is_container,
    is_positional,
    iter_entries,
    is_reference,
    is_reference_list,
)
from jsonapi_serializer.core.document import JSONAPIDocumentBuilder
from jsonapi_serializer.core.errors import (
    CyclicReferenceError,
    DecodeError,
    EncodeError,
)
from jsonapi_serializer.core.included import IncludedTable
from jsonapi_serializer.schemas.resource import JSONAPIDocument

logger = logging.getLogger(__name__)

_ROOT: frozenset[int] = frozenset()


class JSONAPISerializer:
    """Turn nested dicts and lists into JSON:API resource objects.

    Any dict holding both ``Meta.type_key`` and ``Meta.id_key`` is a
    reference. References embedded under another reference become
    relationships and are collected, once per ``(type, id)``, into the
    document's ``included`` member.
    """

    class Meta:
        """Serializer configuration (reserved keys, text output)."""

        type_key: str = TYPE_KEY
        id_key: str = ID_KEY
        indent: int | None = 4
        ensure_ascii: bool = True

    document_builder_class: type = JSONAPIDocumentBuilder

    def __init__(self) -> None:
        self.flatten_relationships = True

    def __call__(
        self, elements: Any, flatten_relationships: bool = True
    ) -> dict[str, Any]:
        return self.serialize(elements, flatten_relationships)

    def serialize(
        self, elements: Any, flatten_relationships: bool = True
    ) -> dict[str, Any]:
        """Return the JSON:API document for ``elements``.

        ``flatten_relationships`` is recorded but nested relationship groups
        are always flattened into dotted keys.
        """
        self.flatten_relationships = flatten_relationships
        included = IncludedTable()
        data = self.process_element(elements, included)
        logger.debug(
            "Serialized document with %d included resources (flatten=%s)",
            len(included),
            flatten_relationships,
        )
        return self.document_builder_class().build(
            data, included=included.resources()
        )

    def serialize_text(
        self, json_text: str | bytes, flatten_relationships: bool = True
    ) -> str:
        """Decode JSON text, serialize it and encode the document pretty-printed."""
        try:
            elements = json.loads(json_text)
        except (TypeError, ValueError) as exc:
            logger.warning("Rejected input text: %s", exc)
            raise DecodeError("Not valid JSON string") from exc
        if not is_container(elements):
            logger.warning(
                "Rejected input text with %s top level", type(elements).__name__
            )
            raise DecodeError("JSON document must be an object or an array")

        document = self.serialize(elements, flatten_relationships)
        try:
            return json.dumps(
                document,
                indent=self.Meta.indent,
                ensure_ascii=self.Meta.ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            logger.warning("Could not encode document: %s", exc)
            raise EncodeError("Error during JSON encoding of the object") from exc

    def serialize_model(
        self, elements: Any, flatten_relationships: bool = True
    ) -> JSONAPIDocument:
        """Serialize and validate the document against the pydantic schemas."""
        return JSONAPIDocument.model_validate(
            self.serialize(elements, flatten_relationships)
        )

    def process_element(
        self, element: Any, included: IncludedTable, *, _ancestors: frozenset[int] = _ROOT
    ) -> Any:
        """Replace every reference in ``element`` by its resource object."""
        if not is_container(element):
            return element

        parsed = self.parse_reference(element, included, _ancestors=_ancestors)
        if parsed is not None:
            return parsed

        inner = self._descend(element, _ancestors)
        if isinstance(element, dict):
            return {
                key: self.process_element(value, included, _ancestors=inner)
                for key, value in element.items()
            }
        return [
            self.process_element(value, included, _ancestors=inner)
            for value in element
        ]

    def parse_reference(
        self,
        reference: Any,
        included: IncludedTable,
        *,
        include_attributes: bool = True,
        include_relationships: bool = True,
        _ancestors: frozenset[int] = _ROOT,
    ) -> dict[str, Any] | None:
        """Return the resource object for ``reference``, or None if empty."""
        inner = self._descend(reference, _ancestors)
        resource = self.get_identifier(reference)

        if include_attributes:
            attributes = self.get_attributes(
                reference, exclude_reference_keys=True, _ancestors=inner
            )
            if attributes:
                resource["attributes"] = attributes

        if include_relationships:
            candidates = {
                key: value
                for key, value in iter_entries(reference)
                if not is_positional(key)
                and (
                    self.is_reference(value)
                    or self.is_reference_list(value, ReferenceListMode.ANY)
                )
            }
            if candidates:
                relationships = self.get_relationships(
                    candidates, included, _ancestors=inner
                )
                if relationships:
                    resource["relationships"] = relationships

        return resource or None

    def get_identifier(self, reference: Any) -> dict[str, Any]:
        """Return the ``type``/``id`` members present on ``reference``."""
        identifier: dict[str, Any] = {}
        if not isinstance(reference, Mapping):
            return identifier
        type_key, id_key = self.Meta.type_key, self.Meta.id_key
        if type_key in reference:
            identifier[type_key.strip("_")] = reference[type_key]
        if id_key in reference:
            identifier[id_key.strip("_")] = self.get_id(reference[id_key])
        return identifier

    def get_id(self, value: Any) -> str:
        """Return the resource id as a string."""
        return "" if value is None else str(value)

    def get_attributes(
        self,
        reference: Any,
        *,
        exclude_reference_keys: bool = True,
        _ancestors: frozenset[int] = _ROOT,
    ) -> dict[str, Any]:
        """Return the plain (non-reference) members of ``reference``.

        List items are never attributes. Nested dicts are folded recursively
        and dropped when nothing survives inside them.
        """
        attributes: dict[str, Any] = {}
        for key, value in iter_entries(reference):
            if is_positional(key):
                continue
            if exclude_reference_keys and key in (self.Meta.type_key, self.Meta.id_key):
                continue
            if self.is_reference(value) or self.is_reference_list(value):
                continue
            if isinstance(value, dict):
                nested = self.get_attributes(
                    value,
                    exclude_reference_keys=False,
                    _ancestors=self._descend(value, _ancestors),
                )
                if nested:
                    attributes[key] = nested
                continue
            attributes[key] = value
        return attributes

    def get_relationships(
        self,
        relationships: Any,
        included: IncludedTable,
        *,
        nested: bool = False,
        _ancestors: frozenset[int] = _ROOT,
    ) -> dict[Any, Any]:
        """Return relationship members and register embedded resources.

        Groups that are not references themselves are walked recursively and
        their members flattened into ``"<key>.<sub key>"`` names; list items
        collapse onto the group's own key.
        """
        extracted: dict[Any, Any] = {}
        for key, relationship in iter_entries(relationships):
            if not is_container(relationship):
                continue

            if not self.is_reference(relationship):
                group = self.get_relationships(
                    relationship,
                    included,
                    nested=True,
                    _ancestors=self._descend(relationship, _ancestors),
                )
                for sub_key, sub_relationship in group.items():
                    if is_positional(sub_key):
                        extracted[key] = {"data": sub_relationship}
                    else:
                        extracted[f"{key}.{sub_key}"] = {"data": sub_relationship}
                continue

            resource = self.parse_reference(relationship, included, _ancestors=_ancestors)
            included.upsert(
                relationship[self.Meta.type_key],
                relationship[self.Meta.id_key],
                resource,
            )
            identifier = self.get_identifier(relationship)
            extracted[key] = identifier if nested else {"data": identifier}
        return extracted

    def is_reference(self, element: Any) -> bool:
        return is_reference(element, self.Meta.type_key, self.Meta.id_key)

    def is_reference_list(
        self, element: Any, mode: ReferenceListMode | str = ReferenceListMode.ALL
    ) -> bool:
        return is_reference_list(element, mode, self.Meta.type_key, self.Meta.id_key)

    def _descend(self, element: Any, ancestors: frozenset[int]) -> frozenset[int]:
        marker = id(element)
        if marker in ancestors:
            if self.is_reference(element):
                raise CyclicReferenceError(
                    element[self.Meta.type_key], element[self.Meta.id_key]
                )
            raise CyclicReferenceError()
        return ancestors | {marker}


def serialize(elements: Any, flatten_relationships: bool = True) -> dict[str, Any]:
    """Serialize ``elements`` with a fresh default serializer."""
    return JSONAPISerializer().serialize(elements, flatten_relationships)


def serialize_text(json_text: str | bytes, flatten_relationships: bool = True) -> str:
    """Serialize JSON text with a fresh default serializer."""
    return JSONAPISerializer().serialize_text(json_text, flatten_relationships)
