"""Deduplicating side-table of resource objects for the ``included`` member."""

from __future__ import annotations

from typing import Any


class IncludedTable:
    """Resource objects keyed by type, then by id.

    Re-inserting an existing ``(type, id)`` replaces the stored resource but
    keeps the slot where it was first inserted.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, dict[str, dict[str, Any]]] = {}

    @staticmethod
    def _key(value: Any) -> str:
        return "" if value is None else str(value)

    def upsert(self, type_: Any, id_: Any, resource: dict[str, Any]) -> None:
        """Insert or replace the resource stored under ``(type_, id_)``."""
        bucket = self._buckets.setdefault(self._key(type_), {})
        bucket[self._key(id_)] = resource

    def get(self, type_: Any, id_: Any) -> dict[str, Any] | None:
        bucket = self._buckets.get(self._key(type_), {})
        return bucket.get(self._key(id_))

    def resources(self) -> list[dict[str, Any]]:
        """Return every stored resource, bucket by bucket."""
        return [
            resource
            for bucket in self._buckets.values()
            for resource in bucket.values()
        ]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return self.get(*item) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __bool__(self) -> bool:
        return bool(self._buckets)
