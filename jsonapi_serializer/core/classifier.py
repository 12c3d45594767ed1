"""Shape predicates over the generic tree value model."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

TYPE_KEY = "_type"
ID_KEY = "_id"


class ReferenceListMode(str, Enum):
    """Reduction used when testing a container for reference items."""

    ALL = "all"
    ANY = "any"


def is_container(node: Any) -> bool:
    """Return True for list-shaped or map-shaped nodes."""
    return isinstance(node, (dict, list, tuple))


def is_positional(key: Any) -> bool:
    """Return True for list-index keys."""
    return isinstance(key, int) and not isinstance(key, bool)


def iter_entries(node: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs; lists are keyed by index."""
    if isinstance(node, dict):
        yield from node.items()
    elif isinstance(node, (list, tuple)):
        yield from enumerate(node)


def is_reference(node: Any, type_key: str = TYPE_KEY, id_key: str = ID_KEY) -> bool:
    """Return True if the node carries both reserved reference keys."""
    if not isinstance(node, dict):
        return False
    return type_key in node and id_key in node


def is_reference_list(
    node: Any,
    mode: ReferenceListMode | str = ReferenceListMode.ALL,
    type_key: str = TYPE_KEY,
    id_key: str = ID_KEY,
) -> bool:
    """Return True if the container's items are references.

    ``all`` requires every item to be a reference, ``any`` at least one.
    Empty containers and scalars never qualify.
    """
    mode = ReferenceListMode(mode)
    if not is_container(node) or not node:
        return False
    checks = (is_reference(item, type_key, id_key) for _, item in iter_entries(node))
    if mode is ReferenceListMode.ALL:
        return all(checks)
    return any(checks)
