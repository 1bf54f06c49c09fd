"""Turning flat parent-linked records into nested trees."""

from __future__ import annotations

from typing import Any, Iterable, List, TypeVar

T = TypeVar("T")


def list_to_tree(items: Iterable[T], id_attr: str = "id") -> List[T]:
    """Nest records under their parents and return the roots.

    Every record needs a ``parent_id`` and a ``children`` list; ``id_attr``
    names the attribute that holds its identifier. Records whose parent is 0
    are roots. Records whose parent is not among ``items`` are dropped.
    Children keep the order in which they appear in ``items``.
    """
    records = list(items)
    by_id: dict[Any, T] = {getattr(record, id_attr): record for record in records}

    tree: List[T] = []
    for record in records:
        parent_id = getattr(record, "parent_id")
        if parent_id == 0:
            tree.append(record)
            continue
        parent = by_id.get(parent_id)
        if parent is not None:
            getattr(parent, "children").append(record)
    return tree