"""Ordering helpers for the denormalized id caches.

Only the board engine calls these; they never mutate their inputs.
"""

from typing import Dict, Sequence, Tuple, TypeVar

from pydantic import BaseModel

Ordered = TypeVar("Ordered", bound=BaseModel)


def clamp_position(position: int, length: int) -> int:
    return max(0, min(position, length))


def insert_id(ids: Sequence[str], entity_id: str, position: int) -> Tuple[str, ...]:
    """Insert ``entity_id`` at ``position`` (clamped to the sequence bounds).

    An id already present is left where it is.
    """
    if entity_id in ids:
        return tuple(ids)
    new_ids = list(ids)
    new_ids.insert(clamp_position(position, len(new_ids)), entity_id)
    return tuple(new_ids)


def remove_id(ids: Sequence[str], entity_id: str) -> Tuple[str, ...]:
    return tuple(i for i in ids if i != entity_id)


def move_id(ids: Sequence[str], entity_id: str, position: int) -> Tuple[str, ...]:
    # retire puis réinsère à la nouvelle position
    return insert_id(remove_id(ids, entity_id), entity_id, position)


def renumber(entities: Dict[str, Ordered], ordered_ids: Sequence[str]) -> Dict[str, Ordered]:
    """Return a copy of ``entities`` where ``ordered_ids[i].order == i``.

    Entities already at the right rank are shared with the input mapping.
    """
    renumbered = dict(entities)
    for index, entity_id in enumerate(ordered_ids):
        entity = renumbered.get(entity_id)
        if entity is not None and entity.order != index:
            renumbered[entity_id] = entity.model_copy(update={"order": index})
    return renumbered


def sorted_ids(entities: Dict[str, Ordered], ids: Sequence[str]) -> Tuple[str, ...]:
    """Sort ``ids`` by the ``order`` of the matching entities (stable)."""
    return tuple(sorted(ids, key=lambda i: entities[i].order))
