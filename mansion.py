"""
mansion.py
==========
Builds and inspects the mansion map: a fixed binary tree of Rooms.

The layout arrives as nested mappings (see case_data.MANSION_LAYOUT) and is
validated through the RoomSpec pydantic schema before any Room is created,
so a malformed layout fails loudly at session start rather than mid-game.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Mapping, Optional, Union

from models import Room, RoomSpec

logger = logging.getLogger("mansion_mystery.mansion")


def _build(spec: RoomSpec) -> Room:
    return Room(
        name=spec.name,
        clue=spec.clue,
        left=_build(spec.left) if spec.left is not None else None,
        right=_build(spec.right) if spec.right is not None else None,
    )


def build_mansion(layout: Union[RoomSpec, Mapping[str, Any]]) -> Room:
    """
    Create the room tree described by `layout` and return its root.

    Args:
        layout: A RoomSpec or a nested mapping with keys name / clue / left /
                right. Empty clue strings mean "no clue here".

    Raises:
        pydantic.ValidationError: if the layout does not match RoomSpec.
        ValueError: if two rooms share a name.
    """
    spec = layout if isinstance(layout, RoomSpec) else RoomSpec.model_validate(layout)
    root = _build(spec)

    names = [room.name for room in iter_rooms(root)]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"Duplicate room names in mansion layout: {duplicates}")

    logger.info(
        "Mansion built — root=%r, rooms=%d, clues=%d",
        root.name, len(names), len(remaining_clues(root)),
    )
    return root


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room in pre-order (room, left subtree, right subtree)."""
    if root is None:
        return
    yield root
    yield from iter_rooms(root.left)
    yield from iter_rooms(root.right)


def find_room(root: Optional[Room], name: str) -> Optional[Room]:
    return next((room for room in iter_rooms(root) if room.name == name), None)


def remaining_clues(root: Optional[Room]) -> List[str]:
    """Clues still lying in rooms, in pre-order."""
    return [room.clue for room in iter_rooms(root) if room.clue is not None]
