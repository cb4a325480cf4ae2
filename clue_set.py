"""
clue_set.py
===========
The detective's notebook: a binary search tree of unique clue strings.

Clues are ordered by plain string comparison, so an in-order walk lists
them alphabetically (by code point). Inserting a clue that is already
present leaves the tree untouched.

The recursive helpers work on bare ClueRecord nodes; ClueSet wraps a root
and is what the rest of the game uses.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from models import ClueRecord

if TYPE_CHECKING:
    from hash_index import HashIndex

logger = logging.getLogger("mansion_mystery.clue_set")


# ---------------------------------------------------------------------------
# Recursive tree operations
# ---------------------------------------------------------------------------

def insert_clue(node: Optional[ClueRecord], text: str) -> ClueRecord:
    """
    Insert `text` below `node` and return the (possibly new) subtree root.

    Duplicates are a no-op: the subtree is returned unchanged.
    """
    if node is None:
        return ClueRecord(text=text)
    if text < node.text:
        node.left = insert_clue(node.left, text)
    elif text > node.text:
        node.right = insert_clue(node.right, text)
    return node


def contains_clue(node: Optional[ClueRecord], text: str) -> bool:
    while node is not None:
        if text == node.text:
            return True
        node = node.left if text < node.text else node.right
    return False


def iter_in_order(node: Optional[ClueRecord]) -> Iterator[str]:
    """Yield clue texts in ascending order."""
    if node is None:
        return
    yield from iter_in_order(node.left)
    yield node.text
    yield from iter_in_order(node.right)


def count_matching(
    node: Optional[ClueRecord], suspect: str, index: HashIndex
) -> int:
    """
    Count clues under `node` that the index resolves to exactly `suspect`.

    Every node is visited; unresolved clues count for nobody.
    """
    if node is None:
        return 0
    count = 1 if index.lookup(node.text) == suspect else 0
    count += count_matching(node.left, suspect, index)
    count += count_matching(node.right, suspect, index)
    return count


# ---------------------------------------------------------------------------
# Notebook wrapper
# ---------------------------------------------------------------------------

class ClueSet:
    """
    Growing, duplicate-free set of collected clues.

    Iterating yields the clues in ascending order; each iteration walks the
    tree afresh.
    """

    def __init__(self) -> None:
        self._root: Optional[ClueRecord] = None
        self._size = 0

    @property
    def root(self) -> Optional[ClueRecord]:
        return self._root

    def add(self, text: str) -> bool:
        """
        Store `text` in the notebook.

        Returns:
            True if a new node was created. False if the clue was already
            present, or if allocating the node failed (logged; the tree is
            left unchanged).
        """
        if contains_clue(self._root, text):
            logger.debug("Clue already in notebook: %r", text)
            return False
        try:
            self._root = insert_clue(self._root, text)
        except MemoryError:
            logger.error("Could not allocate notebook entry for clue %r.", text)
            return False
        self._size += 1
        logger.debug("Clue added to notebook (%d total): %r", self._size, text)
        return True

    def count_matching(self, suspect: str, index: HashIndex) -> int:
        return count_matching(self._root, suspect, index)

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and contains_clue(self._root, text)
