"""Shared fixtures for the Mansion Mystery test suite."""

from __future__ import annotations

import pytest

from case_data import CLUE_SUSPECTS
from clue_set import ClueSet
from hash_index import HashIndex


SMALL_LAYOUT = {
    "name": "Hall",
    "clue": "A porta do jardim esta aberta.",
    "left": {
        "name": "Sala",
        "clue": "O mordomo e canhoto.",
        "left": {"name": "Escritorio", "clue": "O assassino deixou um bilhete."},
    },
    "right": {"name": "Cozinha", "clue": "Ha rastros de cafe."},
}
"""A layout where every Mordomo clue lies on one path from the entrance."""


@pytest.fixture
def index() -> HashIndex:
    return HashIndex.from_pairs(CLUE_SUSPECTS)


@pytest.fixture
def clues() -> ClueSet:
    return ClueSet()
