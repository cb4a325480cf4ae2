import pytest
from pydantic import ValidationError

from case_data import MANSION_LAYOUT
from mansion import build_mansion, find_room, iter_rooms, remaining_clues
from models import Room


def test_reference_layout_shape():
    hall = build_mansion(MANSION_LAYOUT)
    assert hall.name == "Hall de Entrada"
    assert hall.left.name == "Sala de Estar"
    assert hall.right.name == "Biblioteca"
    assert hall.left.left.left.name == "Jardim"
    assert hall.right.right.name == "Escritorio"
    assert len(list(iter_rooms(hall))) == 9


def test_blank_clues_become_none():
    hall = build_mansion(MANSION_LAYOUT)
    assert find_room(hall, "Biblioteca").clue is None
    assert find_room(hall, "Jardim").clue is None
    assert find_room(hall, "Jantar").clue == "A vitima usava um lenco."


def test_remaining_clues_in_pre_order():
    hall = build_mansion(MANSION_LAYOUT)
    assert remaining_clues(hall) == [
        "A porta do jardim esta aberta.",
        "O mordomo e canhoto.",
        "Ha rastros de cafe.",
        "A vitima usava um lenco.",
        "A arma e de prata.",
        "O assassino deixou um bilhete.",
    ]


def test_each_build_is_independent():
    first = build_mansion(MANSION_LAYOUT)
    first.take_clue()
    second = build_mansion(MANSION_LAYOUT)
    assert second.clue == "A porta do jardim esta aberta."


def test_take_clue_clears_once():
    room = Room(name="Cozinha", clue="Ha rastros de cafe.")
    assert room.take_clue() == "Ha rastros de cafe."
    assert room.clue is None
    assert room.take_clue() is None


def test_find_missing_room():
    assert find_room(build_mansion(MANSION_LAYOUT), "Porao") is None


def test_missing_name_is_rejected():
    with pytest.raises(ValidationError):
        build_mansion({"clue": "orphan clue"})


def test_duplicate_room_names_are_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        build_mansion({"name": "A", "left": {"name": "B"}, "right": {"name": "B"}})


def test_take_clue_treats_empty_string_as_no_clue():
    room = Room(name="Porao", clue="")
    assert room.take_clue() is None
    assert room.clue is None
