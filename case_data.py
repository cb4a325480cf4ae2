"""
case_data.py
============
All narrative content for the mansion case.

Centralising story data here means you can swap out the entire mystery
(rooms, clues, suspects) without touching the explorer, the verdict or the
UIs.

To create a new case:
    1. Replace MANSION_LAYOUT with your own room tree. Rooms without
       evidence use an empty clue string.
    2. List every clue → suspect association in CLUE_SUSPECTS. Clue texts
       must match the layout exactly; a clue missing here is reported as
       "unresolved" when found.
    3. Update SUSPECTS so the accusation prompt offers the right names, and
       GameConfig.start_room in config.py to the new root's name.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple


# ---------------------------------------------------------------------------
# Clue → suspect associations (loaded into the HashIndex at session start)
# ---------------------------------------------------------------------------

CLUE_SUSPECTS: List[Tuple[str, str]] = [
    ("O mordomo e canhoto.",            "Mordomo"),
    ("A arma e de prata.",              "Bibliotecario"),
    ("Ha rastros de cafe.",             "Cozinheira"),
    ("A porta do jardim esta aberta.",  "Jardineiro"),
    ("O assassino deixou um bilhete.",  "Mordomo"),
]
"""
Insertion order matters only for shadowing: if a clue text appeared twice,
the later pair would win on lookup.
"""


# ---------------------------------------------------------------------------
# Mansion map
# ---------------------------------------------------------------------------

MANSION_LAYOUT: Dict[str, Any] = {
    "name": "Hall de Entrada",
    "clue": "A porta do jardim esta aberta.",
    "left": {
        "name": "Sala de Estar",
        "clue": "O mordomo e canhoto.",
        "left": {
            "name": "Cozinha",
            "clue": "Ha rastros de cafe.",
            "left":  {"name": "Jardim", "clue": ""},
            "right": {"name": "Quarto de Hospedes", "clue": ""},
        },
        "right": {
            "name": "Jantar",
            # Deliberately absent from CLUE_SUSPECTS: a red herring.
            "clue": "A vitima usava um lenco.",
        },
    },
    "right": {
        "name": "Biblioteca",
        "clue": "",
        "left":  {"name": "Quarto Mestre", "clue": "A arma e de prata."},
        "right": {"name": "Escritorio", "clue": "O assassino deixou um bilhete."},
    },
}


# ---------------------------------------------------------------------------
# Suspect roster (shown in the accusation phase)
# ---------------------------------------------------------------------------

SUSPECTS: List[str] = [
    "Mordomo",
    "Cozinheira",
    "Bibliotecario",
    "Jardineiro",
]


# ---------------------------------------------------------------------------
# Flavour text for the UIs
# ---------------------------------------------------------------------------

CASE_TITLE = "THE MANSION MYSTERY"

CASE_BRIEFING = (
    "A crime has been committed somewhere in the mansion. Walk its rooms, "
    "gather every clue you can, then name the culprit. At least {threshold} "
    "clues must point to the person you accuse."
)
"""Formatted with the active verdict threshold by the UIs."""
