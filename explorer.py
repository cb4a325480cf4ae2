"""
explorer.py
===========
Exploration state machine over the mansion map.

The Explorer holds the player's current room. Each call to step() consumes
one command token and returns a StepEvent describing what happened; it never
prints or prompts. Entering a room that still holds a clue collects it:

  1. the clue is reported in the event,
  2. it is stored in the ClueSet,
  3. it is resolved through the HashIndex (None means "unresolved"),
  4. the room's clue is cleared so it cannot be collected again.

The only way out is an explicit quit. A player in a leaf room stays there
until they quit.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from clue_set import ClueSet
from hash_index import HashIndex
from models import ClueFinding, Navigation, Room, StepEvent

logger = logging.getLogger("mansion_mystery.explorer")


class Command(str, Enum):
    LEFT  = "left"
    RIGHT = "right"
    QUIT  = "quit"

    @classmethod
    def parse(cls, token: str) -> Optional[Command]:
        """
        Map a raw player token to a Command, or None if it is not one.

        Matching ignores case and surrounding whitespace. Besides the English
        words and their initials, the keys of the original Portuguese game
        (e / d / s) are accepted.
        """
        return _ALIASES.get((token or "").strip().lower())


_ALIASES: Dict[str, Command] = {
    "left": Command.LEFT,   "l": Command.LEFT,  "e": Command.LEFT,  "esquerda": Command.LEFT,
    "right": Command.RIGHT, "r": Command.RIGHT, "d": Command.RIGHT, "direita": Command.RIGHT,
    "quit": Command.QUIT,   "q": Command.QUIT,  "s": Command.QUIT,  "sair": Command.QUIT,
    "exit": Command.QUIT,
}


class Explorer:
    """
    Drives one walk through the mansion.

    Attributes:
        current:       The room the player is standing in.
        terminated:    True once the player has quit.
        rooms_entered: Number of room entries, revisits included.
    """

    def __init__(self, root: Room, clues: ClueSet, index: HashIndex) -> None:
        self.current = root
        self.terminated = False
        self.rooms_entered = 0
        self._clues = clues
        self._index = index

    # ------------------------------------------------------------------
    # Room entry
    # ------------------------------------------------------------------

    def enter(self, command: str = "") -> StepEvent:
        """Collect the current room's clue, if any, and report the entry."""
        if self.terminated:
            raise RuntimeError("Exploration has already ended.")
        room = self.current
        self.rooms_entered += 1
        finding: Optional[ClueFinding] = None

        clue = room.take_clue()
        if clue is not None:
            recorded = self._clues.add(clue) or clue in self._clues
            suspect = self._index.lookup(clue)
            finding = ClueFinding(text=clue, suspect=suspect, recorded=recorded)
            logger.info(
                "Clue found in %s: %r → %s",
                room.name, clue, suspect if suspect is not None else "(unresolved)",
            )
        else:
            logger.debug("No new clue in %s.", room.name)

        return StepEvent(
            command=command,
            navigation=Navigation.ENTERED,
            room=room.name,
            finding=finding,
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def step(self, token: str) -> StepEvent:
        """
        Apply one player command.

        Returns:
            ENTERED with the new room's report when moving succeeds,
            BLOCKED when the requested child room does not exist,
            INVALID for unrecognised input,
            QUIT when the player leaves (the explorer is then terminated).

        Raises:
            RuntimeError: if called after the player has quit.
        """
        if self.terminated:
            raise RuntimeError("Exploration has already ended.")

        command = Command.parse(token)

        if command is None:
            logger.debug("Invalid command %r in %s.", token, self.current.name)
            return StepEvent(
                command=token, navigation=Navigation.INVALID, room=self.current.name
            )

        if command is Command.QUIT:
            self.terminated = True
            logger.info(
                "Exploration ended in %s after %d room entries.",
                self.current.name, self.rooms_entered,
            )
            return StepEvent(
                command=token, navigation=Navigation.QUIT, room=self.current.name
            )

        target = self.current.left if command is Command.LEFT else self.current.right
        if target is None:
            logger.info("Path %s from %s is blocked.", command.value, self.current.name)
            return StepEvent(
                command=token, navigation=Navigation.BLOCKED, room=self.current.name
            )

        logger.debug("Moving %s: %s -> %s", command.value, self.current.name, target.name)
        self.current = target
        return self.enter(command=token)
