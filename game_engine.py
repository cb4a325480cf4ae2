"""
game_engine.py
==============
Core game engine for Mansion Mystery.

Contains:
  MansionMysteryGame — the single orchestrating class that builds the mansion,
                       the hash index and the notebook for one session and
                       exposes a clean API consumed by both the Streamlit UI
                       (app.py) and the CLI runner (cli.py).

Public API summary:
    game = MansionMysteryGame()
    game.start()              → StepEvent   (entering the start room)
    game.move(token)          → StepEvent
    game.collected_clues()    → List[str]   (sorted)
    game.known_suspects()     → List[str]
    game.accuse(name)         → Verdict
    game.reset()              → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module
under the ``mansion_mystery.*`` namespace. Configure level and destination
once at the entry point (see config.configure_logging).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from case_data import CLUE_SUSPECTS, MANSION_LAYOUT, SUSPECTS
from clue_set import ClueSet
from config import GAME_CONFIG, HASH_CONFIG, GameConfig, HashConfig
from explorer import Explorer
from hash_index import HashIndex
from mansion import build_mansion, remaining_clues
from models import GameState, Room, StepEvent, Verdict
from verdict import judge

logger = logging.getLogger("mansion_mystery.game_engine")


class MansionMysteryGame:
    """
    Main game engine.

    Owns the three data structures of a session and the GameState. The UIs
    interact with this class exclusively.

    Attributes:
        state:    Current GameState (steps, rooms visited, verdict).
        mansion:  Root Room of the map. Clues are cleared in place as found.
        index:    The session's HashIndex (read only after construction).
        clues:    The ClueSet notebook.
        explorer: The Explorer walking `mansion`.
    """

    def __init__(
        self,
        layout:      Mapping[str, Any] = MANSION_LAYOUT,
        clue_pairs:  Iterable[Tuple[str, str]] = CLUE_SUSPECTS,
        suspects:    Iterable[str] = SUSPECTS,
        hash_config: HashConfig = HASH_CONFIG,
        game_config: GameConfig = GAME_CONFIG,
    ) -> None:
        self._layout      = layout
        self._clue_pairs  = list(clue_pairs)
        self._suspects    = list(suspects)
        self.hash_config  = hash_config
        self.game_config  = game_config
        self.state        = GameState()

        self._build_session()
        logger.info(
            "MansionMysteryGame initialised — start=%r, clues in map=%d, "
            "indexed clues=%d, threshold=%d",
            self.mansion.name,
            len(remaining_clues(self.mansion)),
            len(self.index),
            self.game_config.verdict_threshold,
        )

    # ------------------------------------------------------------------
    # Session construction
    # ------------------------------------------------------------------

    def _build_session(self) -> None:
        """(Re)build every per-session structure from the configuration."""
        self.index: HashIndex = HashIndex.from_pairs(
            self._clue_pairs, bucket_count=self.hash_config.bucket_count
        )
        self.mansion: Room = build_mansion(self._layout)
        if self.mansion.name != self.game_config.start_room:
            logger.warning(
                "Layout root %r differs from configured start room %r; "
                "starting at the layout root.",
                self.mansion.name, self.game_config.start_room,
            )
        self.clues    = ClueSet()
        self.explorer = Explorer(self.mansion, self.clues, self.index)
        self._opening: Optional[StepEvent] = None

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    @property
    def current_room(self) -> str:
        return self.explorer.current.name

    def start(self) -> StepEvent:
        """
        Enter the start room and return its report.

        Safe to call repeatedly: the first call collects the start room's
        clue, later calls return the same event.

        Raises:
            RuntimeError: if exploration ended (by an accusation) before the
                          start room was ever entered.
        """
        if self._opening is None:
            if self.state.exploration_over:
                raise RuntimeError("The player has already left the mansion.")
            self._opening = self.explorer.enter()
            self._record(self._opening)
        return self._opening

    def move(self, token: str) -> StepEvent:
        """
        Process one navigation token (left / right / quit or an alias).

        Raises:
            RuntimeError: if exploration has already ended.
        """
        if self.state.exploration_over:
            raise RuntimeError("The player has already left the mansion.")
        self.start()
        event = self.explorer.step(token)
        self._record(event)
        return event

    def _record(self, event: StepEvent) -> None:
        self.state.record_step(event)
        self.state.clues_collected = len(self.clues)

    def collected_clues(self) -> List[str]:
        """Clues in the notebook, in ascending order."""
        return list(self.clues)

    def clues_left_in_mansion(self) -> int:
        return len(remaining_clues(self.mansion))

    # ------------------------------------------------------------------
    # Accusation
    # ------------------------------------------------------------------

    def known_suspects(self) -> List[str]:
        """Suspect roster followed by any other name the index can produce."""
        names = list(self._suspects)
        names.extend(n for n in self.index.suspects() if n not in names)
        return names

    def accuse(self, accused: str) -> Verdict:
        """
        Judge the player's single accusation.

        Ends exploration if the player has not quit yet.

        Raises:
            RuntimeError: if an accusation was already made this session.
        """
        if self.state.accusation_made:
            raise RuntimeError("An accusation has already been made.")
        if not self.state.exploration_over:
            logger.info("Accusation before quitting; closing exploration.")
            self.state.exploration_over = True
            self.explorer.terminated = True

        verdict = judge(
            accused,
            self.clues,
            self.index,
            threshold=self.game_config.verdict_threshold,
        )
        self.state.accusation_made = True
        self.state.verdict         = verdict
        return verdict

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Reset the game for a new playthrough.

        Rebuilds the mansion (restoring every clue), the index and an empty
        notebook, and clears the GameState.
        """
        logger.info("Game reset requested — rebuilding mansion and notebook.")
        self.state.reset()
        self._build_session()
        logger.info("Game reset complete.")
