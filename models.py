"""
models.py
=========
Shared data models for Mansion Mystery.

Contains:
  - Room            : Mutable dataclass for one node of the mansion map.
  - ClueRecord      : Dataclass node of the collected-clue search tree.
  - HashBucketEntry : Dataclass link in one hash-index chain.
  - RoomSpec        : Pydantic schema validating the mansion layout data.
  - ClueFinding, StepEvent, Verdict : Pydantic reports handed to the UIs.
  - GameState       : Mutable dataclass tracking per-session progress.

Internal tree and chain nodes are plain dataclasses because they are mutated
in place. Everything that leaves the core for cli.py / app.py is a pydantic
model so the shells receive validated, structured data instead of text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Mansion map
# ---------------------------------------------------------------------------

@dataclass
class Room:
    """
    One room of the mansion map (a node of a plain binary tree).

    Attributes:
        name:  Display name, unique within a layout.
        clue:  Clue text still waiting in this room, or None once collected
               (or if the room never had one).
        left:  Room reached with the "left" command, if any.
        right: Room reached with the "right" command, if any.
    """

    name:  str
    clue:  Optional[str] = None
    left:  Optional[Room] = field(default=None, repr=False)
    right: Optional[Room] = field(default=None, repr=False)

    def take_clue(self) -> Optional[str]:
        """
        Remove and return this room's clue.

        The field goes from text to None once; later calls return None.
        An empty string counts as no clue.
        """
        clue, self.clue = self.clue, None
        return clue or None


# ---------------------------------------------------------------------------
# Collected clues (binary search tree)
# ---------------------------------------------------------------------------

@dataclass
class ClueRecord:
    """A node of the clue search tree, ordered by `text`."""

    text:  str
    left:  Optional[ClueRecord] = field(default=None, repr=False)
    right: Optional[ClueRecord] = field(default=None, repr=False)


# ---------------------------------------------------------------------------
# Hash index chain
# ---------------------------------------------------------------------------

@dataclass
class HashBucketEntry:
    """One clue → suspect association, linked to the next entry of its bucket."""

    clue_text: str
    suspect:   str
    next:      Optional[HashBucketEntry] = field(default=None, repr=False)


# ---------------------------------------------------------------------------
# Layout schema
# ---------------------------------------------------------------------------

class RoomSpec(BaseModel):
    """
    Validated shape of one room in case_data.MANSION_LAYOUT.

    An empty or whitespace-only clue string is normalised to None, so layout
    data may use "" for rooms without evidence.
    """

    name:  str = Field(min_length=1)
    clue:  Optional[str] = None
    left:  Optional[RoomSpec] = None
    right: Optional[RoomSpec] = None

    @field_validator("clue")
    @classmethod
    def _blank_clue_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value


RoomSpec.model_rebuild()


# ---------------------------------------------------------------------------
# Reports handed to the UI layers
# ---------------------------------------------------------------------------

class Navigation(str, Enum):
    """Result of one exploration step."""
    ENTERED = "entered"
    BLOCKED = "blocked"
    INVALID = "invalid"
    QUIT    = "quit"


class ClueFinding(BaseModel):
    """
    A clue surfaced when entering a room.

    Fields:
        text:     The clue as found in the room.
        suspect:  Suspect the hash index associates with it, or None when
                  the clue is unresolved.
        recorded: False if the clue could not be stored in the notebook
                  (soft allocation failure). The room's clue is cleared
                  either way.
    """

    text:     str
    suspect:  Optional[str] = None
    recorded: bool = True


class StepEvent(BaseModel):
    """
    Narration of one exploration step.

    Fields:
        command:    The raw token the player typed ("" for the initial entry).
        navigation: What happened (entered / blocked / invalid / quit).
        room:       Name of the room the player is in after the step.
        finding:    The clue collected on entering, if any. Always None for
                    blocked, invalid and quit steps.
    """

    command:    str = ""
    navigation: Navigation
    room:       str
    finding:    Optional[ClueFinding] = None


class VerdictOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class Verdict(BaseModel):
    """
    Outcome of the accusation phase.

    Fields:
        accused:   The (stripped) name the player accused.
        support:   Number of distinct collected clues pointing at `accused`.
        threshold: Support needed for success.
        outcome:   SUCCESS iff support >= threshold.
        valid:     False when the accusation was empty; such a verdict is
                   always a FAILURE with zero support.
    """

    accused:   str
    support:   int = Field(ge=0)
    threshold: int = Field(ge=1)
    outcome:   VerdictOutcome
    valid:     bool = True

    @property
    def succeeded(self) -> bool:
        return self.outcome is VerdictOutcome.SUCCESS


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """
    Mutable snapshot of everything that changes during one session.

    Owned by MansionMysteryGame and mutated in place. The UIs read it for
    status displays.

    Attributes:
        steps:            Commands processed (including blocked / invalid).
        rooms_visited:    Names of rooms the player has entered.
        clues_collected:  Distinct clues stored in the notebook.
        exploration_over: True once the player quit the mansion.
        accusation_made:  True once accuse() has been called.
        verdict:          The Verdict, once judged.
    """

    steps:            int = 0
    rooms_visited:    Set[str] = field(default_factory=set)
    clues_collected:  int = 0
    exploration_over: bool = False
    accusation_made:  bool = False
    verdict:          Optional[Verdict] = None

    def record_step(self, event: StepEvent) -> None:
        """Fold one StepEvent into the counters."""
        if event.command:
            self.steps += 1
        if event.navigation is Navigation.ENTERED:
            self.rooms_visited.add(event.room)
        if event.navigation is Navigation.QUIT:
            self.exploration_over = True

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.steps            = 0
        self.rooms_visited    = set()
        self.clues_collected  = 0
        self.exploration_over = False
        self.accusation_made  = False
        self.verdict          = None
