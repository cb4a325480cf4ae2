"""
verdict.py
==========
Deterministic, side-effect-free accusation judgment.

Kept apart from the game engine so it can be unit-tested on its own and
tuned through GameConfig.verdict_threshold without touching game or UI code.
"""

from __future__ import annotations

import logging

from clue_set import ClueSet
from config import GAME_CONFIG
from hash_index import HashIndex
from models import Verdict, VerdictOutcome

logger = logging.getLogger("mansion_mystery.verdict")


def judge(
    accused:   str,
    clues:     ClueSet,
    index:     HashIndex,
    threshold: int = GAME_CONFIG.verdict_threshold,
) -> Verdict:
    """
    Judge an accusation against the collected clues.

    support = number of distinct collected clues whose suspect (via the hash
    index) is exactly `accused`. The accusation succeeds when
    support >= threshold (default: 2).

    The accused name is stripped of surrounding whitespace but otherwise
    compared as-is, so "mordomo" does not match "Mordomo". Inner whitespace
    is kept: "Mordomo extra" is one name and matches no suspect, and
    multi-word suspect names work. An empty accusation is reported as
    invalid: FAILURE with zero support.

    Args:
        accused:   Name typed or selected by the player.
        clues:     The notebook filled during exploration (read only).
        index:     Clue → suspect index.
        threshold: Minimum support for SUCCESS.

    Returns:
        A Verdict carrying the support count.

    Examples:
        clues {garden door → Jardineiro, left-handed → Mordomo, note → Mordomo}
        >>> judge("Mordomo", clues, index).support
        2
    """
    name = (accused or "").strip()
    if not name:
        logger.warning("Empty accusation received; judged as failure.")
        return Verdict(
            accused=name,
            support=0,
            threshold=threshold,
            outcome=VerdictOutcome.FAILURE,
            valid=False,
        )

    support = clues.count_matching(name, index)
    outcome = VerdictOutcome.SUCCESS if support >= threshold else VerdictOutcome.FAILURE

    logger.info(
        "Verdict — accused=%r, support=%d/%d, outcome=%s (clues collected: %d)",
        name, support, threshold, outcome.value, len(clues),
    )
    return Verdict(
        accused=name,
        support=support,
        threshold=threshold,
        outcome=outcome,
    )
