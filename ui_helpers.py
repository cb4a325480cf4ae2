"""
ui_helpers.py
=============
Stateless rendering helpers shared by the CLI and the Streamlit interface.

The game engine only produces structured reports (StepEvent, Verdict). These
functions turn them into display lines; they carry no game state of their
own and can be tested without a terminal or a Streamlit session.

Contains:
  - describe_step()    : StepEvent → narration lines
  - describe_clues()   : sorted notebook → report lines
  - describe_verdict() : Verdict → result lines
  - build_css()        : returns the page CSS string for app.py
"""

from __future__ import annotations

from typing import Iterable, List

from explorer import Command
from models import Navigation, StepEvent, Verdict


def describe_step(event: StepEvent) -> List[str]:
    """
    Render one exploration step as narration lines.

    Example:
        >>> describe_step(StepEvent(navigation=Navigation.BLOCKED, room="Jardim", command="left"))
        ['[BLOCKED] There is no way left from Jardim.']
    """
    if event.navigation is Navigation.INVALID:
        return [f"[INVALID] Unknown command {event.command!r}. Use left, right or quit."]

    if event.navigation is Navigation.BLOCKED:
        command = Command.parse(event.command)
        label = command.value if command in (Command.LEFT, Command.RIGHT) else "that way"
        return [f"[BLOCKED] There is no way {label} from {event.room}."]

    if event.navigation is Navigation.QUIT:
        return [f"[EXIT] You leave the mansion from {event.room}."]

    lines = [f"[LOCATION] You are in: {event.room}"]
    finding = event.finding
    if finding is None:
        lines.append("[CLUE] Nothing new here.")
        return lines

    lines.append(f'[CLUE FOUND] "{finding.text}"')
    if finding.suspect is not None:
        lines.append(f"[LEAD] This clue points to: {finding.suspect}")
    else:
        lines.append("[LEAD] No suspect linked to this clue yet.")
    if not finding.recorded:
        lines.append("[WARNING] The clue could not be written in your notebook.")
    return lines


def describe_clues(clues: Iterable[str]) -> List[str]:
    """Render the notebook as a bulleted list, or a single 'empty' line."""
    lines = [f"  - {clue}" for clue in clues]
    return lines or ["No clues were collected."]


def describe_verdict(verdict: Verdict) -> List[str]:
    """Render the accusation outcome, including the support count."""
    if not verdict.valid:
        return [
            "[VERDICT] Invalid accusation: no suspect named.",
            "Supporting clues: 0",
        ]

    lines = [
        f"Accused suspect : {verdict.accused}",
        f"Supporting clues: {verdict.support} (needed: {verdict.threshold})",
    ]
    if verdict.succeeded:
        lines.append(
            f"[VERDICT] Accusation SUCCEEDS. The evidence is enough: "
            f"{verdict.accused} is the culprit!"
        )
    else:
        noun = "clue" if verdict.support == 1 else "clues"
        lines.append(
            f"[VERDICT] Accusation FAILS. Not enough evidence "
            f"({verdict.support} {noun}). The truth slipped away!"
        )
    return lines


# ---------------------------------------------------------------------------
# Page CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the CSS string injected into the Streamlit page.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    html, body, .stApp, .main, .block-container {
        background: #111 !important;
        color: #c8c8c8 !important;
    }
    [data-testid="stSidebar"], section[data-testid="stSidebar"] > div {
        background: #0b0b0b !important;
        border-right: 1px solid #2a2a2a !important;
    }

    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive; letter-spacing: 3px;
    }
    .room-card {
        background: #1b1b1b; padding: 20px; border-radius: 6px;
        border-left: 4px solid #8B0000;
        font-family: 'Courier Prime', monospace;
    }
    .room-card h3 { color: #8B0000; font-family: 'Special Elite', cursive; }
    .clue-card {
        background: #22201a; padding: 12px 16px; border-radius: 6px;
        border: 1px solid #4a4a2a; font-family: 'Courier Prime', monospace;
    }
    .narration {
        font-family: 'Courier Prime', monospace; color: #999; font-size: 13px;
    }
    .sidebar-header {
        color: #8B0000; font-family: 'Special Elite', cursive;
        letter-spacing: 2px; text-align: center; padding: 8px;
        border-bottom: 1px solid #333;
    }
    .verdict-display {
        font-size: 48px; text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
    }

    .stButton > button {
        background: #1f1f1f; color: #c8c8c8; border: 1px solid #444;
        font-family: 'Courier Prime', monospace;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; }
    .stButton > button[kind="primary"] { background: #8B0000; color: #fff; border: none; }
"""
