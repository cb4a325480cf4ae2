"""
app.py
======
Streamlit web UI for Mansion Mystery.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark theme).
  - Manage session state initialisation and reset.
  - Render sidebar components (investigation status, clue notebook).
  - Render main-panel components (case briefing, current room, navigation
    buttons, narration log, accusation form, verdict).

This file contains only UI logic. All game logic lives in game_engine.py,
all narrative data in case_data.py, and all text rendering in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before reading configuration so MANSION_* overrides apply.
load_dotenv()

from case_data import CASE_BRIEFING, CASE_TITLE
from config import configure_logging, load_config_from_env
from game_engine import MansionMysteryGame
from models import Navigation, StepEvent
from ui_helpers import build_css, describe_clues, describe_step, describe_verdict

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called at the Streamlit entry point and is a no-op on
# reruns once the root handler exists.
# ---------------------------------------------------------------------------
HASH_CFG, GAME_CFG, LOG_CFG = load_config_from_env()
configure_logging(LOG_CFG)
logger = logging.getLogger("mansion_mystery.app")


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Mansion Mystery",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _new_game() -> MansionMysteryGame:
    return MansionMysteryGame(hash_config=HASH_CFG, game_config=GAME_CFG)


def init_session_state() -> None:
    """
    Initialise all Streamlit session state variables on first run.

    Uses a defaults dict so new keys can be added in one place.
    The opening StepEvent (entering the start room) is logged immediately
    so the first clue appears on the first render.
    """
    if "game" not in st.session_state:
        game = _new_game()
        st.session_state.game = game
        st.session_state.log  = [game.start()]

    defaults: dict = {
        "verdict": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def reset_game() -> None:
    """Start a fresh case: new engine, empty narration log, no verdict."""
    logger.info("New case requested from the UI.")
    game = _new_game()
    st.session_state.game    = game
    st.session_state.log     = [game.start()]
    st.session_state.verdict = None


# ============================================================
# SIDEBAR COMPONENTS
# ============================================================

def render_sidebar() -> None:
    """Render the investigation status and the clue notebook in the sidebar."""
    game  = st.session_state.game
    state = game.state

    st.sidebar.markdown(
        '<div class="sidebar-header">📊 INVESTIGATION</div>', unsafe_allow_html=True
    )
    st.sidebar.markdown(f"**Current room:** {game.current_room}")
    st.sidebar.markdown(f"**Steps taken:** {state.steps}")
    st.sidebar.markdown(f"**Rooms visited:** {len(state.rooms_visited)}")
    st.sidebar.markdown(f"**Clues collected:** {state.clues_collected}")

    if state.exploration_over:
        st.sidebar.info("You have left the mansion.")

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        '<div class="sidebar-header">📝 NOTEBOOK</div>', unsafe_allow_html=True
    )
    for line in describe_clues(game.collected_clues()):
        st.sidebar.markdown(line)

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW CASE", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN-PANEL COMPONENTS
# ============================================================

def render_case_briefing() -> None:
    """Render the title and case briefing above the room view."""
    st.markdown(f"<h1 class='main-header'>🔍 {CASE_TITLE}</h1>", unsafe_allow_html=True)
    st.markdown(f"*{CASE_BRIEFING.format(threshold=GAME_CFG.verdict_threshold)}*")
    st.markdown("---")


def render_room() -> None:
    """
    Render the current room card, the latest clue and the navigation buttons.

    Navigation buttons submit left / right / quit through the engine exactly
    like typed CLI commands; a blocked path leaves the player in place and is
    reported in the narration log.
    """
    game = st.session_state.game
    last: StepEvent = st.session_state.log[-1]

    st.markdown(
        f"<div class='room-card'><h3>🚪 {game.current_room}</h3></div>",
        unsafe_allow_html=True,
    )

    if last.navigation is Navigation.ENTERED and last.finding is not None:
        finding = last.finding
        lead = finding.suspect or "no suspect linked yet"
        st.markdown(
            f"<div class='clue-card'>🔎 <b>Clue found:</b> “{finding.text}”<br>"
            f"<span style='color:#888'>Points to: {lead}</span></div>",
            unsafe_allow_html=True,
        )
    elif last.navigation is Navigation.BLOCKED:
        st.warning(describe_step(last)[0])

    if game.state.exploration_over:
        return

    st.markdown("")
    col1, col2, col3 = st.columns(3)
    explorer_room = game.explorer.current
    if col1.button(
        "⬅️ LEFT", use_container_width=True, disabled=explorer_room.left is None
    ):
        _submit_move("left")
    if col2.button(
        "➡️ RIGHT", use_container_width=True, disabled=explorer_room.right is None
    ):
        _submit_move("right")
    if col3.button("🚪 LEAVE THE MANSION", type="primary", use_container_width=True):
        _submit_move("quit")


def _submit_move(token: str) -> None:
    event = st.session_state.game.move(token)
    st.session_state.log.append(event)
    st.rerun()


def render_narration_log() -> None:
    """Render every step so far, newest first, inside an expander."""
    with st.expander("📜 Exploration log", expanded=False):
        for event in reversed(st.session_state.log):
            st.markdown(
                "<div class='narration'>" + "<br>".join(describe_step(event)) + "</div>",
                unsafe_allow_html=True,
            )


def render_accusation_form() -> None:
    """
    Render the accusation form once the player has left the mansion.

    The player gets exactly one accusation; the form disappears after it.
    """
    game = st.session_state.game
    if not game.state.exploration_over or st.session_state.verdict is not None:
        return

    st.markdown("---")
    st.markdown(
        "<h2 class='main-header'>⚖️ MAKE YOUR ACCUSATION</h2>", unsafe_allow_html=True
    )
    st.markdown("**Collected clues:**")
    for line in describe_clues(game.collected_clues()):
        st.markdown(line)

    accused = st.selectbox("Who is the culprit?", options=game.known_suspects())
    if st.button("🔨 I ACCUSE…", type="primary", use_container_width=True):
        st.session_state.verdict = game.accuse(accused)
        st.rerun()


def render_verdict() -> None:
    """Render the verdict panel after the accusation."""
    verdict = st.session_state.verdict
    if verdict is None:
        return

    st.markdown("---")
    headline = "🎉 CASE SOLVED" if verdict.succeeded else "❌ CASE UNSOLVED"
    st.markdown(f"<div class='verdict-display'>{headline}</div>", unsafe_allow_html=True)
    for line in describe_verdict(verdict):
        st.markdown(line)


# ============================================================
# ENTRY POINT
# ============================================================

def main() -> None:
    init_session_state()
    render_sidebar()
    render_case_briefing()
    render_room()
    render_accusation_form()
    render_verdict()
    render_narration_log()


main()
