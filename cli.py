"""
cli.py
======
Command-line interface for Mansion Mystery.

Provides a text-based game loop for development, testing, and playing the
game without Streamlit. All game logic is delegated to MansionMysteryGame;
this module only handles I/O.

Usage:
    python cli.py        (or: mansion-mystery)

Commands during exploration:
    left  / l / e   — go to the left room
    right / r / d   — go to the right room
    quit  / q / s   — leave the mansion and move on to the accusation
    /clues          — show the notebook so far
    /status         — show current room, steps taken and clues collected
    /help           — show this list
"""

from __future__ import annotations

from dotenv import load_dotenv

from case_data import CASE_BRIEFING, CASE_TITLE
from config import configure_logging, load_config_from_env
from game_engine import MansionMysteryGame
from models import Navigation
from ui_helpers import describe_clues, describe_step, describe_verdict

HELP_TEXT = (
    "Commands: left (l/e), right (r/d), quit (q/s), /clues, /status, /help"
)


def _print_lines(lines) -> None:
    for line in lines:
        print(line)


def explore(game: MansionMysteryGame) -> None:
    """Run the exploration loop until the player quits."""
    print("\n--- Exploration begins ---\n")
    _print_lines(describe_step(game.start()))

    while True:
        user_input = input(
            f"\n[{game.current_room}] Paths: (left) (right) (quit) > "
        ).strip()

        if not user_input:
            continue

        lower = user_input.lower()

        # ---- Command: help ----
        if lower == "/help":
            print(HELP_TEXT)
            continue

        # ---- Command: notebook ----
        if lower == "/clues":
            _print_lines(describe_clues(game.collected_clues()))
            continue

        # ---- Command: status ----
        if lower == "/status":
            st = game.state
            print(f"  Current room    : {game.current_room}")
            print(f"  Steps taken     : {st.steps}")
            print(f"  Rooms visited   : {len(st.rooms_visited)}")
            print(f"  Clues collected : {st.clues_collected}")
            continue

        # ---- Navigation ----
        event = game.move(user_input)
        print()
        _print_lines(describe_step(event))
        if event.navigation is Navigation.QUIT:
            break


def accuse(game: MansionMysteryGame) -> None:
    """Print the final clue report, read one accusation and print the verdict."""
    print("\n" + "#" * 50)
    print("     FINAL REPORT: CLUES COLLECTED")
    print("#" * 50)
    _print_lines(describe_clues(game.collected_clues()))
    print("#" * 50)

    print("\n--- JUDGEMENT PHASE ---")
    print(f"Suspects: {', '.join(game.known_suspects())}")
    accused = input("Accuse the culprit: ")

    verdict = game.accuse(accused)
    print("\n--- EVIDENCE CHECK ---")
    _print_lines(describe_verdict(verdict))


def run_cli() -> None:
    """
    Main CLI game loop.

    Loads any .env overrides, builds the game engine, prints the case
    briefing, runs the exploration until the player quits, then the
    accusation phase.
    """
    hash_cfg, game_cfg, _ = load_config_from_env()
    game = MansionMysteryGame(hash_config=hash_cfg, game_config=game_cfg)

    # --- Case briefing banner ---
    print("\n" + "=" * 60)
    print(f"   {CASE_TITLE}")
    print("=" * 60)
    print(CASE_BRIEFING.format(threshold=game_cfg.verdict_threshold))
    print(HELP_TEXT)
    print("-" * 60)

    explore(game)
    accuse(game)


def main() -> None:
    # Configure logging at the entry point so all mansion_mystery.* loggers
    # emit through one handler. MANSION_LOG_LEVEL in the environment or a
    # .env file selects the level.
    load_dotenv()
    configure_logging(load_config_from_env()[2])
    run_cli()


if __name__ == "__main__":
    main()
