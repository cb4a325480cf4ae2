import pytest

import cli
from game_engine import MansionMysteryGame

from conftest import SMALL_LAYOUT


@pytest.fixture
def feed(monkeypatch):
    """Replace input() with a scripted sequence of answers."""
    def _feed(*answers):
        replies = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    return _feed


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("MANSION_HASH_BUCKETS", "MANSION_VERDICT_THRESHOLD", "MANSION_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_full_session_with_reference_case(feed, capsys):
    feed("/status", "left", "", "jump", "/clues", "left", "left", "left", "quit", "Mordomo")
    cli.run_cli()
    out = capsys.readouterr().out

    assert "THE MANSION MYSTERY" in out
    assert "Current room    : Hall de Entrada" in out
    assert '[CLUE FOUND] "O mordomo e canhoto."' in out
    assert "[INVALID] Unknown command 'jump'" in out
    assert "[BLOCKED] There is no way left from Jardim." in out
    assert "[EXIT] You leave the mansion from Jardim." in out
    assert "Supporting clues: 1 (needed: 2)" in out
    assert "Accusation FAILS" in out


def test_explore_and_accuse_success(feed, capsys):
    game = MansionMysteryGame(layout=SMALL_LAYOUT)
    feed("l", "l", "s", "Mordomo")
    cli.explore(game)
    cli.accuse(game)
    out = capsys.readouterr().out
    assert "  - O assassino deixou um bilhete." in out
    assert "Accusation SUCCEEDS" in out


def test_empty_notebook_report(feed, capsys):
    game = MansionMysteryGame(layout={"name": "Porao"})
    feed("quit", "")
    cli.explore(game)
    cli.accuse(game)
    out = capsys.readouterr().out
    assert "No clues were collected." in out
    assert "Invalid accusation" in out
