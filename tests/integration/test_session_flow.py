"""Integration tests for a full run through the terminal front end.

Drives a Session with TerminalUI over in-memory streams, the same way the
command line entry point wires them together.
"""

from __future__ import annotations

import io

import pytest

from dungeon_crawler.core.config import Settings
from dungeon_crawler.engine import Session
from dungeon_crawler.models import GameStatus, SessionState
from dungeon_crawler.ui import TerminalUI


def _play(settings: Settings, script: str) -> tuple[Session, str]:
    output = io.StringIO()
    ui = TerminalUI(settings, output=output, input_stream=io.StringIO(script))
    ui.clear_screen = False
    session = Session(settings)
    session.run(ui)
    return session, output.getvalue()


@pytest.fixture(autouse=True)
def fixed_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "100")
    monkeypatch.setenv("LINES", "30")


class TestSessionFlow:
    """Test a scripted session from menu to exit."""

    def test_full_run(self, small_settings: Settings) -> None:
        """Start a game, equip, drink, wait, return to menu, and exit."""
        session, output = _play(small_settings, "1\ne 1\nu 1\n\n\nq\n3\n")

        assert session.state == SessionState.TERMINATED
        assert "Starting new game..." in output
        assert "You equip the Sword. Attack 20, defense 10." in output
        assert "You use the Health Potion. Health: 120." in output
        assert "Turn 2" in output
        assert "Returned to the main menu." in output
        assert output.count("1. New Game") == 2

    def test_errors_are_shown_not_raised(self, small_settings: Settings) -> None:
        session, output = _play(small_settings, "7\n1\ne 9\nu 1\nq\n3\n")

        assert session.is_terminated
        assert "Invalid input! Please select a number between 1 and 3." in output
        assert "Invalid inventory index" in output
        assert "Sword cannot be used" in output

    def test_end_of_input_mid_game(self, small_settings: Settings) -> None:
        session, output = _play(small_settings, "1\ne 1\n")

        assert session.is_terminated
        assert session.game is None
        assert output.endswith("> ")

    def test_load_keeps_menu(self, small_settings: Settings) -> None:
        session, output = _play(small_settings, "2\n3\n")

        assert session.is_terminated
        assert "Loading saved games is not implemented yet." in output
        assert "Starting new game..." not in output


class TestRunLifecycle:
    """Test progression rules on a game started by the session."""

    def test_progression_and_death(self, small_settings: Settings) -> None:
        session = Session(small_settings)
        session.handle("new")
        game = session.game
        assert game is not None

        assert game.player.gain_experience(250) == 2
        session.handle("e 1")
        assert game.player.attack == 14 + 10

        assert game.player.take_damage(500) is True
        game.update()
        assert game.status == GameStatus.RUNNING

        game.resolve_death()
        assert game.status == GameStatus.GAME_OVER
        assert session.handle("").state == SessionState.IN_GAME
        assert game.turn == 1

        session.handle("quit")
        assert session.game is None
