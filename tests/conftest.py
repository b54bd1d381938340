"""Pytest configuration and shared fixtures.

This module provides common fixtures for the dungeon crawler test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dungeon_crawler.core.exceptions import InputClosedError


if TYPE_CHECKING:
    from collections.abc import Generator

    from dungeon_crawler.core.config import Settings
    from dungeon_crawler.models import Item, Map, Player
    from dungeon_crawler.models.snapshot import GameSnapshot


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache and logging context around each test."""
    from dungeon_crawler.core.config import clear_settings_cache
    from dungeon_crawler.core.logging import clear_context

    clear_settings_cache()
    yield
    clear_settings_cache()
    clear_context()


@pytest.fixture
def settings(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Provide default settings isolated from any local .env file."""
    from dungeon_crawler.core.config import Settings

    monkeypatch.chdir(tmp_path)
    return Settings()


@pytest.fixture
def small_settings(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Provide settings for a 10x10 map with a 6x4 room and a starting kit."""
    from dungeon_crawler.core.config import MapSettings, PlayerSettings, Settings

    monkeypatch.chdir(tmp_path)
    return Settings(
        map=MapSettings(width=10, height=10, room_width=6, room_height=4),
        player=PlayerSettings(
            default_name="Tester",
            starting_items=["sword", "health_potion", "rusty_key"],
        ),
    )


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sword() -> Item:
    from dungeon_crawler.models import create_sword

    return create_sword()


@pytest.fixture
def potion() -> Item:
    from dungeon_crawler.models import create_health_potion

    return create_health_potion()


@pytest.fixture
def armor() -> Item:
    from dungeon_crawler.models import create_leather_armor

    return create_leather_armor()


@pytest.fixture
def key() -> Item:
    from dungeon_crawler.models import create_rusty_key

    return create_rusty_key()


@pytest.fixture
def hero() -> Player:
    """Create a fresh level 1 player."""
    from dungeon_crawler.models import Player

    return Player.new("Hero")


@pytest.fixture
def stocked_hero(hero: Player, sword: Item, potion: Item, armor: Item, key: Item) -> Player:
    """Create a player carrying sword, potion, armor and key, in that order."""
    for item in (sword, potion, armor, key):
        hero.pick_up(item)
    return hero


@pytest.fixture
def blank_map() -> Map:
    from dungeon_crawler.models import Map

    return Map.new(10, 10)


# =============================================================================
# UI Doubles
# =============================================================================


class ScriptedUI:
    """Feeds a fixed list of tokens and records every rendered frame."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = list(tokens)
        self.frames: list[tuple[str, str]] = []
        self.snapshots: list[GameSnapshot] = []

    def read_token(self) -> str:
        if not self._tokens:
            raise InputClosedError("Script exhausted")
        return self._tokens.pop(0)

    def render_menu(self, message: str = "") -> None:
        self.frames.append(("menu", message))

    def render_game(self, snapshot: GameSnapshot, message: str = "") -> None:
        self.frames.append(("game", message))
        self.snapshots.append(snapshot)

    def show_message(self, message: str) -> None:
        self.frames.append(("message", message))


@pytest.fixture
def scripted_ui() -> type[ScriptedUI]:
    """Provide the ScriptedUI class so tests can build it with their tokens."""
    return ScriptedUI
