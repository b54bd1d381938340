"""Rusty Crawler - a small terminal dungeon crawler.

A player character explores a stamped map, gains experience and manages
equipment and consumables. The simulation (models) and the session state
machine (engine) never draw anything themselves; the terminal front end
(ui) renders snapshots and feeds input tokens back.

Example:
    >>> from dungeon_crawler import Session
    >>> session = Session()
    >>> session.handle("new").message
    'Starting new game...'
    >>> session.game.player.level
    1

Modules:
    core: Configuration, logging, and base exceptions.
    models: Items, rooms, map, player, game and snapshots.
    engine: Session state machine and presentation interfaces.
    ui: Terminal renderer and input reader.
"""

from __future__ import annotations

# Core
from dungeon_crawler.core.config import Settings, get_settings
from dungeon_crawler.core.exceptions import CrawlerError
from dungeon_crawler.core.logging import configure_logging, get_logger

# Engine
from dungeon_crawler.engine.session import Session, SessionResponse, new_game

# Models
from dungeon_crawler.models import (
    Game,
    GameStatus,
    Item,
    ItemType,
    Map,
    Player,
    Room,
    SessionState,
    Tile,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "CrawlerError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "Session",
    "SessionResponse",
    "new_game",
    # Models
    "Game",
    "GameStatus",
    "Item",
    "ItemType",
    "Map",
    "Player",
    "Room",
    "SessionState",
    "Tile",
]
