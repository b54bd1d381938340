"""Game engine module for the dungeon crawler.

Submodules:
    interfaces: Protocols the presentation collaborator implements.
    session: Menu / in-game state machine and the pull loop.

Example:
    >>> from dungeon_crawler.engine import Session
    >>> session = Session()
    >>> session.handle("new").state
    <SessionState.IN_GAME: 'in_game'>
"""

from __future__ import annotations

from dungeon_crawler.engine.interfaces import InputSource, Renderer, UserInterface
from dungeon_crawler.engine.session import (
    GAME_COMMANDS,
    Command,
    Session,
    SessionResponse,
    new_game,
)


__all__ = [
    "InputSource",
    "Renderer",
    "UserInterface",
    "Session",
    "SessionResponse",
    "Command",
    "GAME_COMMANDS",
    "new_game",
]
