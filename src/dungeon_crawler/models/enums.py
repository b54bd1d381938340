"""Enumeration types for the dungeon crawler.

These enums cover item kinds, map tiles, equip slots and the run status of
a game.
"""

from __future__ import annotations

from enum import StrEnum


class ItemType(StrEnum):
    """Kind of an item, deciding what the item's value means."""

    WEAPON = "weapon"
    """Equippable; value is an attack bonus."""

    ARMOR = "armor"
    """Equippable; value is a defense bonus."""

    POTION = "potion"
    """Consumable; value is the amount healed."""

    KEY = "key"
    """Neither equippable nor usable; value is ignored."""

    @property
    def slot(self) -> EquipSlot | None:
        """Get the equip slot this kind of item goes into.

        Returns:
            The matching EquipSlot, or None if the kind cannot be equipped.
        """
        return {
            ItemType.WEAPON: EquipSlot.WEAPON,
            ItemType.ARMOR: EquipSlot.ARMOR,
        }.get(self)

    @property
    def is_consumable(self) -> bool:
        return self is ItemType.POTION


class EquipSlot(StrEnum):
    """The two mutually exclusive held-item positions on a player."""

    WEAPON = "weapon"
    ARMOR = "armor"


class Tile(StrEnum):
    """A single cell of the map grid."""

    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"
    """Reserved for room connectivity; never stamped by room generation."""
    EMPTY = "empty"

    @property
    def glyph(self) -> str:
        """Get the character a renderer draws for this tile.

        Returns:
            A single display character.
        """
        return {
            Tile.FLOOR: ".",
            Tile.WALL: "#",
            Tile.DOOR: "+",
            Tile.EMPTY: " ",
        }[self]


class GameStatus(StrEnum):
    """Run status of a game."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class SessionState(StrEnum):
    """Top-level state of the session state machine."""

    MENU = "menu"
    """No active game."""

    IN_GAME = "in_game"
    """A game is active and owned by the session."""

    TERMINATED = "terminated"
    """The player quit from the menu; the run loop stops."""


__all__ = [
    "ItemType",
    "EquipSlot",
    "Tile",
    "GameStatus",
    "SessionState",
]
