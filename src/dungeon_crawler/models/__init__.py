"""Pydantic models for the dungeon crawler simulation.

This package holds the game state: items, rooms, the tile map, the player
character and the game aggregate, plus the frozen snapshots handed to
renderers.
"""

from __future__ import annotations

from dungeon_crawler.models.enums import (
    EquipSlot,
    GameStatus,
    ItemType,
    SessionState,
    Tile,
)
from dungeon_crawler.models.game import Game
from dungeon_crawler.models.item import (
    ITEM_FACTORIES,
    Item,
    create_health_potion,
    create_item,
    create_leather_armor,
    create_rusty_key,
    create_sword,
)
from dungeon_crawler.models.map import Map
from dungeon_crawler.models.player import InventoryEntry, Player
from dungeon_crawler.models.room import Room
from dungeon_crawler.models.snapshot import GameSnapshot, MapSnapshot, PlayerSnapshot


__all__ = [
    # Enums
    "EquipSlot",
    "GameStatus",
    "ItemType",
    "SessionState",
    "Tile",
    # Items
    "Item",
    "ITEM_FACTORIES",
    "create_item",
    "create_sword",
    "create_health_potion",
    "create_leather_armor",
    "create_rusty_key",
    # World
    "Room",
    "Map",
    # Characters
    "Player",
    "InventoryEntry",
    # Game
    "Game",
    "GameSnapshot",
    "MapSnapshot",
    "PlayerSnapshot",
]
