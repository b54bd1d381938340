"""Read-only views of game state for renderers.

Renderers never receive the live Player or Map. They get these frozen
copies, built once per frame, so nothing on the presentation side can
mutate the simulation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from dungeon_crawler.models.enums import GameStatus, Tile


if TYPE_CHECKING:
    from dungeon_crawler.models.map import Map
    from dungeon_crawler.models.player import Player


class PlayerSnapshot(BaseModel):
    """Stat sheet of a player at one point in time."""

    model_config = ConfigDict(frozen=True)

    name: str
    health: int
    attack: int
    defense: int
    speed: int
    level: int
    experience: int
    experience_to_next_level: int
    inventory: tuple[str, ...] = Field(default=(), description="Item summaries, in order")
    equipped_weapon: str | None = None
    equipped_armor: str | None = None

    @classmethod
    def from_player(cls, player: Player) -> PlayerSnapshot:
        return cls(
            name=player.name,
            health=player.health,
            attack=player.attack,
            defense=player.defense,
            speed=player.speed,
            level=player.level,
            experience=player.experience,
            experience_to_next_level=player.experience_to_next_level,
            inventory=tuple(item.summary() for item in player.items),
            equipped_weapon=player.equipped_weapon.summary() if player.equipped_weapon else None,
            equipped_armor=player.equipped_armor.summary() if player.equipped_armor else None,
        )


class MapSnapshot(BaseModel):
    """Frozen copy of the tile grid."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    tiles: tuple[tuple[Tile, ...], ...]
    room_count: int = 0

    @classmethod
    def from_map(cls, game_map: Map) -> MapSnapshot:
        return cls(
            width=game_map.width,
            height=game_map.height,
            tiles=tuple(tuple(row) for row in game_map.rows()),
            room_count=len(game_map.rooms),
        )

    def tile(self, x: int, y: int) -> Tile | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.tiles[y][x]
        return None

    def glyph_rows(self) -> list[str]:
        return ["".join(tile.glyph for tile in row) for row in self.tiles]


class GameSnapshot(BaseModel):
    """Everything a renderer needs to draw one in-game frame."""

    model_config = ConfigDict(frozen=True)

    player: PlayerSnapshot
    map: MapSnapshot
    status: GameStatus
    turn: int


__all__ = ["PlayerSnapshot", "MapSnapshot", "GameSnapshot"]
