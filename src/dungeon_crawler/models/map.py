"""Tile map and room stamping.

The map is a ``height x width`` grid of tiles indexed as ``tiles[y][x]``.
Reads outside the grid return None and writes outside the grid are dropped,
so stamping a room larger than the map clips it instead of failing.

Rooms that have been stamped are kept in an ordered registry. Generation
does not consult it; it exists so a later connectivity pass (corridors,
doors) can find the rooms by index.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.enums import Tile
from dungeon_crawler.models.room import Room


logger = get_logger(__name__)


class Map(BaseModel):
    """The game world grid.

    Attributes:
        width: Width in tiles.
        height: Height in tiles.
        tiles: Rows of tiles, ``tiles[y][x]``.
        rooms: Registry of stamped rooms, in stamping order.
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(gt=0, description="Width in tiles")
    height: int = Field(gt=0, description="Height in tiles")
    tiles: list[list[Tile]] = Field(default_factory=list, description="Tile rows")
    rooms: list[Room] = Field(default_factory=list, description="Stamped rooms")

    @model_validator(mode="after")
    def fill_grid(self) -> "Map":
        """Allocate an Empty grid, or check a supplied one matches the extent.

        Returns:
            Self with a grid of exactly ``height`` rows of ``width`` tiles.

        Raises:
            ValueError: If supplied tiles do not match width and height.
        """
        if not self.tiles:
            self.tiles = [[Tile.EMPTY] * self.width for _ in range(self.height)]
        elif len(self.tiles) != self.height or any(len(row) != self.width for row in self.tiles):
            raise ValueError(
                f"tile grid does not match map extent {self.width}x{self.height}"
            )
        return self

    @classmethod
    def new(cls, width: int, height: int) -> Map:
        return cls(width=width, height=height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Tile | None:
        """Read a tile.

        Args:
            x: Column.
            y: Row.

        Returns:
            The tile, or None if the coordinates are off the map.
        """
        if self.in_bounds(x, y):
            return self.tiles[y][x]
        return None

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Write a tile. Off-map coordinates are silently ignored."""
        if self.in_bounds(x, y):
            self.tiles[y][x] = tile

    def room_bounds(self, room: Room) -> tuple[int, int, int, int]:
        """Placement of a room centered on this map.

        Args:
            room: The blueprint to place.

        Returns:
            ``(x, y, width, height)`` of the rectangle, top-left first. The
            origin may be negative when the room is larger than the map.
        """
        x = (self.width - room.width) // 2
        y = (self.height - room.height) // 2
        return (x, y, room.width, room.height)

    def create_room(self, room: Room) -> int:
        """Stamp a room at the center of the map.

        The rectangle's border becomes Wall and its interior Floor,
        overwriting whatever was there. Cells falling off the map are
        dropped.

        Args:
            room: The blueprint to stamp.

        Returns:
            Index of the room in the registry.
        """
        x, y, width, height = self.room_bounds(room)
        bottom = y + height - 1
        right = x + width - 1

        for row in range(y, y + height):
            for col in range(x, x + width):
                on_border = row in (y, bottom) or col in (x, right)
                self.set_tile(col, row, Tile.WALL if on_border else Tile.FLOOR)

        self.rooms.append(room)
        index = len(self.rooms) - 1
        logger.debug(
            "Room stamped",
            room_index=index,
            origin=(x, y),
            size=(width, height),
            clipped=not (self.in_bounds(x, y) and self.in_bounds(right, bottom)),
        )
        return index

    def get_room(self, index: int) -> Room | None:
        """Look up a stamped room by registry index."""
        if 0 <= index < len(self.rooms):
            return self.rooms[index]
        return None

    def rows(self) -> Iterator[list[Tile]]:
        """Iterate over the tile rows, top to bottom."""
        yield from self.tiles

    def count(self, tile: Tile) -> int:
        """Number of cells holding the given tile."""
        counts = Counter(cell for row in self.tiles for cell in row)
        return counts[tile]

    def render_rows(self) -> list[str]:
        """One glyph string per row, for renderers."""
        return ["".join(tile.glyph for tile in row) for row in self.tiles]


__all__ = ["Map"]
