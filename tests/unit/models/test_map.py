"""Tests for the tile map and room stamping."""

from __future__ import annotations

import pydantic
import pytest

from dungeon_crawler.models import Map, Room, Tile


def _placed_rectangle(game_map: Map, room: Room) -> set[tuple[int, int]]:
    x, y, width, height = game_map.room_bounds(room)
    return {(col, row) for row in range(y, y + height) for col in range(x, x + width)}


class TestMapConstruction:
    """Tests for map allocation."""

    def test_new_map_is_empty(self, blank_map: Map) -> None:
        assert blank_map.width == 10
        assert blank_map.height == 10
        assert len(blank_map.tiles) == 10
        assert all(len(row) == 10 for row in blank_map.tiles)
        assert blank_map.count(Tile.EMPTY) == 100
        assert blank_map.rooms == []

    def test_non_square_extent(self) -> None:
        game_map = Map.new(7, 3)

        assert len(game_map.tiles) == 3
        assert all(len(row) == 7 for row in game_map.tiles)

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-3, 4)])
    def test_non_positive_extent_rejected(self, width: int, height: int) -> None:
        with pytest.raises(pydantic.ValidationError):
            Map.new(width, height)

    def test_mismatched_grid_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Map(width=3, height=2, tiles=[[Tile.EMPTY] * 3])


class TestTileAccess:
    """Tests for bounds-checked reads and writes."""

    def test_get_tile_in_bounds(self, blank_map: Map) -> None:
        assert blank_map.get_tile(0, 0) == Tile.EMPTY
        assert blank_map.get_tile(9, 9) == Tile.EMPTY

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (10, 0), (0, 10), (42, -7)])
    def test_get_tile_out_of_bounds(self, blank_map: Map, x: int, y: int) -> None:
        assert blank_map.get_tile(x, y) is None

    def test_set_tile(self, blank_map: Map) -> None:
        blank_map.set_tile(3, 4, Tile.DOOR)

        assert blank_map.get_tile(3, 4) == Tile.DOOR
        assert blank_map.tiles[4][3] == Tile.DOOR

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (10, 5), (5, 10), (-5, -5)])
    def test_set_tile_out_of_bounds_is_noop(self, blank_map: Map, x: int, y: int) -> None:
        blank_map.set_tile(x, y, Tile.WALL)

        assert blank_map.count(Tile.WALL) == 0


class TestCreateRoom:
    """Tests for stamping rooms."""

    def test_centered_six_by_four(self, blank_map: Map) -> None:
        """Test that a 6x4 room on a 10x10 map spans (2,3)-(7,6)."""
        blank_map.create_room(Room.new(6, 4))

        assert blank_map.room_bounds(Room.new(6, 4)) == (2, 3, 6, 4)
        for x in range(2, 8):
            assert blank_map.get_tile(x, 3) == Tile.WALL
            assert blank_map.get_tile(x, 6) == Tile.WALL
        for y in range(3, 7):
            assert blank_map.get_tile(2, y) == Tile.WALL
            assert blank_map.get_tile(7, y) == Tile.WALL
        for y in (4, 5):
            for x in range(3, 7):
                assert blank_map.get_tile(x, y) == Tile.FLOOR

    @pytest.mark.parametrize(
        ("map_size", "room_size"),
        [((10, 10), (6, 4)), ((9, 7), (4, 4)), ((12, 5), (12, 5)), ((8, 8), (3, 3)), ((5, 5), (1, 1))],
    )
    def test_walls_on_border_floor_inside(
        self, map_size: tuple[int, int], room_size: tuple[int, int]
    ) -> None:
        game_map = Map.new(*map_size)
        room = Room.new(*room_size)
        x, y, width, height = game_map.room_bounds(room)

        game_map.create_room(room)

        for row in range(game_map.height):
            for col in range(game_map.width):
                inside = x <= col < x + width and y <= row < y + height
                border = inside and (col in (x, x + width - 1) or row in (y, y + height - 1))
                tile = game_map.get_tile(col, row)
                if border:
                    assert tile == Tile.WALL
                elif inside:
                    assert tile == Tile.FLOOR
                else:
                    assert tile == Tile.EMPTY

    def test_cells_outside_keep_previous_value(self, blank_map: Map) -> None:
        room = Room.new(6, 4)
        blank_map.set_tile(0, 0, Tile.DOOR)
        blank_map.set_tile(9, 9, Tile.FLOOR)

        blank_map.create_room(room)

        assert blank_map.get_tile(0, 0) == Tile.DOOR
        assert blank_map.get_tile(9, 9) == Tile.FLOOR

    def test_overwrites_existing_content(self, blank_map: Map) -> None:
        blank_map.set_tile(4, 4, Tile.DOOR)
        blank_map.set_tile(2, 3, Tile.FLOOR)

        blank_map.create_room(Room.new(6, 4))

        assert blank_map.get_tile(4, 4) == Tile.FLOOR
        assert blank_map.get_tile(2, 3) == Tile.WALL

    def test_never_stamps_doors(self, blank_map: Map) -> None:
        blank_map.create_room(Room.new(6, 4))
        assert blank_map.count(Tile.DOOR) == 0

    def test_oversized_room_is_clipped(self) -> None:
        """Test that a room larger than the map is clipped, not rejected."""
        game_map = Map.new(4, 4)
        room = Room.new(8, 8)

        game_map.create_room(room)

        assert game_map.room_bounds(room) == (-2, -2, 8, 8)
        assert game_map.count(Tile.FLOOR) == 16
        assert game_map.count(Tile.WALL) == 0

    def test_odd_overhang_clips_left_edge(self) -> None:
        """Test that floor division shifts an overhanging room left."""
        game_map = Map.new(5, 3)
        room = Room.new(6, 3)

        game_map.create_room(room)

        assert game_map.room_bounds(room) == (-1, 0, 6, 3)
        assert game_map.render_rows() == ["#####", "....#", "#####"]

    def test_registry_records_rooms(self, blank_map: Map) -> None:
        first = blank_map.create_room(Room.new(6, 4))
        second = blank_map.create_room(Room.new(4, 4))

        assert (first, second) == (0, 1)
        assert blank_map.get_room(0) == Room.new(6, 4)
        assert blank_map.get_room(1) == Room.new(4, 4)
        assert blank_map.get_room(2) is None

    def test_recentering_ignores_registry(self, blank_map: Map) -> None:
        """Test that each stamp is centered independently of earlier rooms."""
        blank_map.create_room(Room.new(10, 10))
        blank_map.create_room(Room.new(4, 4))

        assert blank_map.get_tile(3, 3) == Tile.WALL
        assert blank_map.get_tile(4, 4) == Tile.FLOOR
        assert blank_map.get_tile(0, 0) == Tile.WALL


class TestMapViews:
    """Tests for renderer-facing helpers."""

    def test_render_rows(self) -> None:
        game_map = Map.new(5, 4)
        game_map.create_room(Room.new(3, 3))

        assert game_map.render_rows() == [
            " ### ",
            " #.# ",
            " ### ",
            "     ",
        ]

    def test_rows_iterates_top_to_bottom(self, blank_map: Map) -> None:
        blank_map.set_tile(0, 9, Tile.WALL)
        rows = list(blank_map.rows())

        assert len(rows) == 10
        assert rows[-1][0] == Tile.WALL
