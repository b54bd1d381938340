"""Plain terminal front end.

Draws box-framed screens with ``print``-style writes and reads one line of
input per turn. Frames are built as lists of strings first so their layout
can be checked without a terminal.
"""

from __future__ import annotations

import shutil
import sys
from typing import TYPE_CHECKING, TextIO

from dungeon_crawler.core.constants import SUBTITLE, TITLE_ART
from dungeon_crawler.core.exceptions import InputClosedError
from dungeon_crawler.core.logging import get_logger


if TYPE_CHECKING:
    from dungeon_crawler.core.config import Settings
    from dungeon_crawler.models.snapshot import GameSnapshot

logger = get_logger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"
PROMPT = "> "
MENU_OPTIONS = ("1. New Game", "2. Load Game", "3. Exit")
GAME_HELP = "[Enter] wait   e N equip   u N use   q menu"


# =============================================================================
# Frame Layout
# =============================================================================


def boxed(text: str, width: int) -> str:
    """Left-aligned text inside vertical borders, clipped to fit."""
    inner = width - 2
    return f"│{text[:inner].ljust(inner)}│"


def centered(text: str, width: int) -> str:
    """Centered text inside vertical borders, clipped to fit."""
    inner = width - 2
    return f"│{text[:inner].center(inner)}│"


def top_border(width: int) -> str:
    return f"┌{'─' * (width - 2)}┐"


def bottom_border(width: int) -> str:
    return f"└{'─' * (width - 2)}┘"


def menu_lines(width: int, height: int, title: str, message: str = "") -> list[str]:
    """Build the main menu frame.

    The title block is vertically centered; the frame is exactly ``height``
    lines tall when the terminal is tall enough to hold the content.
    """
    title_width = max(len(line) for line in TITLE_ART)
    body = [centered(line.ljust(title_width), width) for line in TITLE_ART]
    body += [centered(SUBTITLE, width), centered(title, width), boxed("", width)]
    body += [centered(option, width) for option in MENU_OPTIONS]
    body += [boxed("", width), centered(message, width)]

    padding = max(height - len(body) - 2, 0)
    above = padding // 2
    below = padding - above
    return [
        top_border(width),
        *[boxed("", width)] * above,
        *body,
        *[boxed("", width)] * below,
        bottom_border(width),
    ]


def stat_lines(snapshot: GameSnapshot, width: int) -> list[str]:
    player = snapshot.player
    inventory = "  ".join(
        f"{number}. {label}" for number, label in enumerate(player.inventory, start=1)
    )
    return [
        boxed(
            f" {player.name}  HP {player.health}  ATK {player.attack}  "
            f"DEF {player.defense}  SPD {player.speed}",
            width,
        ),
        boxed(
            f" Level {player.level}  XP {player.experience}/{player.experience_to_next_level}"
            f"  Turn {snapshot.turn}  [{snapshot.status.value}]",
            width,
        ),
        boxed(
            f" Weapon: {player.equipped_weapon or '-'}  Armor: {player.equipped_armor or '-'}",
            width,
        ),
        boxed(f" Inventory: {inventory or 'empty'}", width),
    ]


def game_lines(snapshot: GameSnapshot, width: int, message: str = "") -> list[str]:
    """Build an in-game frame: map on top, stat panel and prompt help below."""
    lines = [top_border(width)]
    lines += [centered(row, width) for row in snapshot.map.glyph_rows()]
    lines.append(f"├{'─' * (width - 2)}┤")
    lines += stat_lines(snapshot, width)
    lines.append(boxed(f" {message}" if message else "", width))
    lines.append(boxed(f" {GAME_HELP}", width))
    lines.append(bottom_border(width))
    return lines


# =============================================================================
# Terminal
# =============================================================================


class TerminalUI:
    """Terminal renderer and line reader.

    Attributes:
        clear_screen: Whether frames start by clearing the screen.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        output: TextIO | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        """Initialize the terminal front end.

        Args:
            settings: Application settings (UI section, name and version are used).
            output: Stream frames are written to; stdout by default.
            input_stream: Stream lines are read from; stdin by default.
        """
        self._output = output or sys.stdout
        self._input = input_stream or sys.stdin
        self._fallback = (settings.ui.fallback_width, settings.ui.fallback_height)
        self._title = f"{settings.app_name} v{settings.app_version}"
        self.clear_screen = settings.ui.clear_screen

    def size(self) -> tuple[int, int]:
        """Current (columns, rows), or the configured fallback."""
        columns, rows = shutil.get_terminal_size(self._fallback)
        if columns <= 0 or rows <= 0:
            return self._fallback
        return (columns, rows)

    def _write(self, lines: list[str]) -> None:
        if self.clear_screen:
            self._output.write(CLEAR_SCREEN)
        self._output.write("\n".join(lines) + "\n")
        self._output.flush()

    def render_menu(self, message: str = "") -> None:
        width, height = self.size()
        self._write(menu_lines(width, height - 1, self._title, message))

    def render_game(self, snapshot: GameSnapshot, message: str = "") -> None:
        width, _ = self.size()
        self._write(game_lines(snapshot, max(width, snapshot.map.width + 2), message))

    def show_message(self, message: str) -> None:
        self._output.write(f"{message}\n")
        self._output.flush()

    def read_token(self) -> str:
        """Prompt for and read one line.

        Raises:
            InputClosedError: On end of input.
        """
        self._output.write(PROMPT)
        self._output.flush()
        line = self._input.readline()
        if not line:
            raise InputClosedError("Input stream closed")
        token = line.strip()
        logger.debug("Input read", token=token)
        return token


__all__ = [
    "TerminalUI",
    "menu_lines",
    "game_lines",
    "stat_lines",
    "boxed",
    "centered",
]
