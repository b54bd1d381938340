"""Terminal presentation for the dungeon crawler.

Kept outside the simulation packages: it only sees snapshots and hands
back input tokens.
"""

from __future__ import annotations

from dungeon_crawler.ui.terminal import TerminalUI, game_lines, menu_lines


__all__ = ["TerminalUI", "game_lines", "menu_lines"]
