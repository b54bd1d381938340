"""Interfaces between the session and its presentation collaborator.

The session pulls input tokens and pushes frames. Anything that provides
these two methods sets can drive it: the bundled terminal UI, a scripted
test double, or another front end.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from dungeon_crawler.models.snapshot import GameSnapshot


@runtime_checkable
class InputSource(Protocol):
    """Supplies one input token per call."""

    def read_token(self) -> str:
        """Block until a line is available and return it trimmed.

        Raises:
            InputClosedError: When no more input will arrive.
        """
        ...


@runtime_checkable
class Renderer(Protocol):
    """Draws frames from read-only state."""

    def render_menu(self, message: str = "") -> None:
        ...

    def render_game(self, snapshot: GameSnapshot, message: str = "") -> None:
        ...

    def show_message(self, message: str) -> None:
        """Print a parting line after the last frame."""
        ...


@runtime_checkable
class UserInterface(InputSource, Renderer, Protocol):
    """A collaborator that both reads input and renders."""


__all__ = ["InputSource", "Renderer", "UserInterface"]
