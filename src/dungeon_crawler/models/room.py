"""Room blueprints.

A Room only describes dimensions. Where it ends up is decided by the map
that stamps it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Room(BaseModel):
    """Rectangular room blueprint.

    Attributes:
        width: Width in tiles, walls included.
        height: Height in tiles, walls included.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(gt=0, description="Width in tiles")
    height: int = Field(gt=0, description="Height in tiles")

    @classmethod
    def new(cls, width: int, height: int) -> Room:
        return cls(width=width, height=height)

    def center(self) -> tuple[int, int]:
        """Center of the blueprint, relative to its own top-left corner.

        Returns:
            ``(width // 2, height // 2)``.
        """
        return (self.width // 2, self.height // 2)

    @property
    def area(self) -> int:
        return self.width * self.height


__all__ = ["Room"]
