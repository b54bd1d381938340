"""Item definitions.

Items are frozen value objects. Moving one between the inventory and an
equip slot moves the value itself; nothing holds a shared mutable item.

The factory functions below produce the stock items of the game, and
``ITEM_FACTORIES`` indexes them by slug so configuration can refer to them.
"""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from dungeon_crawler.models.enums import EquipSlot, ItemType


class Item(BaseModel):
    """A piece of equipment or a consumable.

    Attributes:
        name: Display name.
        item_type: Kind of the item.
        value: Attack bonus (weapon), defense bonus (armor) or heal amount
            (potion). Unused for keys.
        description: Flavor text.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Display name")
    item_type: ItemType = Field(description="Kind of the item")
    value: int = Field(default=0, description="Bonus or heal amount")
    description: str = Field(default="", description="Flavor text")

    @property
    def slot(self) -> EquipSlot | None:
        """Equip slot for this item, or None if it cannot be equipped."""
        return self.item_type.slot

    @property
    def is_equippable(self) -> bool:
        return self.slot is not None

    @property
    def is_usable(self) -> bool:
        return self.item_type.is_consumable

    def summary(self) -> str:
        """Short one-line label, e.g. ``Sword (weapon +10)``."""
        if self.item_type is ItemType.KEY:
            return f"{self.name} (key)"
        return f"{self.name} ({self.item_type.value} +{self.value})"


# =============================================================================
# Stock Items
# =============================================================================


def create_sword() -> Item:
    return Item(
        name="Sword",
        item_type=ItemType.WEAPON,
        value=10,
        description="A simple sword.",
    )


def create_health_potion() -> Item:
    return Item(
        name="Health Potion",
        item_type=ItemType.POTION,
        value=20,
        description="Restores 20 health.",
    )


def create_leather_armor() -> Item:
    return Item(
        name="Leather Armor",
        item_type=ItemType.ARMOR,
        value=5,
        description="Stiff boiled leather.",
    )


def create_rusty_key() -> Item:
    return Item(
        name="Rusty Key",
        item_type=ItemType.KEY,
        value=0,
        description="It must open something.",
    )


ITEM_FACTORIES: dict[str, Callable[[], Item]] = {
    "sword": create_sword,
    "health_potion": create_health_potion,
    "leather_armor": create_leather_armor,
    "rusty_key": create_rusty_key,
}


def create_item(slug: str) -> Item:
    """Create a stock item by slug.

    Args:
        slug: Key in ``ITEM_FACTORIES``.

    Returns:
        A new Item.

    Raises:
        KeyError: If the slug is unknown.
    """
    return ITEM_FACTORIES[slug]()


__all__ = [
    "Item",
    "ITEM_FACTORIES",
    "create_item",
    "create_sword",
    "create_health_potion",
    "create_leather_armor",
    "create_rusty_key",
]
