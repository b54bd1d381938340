"""Player character sheet.

The player owns its stats, progression and inventory. Attack and defense
are not stored: they are computed from the level and whatever sits in the
weapon and armor slots, so equipment changes can never leave them stale.

Inventory entries carry a stable UUID handle. Equip and use accept either
a handle or a positional index; positions shift whenever an entry is
removed, handles do not.

Example:
    >>> hero = Player.new("Hero")
    >>> handle = hero.pick_up(create_sword())
    >>> hero.equip_item(handle).name
    'Sword'
    >>> hero.attack
    20
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dungeon_crawler.core.constants import (
    BASE_ATTACK,
    BASE_DEFENSE,
    LEVEL_UP_ATTACK,
    LEVEL_UP_DEFENSE,
    LEVEL_UP_HEALTH,
    LEVEL_UP_SPEED,
    MIN_DAMAGE,
    STARTING_EXPERIENCE_THRESHOLD,
    STARTING_HEALTH,
    STARTING_LEVEL,
    STARTING_SPEED,
    THRESHOLD_GROWTH_DENOMINATOR,
    THRESHOLD_GROWTH_NUMERATOR,
)
from dungeon_crawler.core.exceptions import (
    InvalidIndexError,
    NotEquippableError,
    NotUsableError,
    ValidationError,
)
from dungeon_crawler.core.logging import get_logger
from dungeon_crawler.models.enums import EquipSlot
from dungeon_crawler.models.item import Item


logger = get_logger(__name__)

Level = Annotated[int, Field(ge=1, description="Character level (1+)")]
InventoryRef = int | UUID


class InventoryEntry(BaseModel):
    """An item held in the inventory, tagged with a stable handle."""

    model_config = ConfigDict(frozen=True)

    handle: UUID = Field(default_factory=uuid4)
    item: Item


class Player(BaseModel):
    """The player character.

    Attributes:
        name: Character name.
        health: Current health. Not clamped to any maximum.
        speed: Movement and action speed.
        level: Current level.
        experience: Experience collected towards the next level.
        experience_to_next_level: Experience needed for the next level.
        inventory: Carried items, in pickup order.
        equipped_weapon: Item in the weapon slot.
        equipped_armor: Item in the armor slot.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",  # Ignore computed fields when deserializing
    )

    name: str = Field(min_length=1, description="Character name")
    health: int = Field(default=STARTING_HEALTH, description="Current health")
    speed: int = Field(default=STARTING_SPEED, description="Movement and action speed")
    level: Level = STARTING_LEVEL
    experience: int = Field(default=0, ge=0, description="Experience towards next level")
    experience_to_next_level: int = Field(
        default=STARTING_EXPERIENCE_THRESHOLD,
        gt=0,
        description="Experience needed for the next level",
    )
    inventory: list[InventoryEntry] = Field(default_factory=list)
    equipped_weapon: Item | None = None
    equipped_armor: Item | None = None

    @classmethod
    def new(cls, name: str) -> Player:
        return cls(name=name)

    # -------------------------------------------------------------------------
    # Derived stats
    # -------------------------------------------------------------------------

    @computed_field(description="Base attack plus weapon bonus")
    @property
    def attack(self) -> int:
        bonus = self.equipped_weapon.value if self.equipped_weapon else 0
        return BASE_ATTACK + (self.level - 1) * LEVEL_UP_ATTACK + bonus

    @computed_field(description="Base defense plus armor bonus")
    @property
    def defense(self) -> int:
        bonus = self.equipped_armor.value if self.equipped_armor else 0
        return BASE_DEFENSE + (self.level - 1) * LEVEL_UP_DEFENSE + bonus

    def is_alive(self) -> bool:
        return self.health > 0

    # -------------------------------------------------------------------------
    # Progression
    # -------------------------------------------------------------------------

    def gain_experience(self, amount: int) -> int:
        """Add experience, levelling up as many times as it pays for.

        Args:
            amount: Experience gained; must not be negative.

        Returns:
            Number of levels gained by this call.

        Raises:
            ValidationError: If amount is negative.
        """
        if amount < 0:
            raise ValidationError(
                "Experience gain cannot be negative",
                field_name="amount",
                invalid_value=amount,
            )

        self.experience += amount
        levels = 0
        while self.experience >= self.experience_to_next_level:
            self._level_up()
            levels += 1
        return levels

    def _level_up(self) -> None:
        self.experience -= self.experience_to_next_level
        self.level += 1
        self.experience_to_next_level = (
            self.experience_to_next_level
            * THRESHOLD_GROWTH_NUMERATOR
            // THRESHOLD_GROWTH_DENOMINATOR
        )
        self.health += LEVEL_UP_HEALTH
        self.speed += LEVEL_UP_SPEED
        logger.info(
            "Player leveled up",
            player=self.name,
            level=self.level,
            next_threshold=self.experience_to_next_level,
        )

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    def take_damage(self, amount: int) -> bool:
        """Apply a hit, reduced by defense but never below MIN_DAMAGE.

        Args:
            amount: Raw damage before defense.

        Returns:
            True if the hit leaves the player at or below zero health.
        """
        damage = max(amount - self.defense, MIN_DAMAGE)
        self.health -= damage
        logger.debug("Player damaged", player=self.name, raw=amount, dealt=damage, health=self.health)
        return self.health <= 0

    def heal(self, amount: int) -> None:
        self.health += amount

    # -------------------------------------------------------------------------
    # Inventory
    # -------------------------------------------------------------------------

    @property
    def items(self) -> list[Item]:
        """The inventory items, in order, without their handles."""
        return [entry.item for entry in self.inventory]

    def pick_up(self, item: Item) -> UUID:
        """Append an item to the inventory.

        Returns:
            The handle of the new inventory entry.
        """
        entry = InventoryEntry(item=item)
        self.inventory.append(entry)
        return entry.handle

    def find_entry(self, handle: UUID) -> InventoryEntry | None:
        for entry in self.inventory:
            if entry.handle == handle:
                return entry
        return None

    def _resolve(self, ref: InventoryRef) -> int:
        """Turn an index or handle into a current inventory position.

        Raises:
            InvalidIndexError: If the reference points at nothing.
        """
        if isinstance(ref, UUID):
            for position, entry in enumerate(self.inventory):
                if entry.handle == ref:
                    return position
            raise InvalidIndexError("Invalid inventory index", index=str(ref))

        if isinstance(ref, bool) or not 0 <= ref < len(self.inventory):
            raise InvalidIndexError("Invalid inventory index", index=ref)
        return ref

    def equip_item(self, ref: InventoryRef) -> Item:
        """Equip a weapon or armor from the inventory.

        Whatever was in the target slot goes back to the end of the
        inventory, so a slot is never emptied without a replacement.

        Args:
            ref: Inventory position or entry handle.

        Returns:
            The newly equipped item.

        Raises:
            InvalidIndexError: If ref points at nothing.
            NotEquippableError: If the item fits no equip slot.
        """
        position = self._resolve(ref)
        item = self.inventory[position].item
        slot = item.slot
        if slot is None:
            raise NotEquippableError(f"{item.name} cannot be equipped", index=position)

        previous = self._swap_slot(slot, item)
        if previous is not None:
            self.inventory.append(InventoryEntry(item=previous))
        del self.inventory[position]

        logger.info(
            "Item equipped",
            player=self.name,
            item=item.name,
            slot=slot.value,
            replaced=previous.name if previous else None,
        )
        return item

    add_item = equip_item

    def use_item(self, ref: InventoryRef) -> Item:
        """Consume a potion from the inventory.

        Args:
            ref: Inventory position or entry handle.

        Returns:
            The consumed item.

        Raises:
            InvalidIndexError: If ref points at nothing.
            NotUsableError: If the item is not a consumable. The inventory
                is left unchanged.
        """
        position = self._resolve(ref)
        item = self.inventory[position].item
        if not item.is_usable:
            raise NotUsableError(f"{item.name} cannot be used", index=position)

        self.heal(item.value)
        del self.inventory[position]
        logger.info("Item used", player=self.name, item=item.name, health=self.health)
        return item

    def unequip(self, slot: EquipSlot) -> UUID | None:
        """Move the item in a slot back into the inventory.

        Returns:
            Handle of the returned item, or None if the slot was empty.
        """
        previous = self._swap_slot(slot, None)
        if previous is None:
            return None
        logger.info("Item unequipped", player=self.name, item=previous.name, slot=slot.value)
        return self.pick_up(previous)

    def equipped(self, slot: EquipSlot) -> Item | None:
        if slot is EquipSlot.WEAPON:
            return self.equipped_weapon
        return self.equipped_armor

    def _swap_slot(self, slot: EquipSlot, item: Item | None) -> Item | None:
        previous = self.equipped(slot)
        if slot is EquipSlot.WEAPON:
            self.equipped_weapon = item
        else:
            self.equipped_armor = item
        return previous


__all__ = ["Player", "InventoryEntry", "InventoryRef"]
