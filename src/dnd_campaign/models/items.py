"""Pydantic V2 schemas for items, weapons, equipment, and feats."""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field, model_validator

from dnd_campaign.models.common import (
    Entries,
    Owned,
    Record,
    Shareable,
    Sourced,
    Timestamped,
)
from dnd_campaign.models.enums import DamageType, ItemType, Rarity


class DiceRoll(Record):
    """A dice expression such as ``2d6+3``.

    Attributes:
        sides: Number of sides on each die.
        count: Number of dice rolled.
        modifier: Flat amount added to the total.

    Example:
        >>> DiceRoll(sides=6, count=2, modifier=3).notation
        '2d6+3'
    """

    model_config = ConfigDict(frozen=True)

    sides: Annotated[int, Field(ge=1, le=100, description="Sides per die")]
    count: Annotated[int, Field(ge=1, le=100, description="Number of dice")]
    modifier: int | None = Field(default=None, description="Flat modifier")

    @property
    def notation(self) -> str:
        """Render the roll in standard dice notation."""
        base = f"{self.count}d{self.sides}"
        if not self.modifier:
            return base
        return f"{base}{self.modifier:+d}"

    @property
    def minimum(self) -> int:
        return self.count + (self.modifier or 0)

    @property
    def maximum(self) -> int:
        return self.count * self.sides + (self.modifier or 0)

    @property
    def average(self) -> int:
        """Average result rounded down, as printed in stat blocks."""
        return (self.count * (self.sides + 1)) // 2 + (self.modifier or 0)

    def __str__(self) -> str:
        return self.notation


class Range(Record):
    """Normal and long range in feet."""

    model_config = ConfigDict(frozen=True)

    normal: Annotated[int, Field(ge=0, description="Normal range in feet")] = 0
    long: Annotated[int, Field(ge=0, description="Long range in feet")] = 0

    @model_validator(mode="after")
    def validate_long_range(self) -> "Range":
        """Long range can't be shorter than normal range."""
        if self.long and self.long < self.normal:
            msg = f"Long range ({self.long}) is shorter than normal range ({self.normal})"
            raise ValueError(msg)
        return self


class Item(Owned, Shareable, Timestamped, Sourced):
    """An item from the reference data or a homebrew item.

    Attributes:
        name: Item name.
        rarity: Item rarity.
        type: Primary item type code.
        type_alt: Secondary item type code.
        armor_class: AC granted when worn (armor and shields).
        ammunition: Whether the item uses ammunition.
        weight: Weight in pounds.
        value: Value in copper pieces.
        entries: Description paragraphs.
    """

    name: str = Field(min_length=1, max_length=200, description="Item name")
    rarity: Rarity = Field(default=Rarity.NONE, description="Item rarity")
    type: ItemType | None = Field(default=None, description="Item type code")
    type_alt: ItemType | None = Field(default=None, description="Secondary type code")
    armor_class: Annotated[int, Field(ge=0, le=30)] | None = Field(
        default=None,
        description="Armor class granted",
    )
    ammunition: bool | None = Field(default=None, description="Uses ammunition")
    weight: Annotated[float, Field(ge=0)] | None = Field(
        default=None,
        description="Weight in pounds",
    )
    value: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Value in copper pieces",
    )
    entries: Entries = Field(default_factory=list, description="Description")

    @property
    def is_magic(self) -> bool:
        """Whether the item has a magical rarity."""
        return self.rarity not in {Rarity.NONE, Rarity.UNKNOWN}

    @property
    def value_gp(self) -> float | None:
        """Value converted to gold pieces."""
        if self.value is None:
            return None
        return self.value / 100


class WeaponDamage(Record):
    """Damage dealt by a weapon hit."""

    model_config = ConfigDict(frozen=True)

    dice_roll: DiceRoll = Field(description="Damage dice")
    type: DamageType = Field(description="Damage type")


class Weapon(Item):
    """A weapon a character carries.

    Attributes:
        weapon_category: 'simple' or 'martial' (free text in reference data).
        damage: Damage dice and type.
        range: Range for ranged weapons.
        throw_range: Range when thrown.
        is_equipped: Whether the weapon is currently wielded.
    """

    weapon_category: str = Field(min_length=1, max_length=50, description="Weapon category")
    damage: WeaponDamage = Field(description="Damage on hit")
    range: Range = Field(default_factory=Range, description="Ranged attack range")
    throw_range: Range = Field(default_factory=Range, description="Thrown attack range")
    is_equipped: bool = Field(default=False, description="Currently wielded")


class Equipment(Item):
    """An item held in some quantity."""

    quantity: Annotated[int, Field(ge=0, description="Number carried")] = 1

    @property
    def total_weight(self) -> float:
        return (self.weight or 0) * self.quantity


class Feat(Sourced):
    """A feat a character has taken."""

    name: str = Field(min_length=1, max_length=100, description="Feat name")
    description: str = Field(default="", description="Feat rules text")


__all__ = [
    "DiceRoll",
    "Range",
    "Item",
    "WeaponDamage",
    "Weapon",
    "Equipment",
    "Feat",
]
