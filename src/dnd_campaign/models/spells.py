"""Pydantic V2 schemas for spells."""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field, model_validator

from dnd_campaign.models.common import Entries, Record, Sourced
from dnd_campaign.models.enums import (
    Ability,
    CastingTimeUnit,
    Condition,
    DamageType,
    DurationUnit,
    SpellAreaType,
    SpellComponent,
    SpellDistanceType,
    SpellDurationType,
    SpellSchool,
)


class TimedDuration(Record):
    """An amount of rounds, minutes, hours, or days."""

    model_config = ConfigDict(frozen=True)

    type: DurationUnit = Field(description="Duration unit")
    amount: Annotated[int, Field(ge=1, description="Number of units")]


class SpellDuration(Record):
    """How long a spell's effect lasts.

    Attributes:
        type: Timed or instantaneous.
        duration: Length of a timed effect.
        ends: Triggers that end the spell early (e.g., 'dispel').
        concentration: Whether the caster must concentrate.
    """

    type: SpellDurationType = Field(description="Timed or instantaneous")
    duration: TimedDuration | None = Field(default=None, description="Timed length")
    ends: list[str] | None = Field(default=None, description="Ending triggers")
    concentration: bool | None = Field(default=None, description="Requires concentration")

    @model_validator(mode="after")
    def validate_instant_has_no_length(self) -> "SpellDuration":
        """Instantaneous spells have no length."""
        if self.type == SpellDurationType.INSTANT and self.duration is not None:
            msg = "Instantaneous spell durations can't carry a timed length"
            raise ValueError(msg)
        return self


class SpellDistance(Record):
    """Distance component of a spell's range."""

    model_config = ConfigDict(frozen=True)

    type: SpellDistanceType = Field(description="Self, touch, or feet")
    amount: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Distance in feet",
    )

    @model_validator(mode="after")
    def validate_feet_amount(self) -> "SpellDistance":
        """A distance in feet needs an amount."""
        if self.type == SpellDistanceType.FEET and self.amount is None:
            msg = "A distance measured in feet needs an amount"
            raise ValueError(msg)
        return self


class SpellRange(Record):
    """Area shape and distance of a spell."""

    type: SpellAreaType = Field(default=SpellAreaType.POINT, description="Area shape")
    distance: SpellDistance = Field(description="Distance")


class CastingTime(Record):
    """One way to cast the spell (e.g., 1 action or 10 minutes)."""

    model_config = ConfigDict(frozen=True)

    number: Annotated[int, Field(ge=1, description="Number of units")] = 1
    unit: CastingTimeUnit = Field(description="Casting time unit")


class MaterialComponent(Record):
    """A material component description with its gold cost."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1, description="Component description")
    cost: Annotated[int, Field(ge=0, description="Cost in copper pieces")] = 0


class SpellMeta(Record):
    ritual: bool | None = Field(default=None, description="Can be cast as a ritual")


class Spell(Sourced):
    """A spell from the reference data.

    Attributes:
        name: Spell name.
        entries: Description of the spell and its effects.
        level: Spell level, 0 for cantrips.
        time: Ways to cast the spell.
        range: Area and distance.
        components: Component flags; material components may carry a description.
        duration: Possible durations.
        meta: Ritual tag.
        school: School of magic.
        damage_inflict: Damage types the spell can inflict.
        condition_inflict: Conditions the spell can inflict.
        saving_throw: Saving throws the target may have to make.
        spell_attack: Spell attack kinds ('M' melee, 'R' ranged).
        tags: Free-form search tags.
    """

    name: str = Field(min_length=1, max_length=100, description="Spell name")
    entries: Entries = Field(default_factory=list, description="Description")
    level: Annotated[int, Field(ge=0, le=9, description="Spell level (0 = cantrip)")]
    time: list[CastingTime] = Field(default_factory=list, description="Casting times")
    range: SpellRange = Field(description="Range")
    components: dict[SpellComponent, bool | MaterialComponent] = Field(
        default_factory=dict,
        description="Required components",
    )
    duration: list[SpellDuration] = Field(default_factory=list, description="Durations")
    meta: SpellMeta | None = Field(default=None, description="Spell metadata")
    school: SpellSchool = Field(description="School of magic")
    damage_inflict: list[DamageType] = Field(default_factory=list)
    condition_inflict: list[Condition] = Field(default_factory=list)
    saving_throw: list[Ability] = Field(default_factory=list)
    spell_attack: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0

    @property
    def is_ritual(self) -> bool:
        return bool(self.meta and self.meta.ritual)

    @property
    def requires_concentration(self) -> bool:
        """Whether any of the spell's durations needs concentration."""
        return any(d.concentration for d in self.duration)

    @property
    def material_component(self) -> MaterialComponent | None:
        """The material component description, if one is given."""
        material = self.components.get(SpellComponent.MATERIAL)
        if isinstance(material, MaterialComponent):
            return material
        return None

    def requires_component(self, component: SpellComponent) -> bool:
        """Check whether casting needs ``component``."""
        return bool(self.components.get(component, False))


__all__ = [
    "TimedDuration",
    "SpellDuration",
    "SpellDistance",
    "SpellRange",
    "CastingTime",
    "MaterialComponent",
    "SpellMeta",
    "Spell",
]
