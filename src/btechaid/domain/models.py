"""Dataclasses describing units held by the roster.

Mechs come in three shapes: the plain :class:`Mech` catalog entry, the
:class:`StoredMech` chassis kept in storage with an optional default
configuration, and the :class:`AssembledMech` that carries a concrete loadout
and occupies a mech bay slot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .enums import MechType, WeightClass
from .equipment import Loadout, total_weight
from .loadout import validate_loadout
from .rules_config import DEFAULT_RULES, WeightClassRules


class Unit(Protocol):
    """Any unit tracked by the roster."""

    model: str
    name: str
    tonnage: int
    weight_class: WeightClass


def weight_class_for(tonnage: float, rules: WeightClassRules = DEFAULT_RULES.weight_classes) -> WeightClass:
    """Classify a tonnage."""

    if tonnage <= rules.light_max:
        return WeightClass.LIGHT
    if tonnage <= rules.medium_max:
        return WeightClass.MEDIUM
    if tonnage <= rules.heavy_max:
        return WeightClass.HEAVY
    if tonnage <= rules.assault_max:
        return WeightClass.ASSAULT
    return WeightClass.SUPER_HEAVY


@dataclass(slots=True)
class Mech:
    """A mech design. ``name`` defaults to the model name."""

    model: str
    name: str | None = None
    mech_type: MechType = MechType.HUMANOID
    tonnage: int = DEFAULT_RULES.units.default_mech_tonnage
    weight_class: WeightClass = field(init=False)

    def __post_init__(self) -> None:
        if not self.model:
            raise ValueError("Mech model must be non-empty")
        if self.tonnage <= 0:
            raise ValueError(f"tonnage must be > 0, got {self.tonnage}")
        if self.name is None:
            self.name = self.model
        self.weight_class = weight_class_for(self.tonnage)

    def chassis(self) -> Mech:
        """Return the bare design shared by every shape of this mech."""
        return Mech(self.model, self.name, self.mech_type, self.tonnage)


@dataclass(slots=True)
class StoredMech(Mech):
    """A complete but unassembled chassis kept in storage."""

    default_config: Loadout | None = None

    @classmethod
    def from_mech(cls, mech: Mech, default_config: Loadout | None = None) -> StoredMech:
        return cls(mech.model, mech.name, mech.mech_type, mech.tonnage, default_config)

    def assemble(self, loadout: Loadout | None = None) -> AssembledMech:
        """Assemble the chassis with ``loadout`` or, failing that, the default configuration.

        Raises:
            LoadoutError: The loadout does not fit the chassis.
        """

        chosen = loadout if loadout is not None else self.default_config
        chosen = {location: list(items) for location, items in (chosen or {}).items()}
        validate_loadout(self, chosen)
        return AssembledMech.from_mech(self, chosen, self.default_config)


@dataclass(slots=True)
class AssembledMech(Mech):
    """A mech assembled with a loadout, ready to occupy a bay slot."""

    loadout: Loadout = field(default_factory=dict)
    default_config: Loadout | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_mech(
        cls,
        mech: Mech,
        loadout: Loadout | None = None,
        default_config: Loadout | None = None,
    ) -> AssembledMech:
        return cls(mech.model, mech.name, mech.mech_type, mech.tonnage, loadout or {}, default_config)

    def available_tonnage(self) -> float:
        """Tonnage left after the mounted equipment."""
        return self.tonnage - total_weight(self.loadout)
