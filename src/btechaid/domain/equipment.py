"""Equipment, weapons, and loadouts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .enums import WeaponType


@dataclass(frozen=True, slots=True)
class Modifier:
    """A named modifier applied to a target statistic."""

    name: str
    target: str
    modifier: float


@dataclass(frozen=True, slots=True)
class Equipment:
    """An item mounted into a unit location.

    Attributes:
        name: Equipment name.
        weight: Weight in tons.
        size: Size in critical slots.
        modifiers: Modifiers the item grants.
        heat: Heat produced when the item is used.
    """

    name: str
    weight: float
    size: int = 1
    modifiers: tuple[Modifier, ...] = ()
    heat: int = 0


@dataclass(frozen=True, slots=True)
class Weapon(Equipment):
    """Equipment that causes damage."""

    weapon_type: WeaponType = WeaponType.ENERGY
    damage: int = 0
    damage_mods: tuple[Modifier, ...] = field(default=())


# Location code -> equipment mounted there.
Loadout = dict[str, list[Equipment]]


def total_weight(source: Mapping[str, Iterable[Equipment] | Equipment] | Iterable[Equipment] | Equipment) -> float:
    """Total weight of a loadout, an equipment list, or a single item."""

    if isinstance(source, Equipment):
        return source.weight
    if isinstance(source, Mapping):
        return sum(total_weight(items) for items in source.values())
    return sum(item.weight for item in source)
