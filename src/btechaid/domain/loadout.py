"""Loadout validation against a chassis definition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .enums import MechLocation
from .equipment import Equipment, Loadout, total_weight

if TYPE_CHECKING:
    from .models import Mech

_MECH_LOCATIONS = frozenset(location.value for location in MechLocation)


class LoadoutError(ValueError):
    """Raised when a loadout cannot be fitted to a chassis."""


def validate_loadout(mech: Mech, loadout: Loadout) -> None:
    """Reject loadouts that do not fit ``mech``.

    Every location must be a mech location, every item must be equipment, and the
    total weight may not exceed the chassis tonnage.

    Raises:
        LoadoutError: The loadout is malformed for this chassis.
    """

    for location, items in loadout.items():
        if location not in _MECH_LOCATIONS:
            raise LoadoutError(f"Unknown location {location!r} for {mech.model}")
        for item in items:
            if not isinstance(item, Equipment):
                raise LoadoutError(f"Location {location} holds non-equipment {item!r}")

    weight = total_weight(loadout)
    if weight > mech.tonnage:
        raise LoadoutError(
            f"Loadout weighs {weight} tons, exceeding {mech.model} tonnage {mech.tonnage}"
        )
