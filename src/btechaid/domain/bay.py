"""Mech bays holding assembled units."""

from __future__ import annotations

from dataclasses import dataclass, field

from .equipment import Loadout
from .models import AssembledMech, StoredMech


@dataclass(slots=True, eq=False)
class MechBay:
    """A bay with a fixed number of slots, each holding at most one assembled mech."""

    name: str
    capacity: int
    slots: list[AssembledMech | None] = field(init=False)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        self.slots = [None] * self.capacity

    @property
    def contents(self) -> list[AssembledMech]:
        """Occupying mechs in slot order."""
        return [mech for mech in self.slots if mech is not None]

    @property
    def free_slots(self) -> int:
        return self.slots.count(None)

    @property
    def is_full(self) -> bool:
        return self.free_slots == 0

    def first_free_slot(self) -> int | None:
        for index, occupant in enumerate(self.slots):
            if occupant is None:
                return index
        return None

    def slot_of(self, mech: AssembledMech) -> int | None:
        """Slot index holding this exact mech instance."""
        for index, occupant in enumerate(self.slots):
            if occupant is mech:
                return index
        return None

    def add_mech(self, mech: AssembledMech) -> bool:
        """Place ``mech`` in the first free slot. Returns False if the bay is full."""

        slot = self.first_free_slot()
        if slot is None:
            return False
        self.slots[slot] = mech
        return True

    def store_mech(self, mech: AssembledMech | int) -> tuple[StoredMech, Loadout] | None:
        """Empty the slot holding ``mech`` (or slot index ``mech``).

        Returns the chassis and the removed loadout, or None when there is
        no such mech in the bay.
        """

        slot = self._resolve_slot(mech)
        if slot is None:
            return None
        occupant = self.slots[slot]
        if occupant is None:
            return None
        self.slots[slot] = None
        return StoredMech.from_mech(occupant, occupant.default_config), occupant.loadout

    def _resolve_slot(self, mech: AssembledMech | int) -> int | None:
        if isinstance(mech, int):
            return mech if 0 <= mech < self.capacity else None
        return self.slot_of(mech)
