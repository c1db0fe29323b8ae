"""Mech storage: spare-part and stored-chassis ledgers plus mech bays.

A storage keeps two independent ledgers keyed by model name.  Each entry is a
non-negative :class:`~btechaid.domain.count.IntCount` whose value is the model's
identity, either :class:`~btechaid.domain.ledger.Unresolved` (only the name is
known) or :class:`~btechaid.domain.ledger.Resolved` (a full mech definition).

Every mutation validates before touching state, commits, and only then
notifies subscribed listeners.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .bay import MechBay
from .count import (
    Count,
    CountRangeError,
    IntCountOptions,
    create_count,
    create_int_count,
    is_safe_integer,
)
from .equipment import Loadout
from .events import MechBayChanged, PartsChanged, StorageEvent, StorageListener, StoredChanged
from .ledger import (
    LedgerEntry,
    LedgerView,
    ModelIdentity,
    Resolved,
    Unresolved,
    as_identity,
    is_resolved,
)
from .models import AssembledMech, StoredMech
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)

_ENTRY_OPTIONS: IntCountOptions[ModelIdentity] = IntCountOptions(min=0)


class UnresolvedModelError(LookupError):
    """Raised when an operation needs a resolved chassis that storage does not have."""


class BayFullError(RuntimeError):
    """Raised when assembling into a bay without a free slot."""


def _quantity_of(count: int | Count[object]) -> float:
    return count.count if isinstance(count, Count) else count


def _identity_for(
    model: str,
    current: LedgerEntry | None,
    incoming: int | Count[object],
) -> ModelIdentity:
    """Pick the identity a ledger entry keeps after a set.

    An incoming resolved mech of the same model wins; otherwise the current
    identity stays, or a new entry starts unresolved.
    """

    fallback: ModelIdentity = current.value if current is not None else Unresolved(model)
    if not isinstance(incoming, Count):
        return fallback
    match as_identity(incoming.value):
        case Resolved(mech=mech) if mech.model == model:
            return Resolved(mech)
        case Resolved() | Unresolved():
            return fallback


class SimpleStorage:
    """In-memory mech storage.

    Args:
        name: Storage name.
        parts: Initial part counts; each count is keyed by its value's model.
        stored: Initial stored-chassis counts, keyed the same way.
        rules: Rule configuration supplying bay defaults.
    """

    def __init__(
        self,
        name: str,
        *,
        parts: Iterable[Count[object]] = (),
        stored: Iterable[Count[object]] = (),
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self.name = name
        self._rules = rules
        self._parts: dict[str, LedgerEntry] = {}
        self._stored: dict[str, LedgerEntry] = {}
        self._bays: list[MechBay] = []
        self._listeners: list[StorageListener] = []

        for count in parts:
            self._add_initial(self._parts, count)
        for count in stored:
            self._add_initial(self._stored, count)

    def _add_initial(self, ledger: dict[str, LedgerEntry], count: Count[object]) -> None:
        model = as_identity(count.value).model
        current = ledger.get(model)
        total = count.count if current is None else current.count + count.count
        self._set_entry(ledger, model, create_count(count.value, total))

    # --- Notification -------------------------------------------------------------

    def subscribe(self, listener: StorageListener) -> Callable[[], None]:
        """Register ``listener`` for change events. Returns an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StorageEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # --- Ledger core --------------------------------------------------------------

    def _set_entry(
        self,
        ledger: dict[str, LedgerEntry],
        model: str,
        count: int | Count[object],
    ) -> tuple[LedgerEntry | None, LedgerEntry]:
        quantity = _quantity_of(count)
        if not is_safe_integer(quantity) or quantity < 0:
            raise CountRangeError(f"Invalid count {quantity!r} for {model}")
        current = ledger.get(model)
        identity = _identity_for(model, current, count)
        if current is not None and identity == current.value:
            new_entry = current.set(quantity)
        else:
            new_entry = create_int_count(identity, quantity, _ENTRY_OPTIONS)
        ledger[model] = new_entry
        return current, new_entry

    # --- Parts --------------------------------------------------------------------

    def get_parts(self, model: str) -> LedgerEntry | None:
        """Current part count of ``model``, or None if storage has no entry."""
        return self._parts.get(model)

    def set_parts(self, model: str, count: int | Count[object]) -> LedgerEntry | None:
        """Replace the part count of ``model``.

        ``count`` is a quantity or a count whose value may resolve the model.

        Returns:
            The replaced entry, or None for a new model.

        Raises:
            CountRangeError: The quantity is not a non-negative safe integer.
        """

        previous, new_entry = self._set_entry(self._parts, model, count)
        logger.debug("%s: parts of %s set to %s", self.name, model, new_entry.count)
        self._notify(PartsChanged(model, new_entry))
        return previous

    def add_parts(self, model: str, delta: int) -> LedgerEntry | None:
        """Add ``delta`` parts; an absent model starts at ``delta``."""

        current = self._parts.get(model)
        if current is None:
            return self.set_parts(model, delta)
        return self.set_parts(model, current.add(delta).count)

    def remove_parts(self, model: str, count: int) -> LedgerEntry | None:
        """Remove ``count`` parts.

        Raises:
            CountRangeError: ``count`` is negative or exceeds the parts held.
        """

        return self._remove(self._parts, model, count, self.set_parts, "parts")

    def delete_parts(self, model: str) -> int | None:
        """Remove the parts entry of ``model``; returns the quantity removed."""

        removed = self._parts.pop(model, None)
        if removed is None:
            return None
        logger.debug("%s: parts of %s deleted", self.name, model)
        self._notify(PartsChanged(model, None))
        return int(removed.count)

    # --- Stored chassis -----------------------------------------------------------

    def get_stored(self, model: str) -> LedgerEntry | None:
        """Current stored-chassis count of ``model``, or None if storage has no entry."""
        return self._stored.get(model)

    def set_stored(self, model: str, count: int | Count[object]) -> LedgerEntry | None:
        """Replace the stored-chassis count of ``model``.

        Returns:
            The replaced entry, or None for a new model.

        Raises:
            CountRangeError: The quantity is not a non-negative safe integer.
        """

        previous, new_entry = self._set_entry(self._stored, model, count)
        logger.debug("%s: stored %s set to %s", self.name, model, new_entry.count)
        self._notify(StoredChanged(model, new_entry))
        return previous

    def add_stored(self, model: str, delta: int) -> LedgerEntry | None:
        """Add ``delta`` stored chassis; an absent model starts at ``delta``.

        Raises:
            CountRangeError: ``delta`` is negative.
        """

        if delta < 0:
            raise CountRangeError("Cannot add a negative number of stored chassis")
        current = self._stored.get(model)
        if current is None:
            return self.set_stored(model, delta)
        return self.set_stored(model, current.add(delta).count)

    def remove_stored(self, model: str, delta: int) -> LedgerEntry | None:
        """Remove ``delta`` stored chassis.

        Raises:
            CountRangeError: ``delta`` is negative or exceeds the chassis stored.
        """

        return self._remove(self._stored, model, delta, self.set_stored, "stored chassis")

    def delete_stored(self, model: str) -> int | None:
        """Remove the stored entry of ``model``; returns the quantity removed."""

        removed = self._stored.pop(model, None)
        if removed is None:
            return None
        logger.debug("%s: stored %s deleted", self.name, model)
        self._notify(StoredChanged(model, None))
        return int(removed.count)

    def _remove(
        self,
        ledger: dict[str, LedgerEntry],
        model: str,
        amount: int,
        setter: Callable[[str, int | Count[object]], LedgerEntry | None],
        label: str,
    ) -> LedgerEntry | None:
        if amount < 0:
            raise CountRangeError(f"Cannot remove a negative number of {label}")
        current = ledger.get(model)
        held = current.count if current is not None else 0
        if amount > held:
            raise CountRangeError(f"Cannot reduce {label} of {model} below zero ({held} held)")
        if current is None:
            return None
        return setter(model, current.add(-amount).count)

    # --- Views --------------------------------------------------------------------

    @property
    def parts(self) -> LedgerView:
        """Live view of the parts ledger."""
        return LedgerView(self.get_parts, self.set_parts, self.delete_parts, lambda: list(self._parts))

    @property
    def stored(self) -> LedgerView:
        """Live view of the stored-chassis ledger."""
        return LedgerView(
            self.get_stored, self.set_stored, self.delete_stored, lambda: list(self._stored)
        )

    @property
    def is_complete(self) -> bool:
        """True when every parts and stored entry is backed by a resolved mech."""
        return all(is_resolved(entry) for entry in self._parts.values()) and all(
            is_resolved(entry) for entry in self._stored.values()
        )

    def unresolved_models(self) -> list[str]:
        """Models with an unresolved entry in either ledger, without duplicates."""

        models = [model for model, entry in self._parts.items() if not is_resolved(entry)]
        models += [
            model
            for model, entry in self._stored.items()
            if not is_resolved(entry) and model not in models
        ]
        return models

    # --- Mech bays ----------------------------------------------------------------

    @property
    def bays(self) -> tuple[MechBay, ...]:
        return tuple(self._bays)

    def add_bay(self, name: str, capacity: int | None = None) -> MechBay:
        """Create a bay; capacity defaults to the configured bay capacity."""

        bay = MechBay(name, self._rules.storage.default_bay_capacity if capacity is None else capacity)
        self._bays.append(bay)
        return bay

    def _bay(self, bay: MechBay | int) -> MechBay:
        if isinstance(bay, MechBay):
            if bay not in self._bays:
                raise ValueError(f"Bay {bay.name!r} does not belong to {self.name}")
            return bay
        if not 0 <= bay < len(self._bays):
            raise ValueError(f"{self.name} has no bay at index {bay}")
        return self._bays[bay]

    def assemble_mech(
        self,
        bay: MechBay | int,
        model: str,
        loadout: Loadout | None = None,
    ) -> AssembledMech:
        """Take one stored chassis of ``model``, assemble it, and place it in ``bay``.

        Nothing changes unless the chassis, the loadout, and the bay all check out.
        Listeners hear about the ledger and the bay once both are updated.

        Raises:
            UnresolvedModelError: No stored chassis, or only an unresolved one.
            LoadoutError: The loadout does not fit the chassis.
            BayFullError: The bay has no free slot.
        """

        target = self._bay(bay)
        entry = self._stored.get(model)
        if entry is None or entry.count < 1:
            raise UnresolvedModelError(f"No stored chassis of {model} in {self.name}")
        match entry.value:
            case Resolved(mech=mech):
                chassis = mech if isinstance(mech, StoredMech) else StoredMech.from_mech(mech)
            case Unresolved():
                raise UnresolvedModelError(f"Stored chassis {model} is not resolved")
        slot = target.first_free_slot()
        if slot is None:
            raise BayFullError(f"Bay {target.name!r} is full")
        assembled = chassis.assemble(loadout)

        _, new_entry = self._set_entry(self._stored, model, entry.count - 1)
        target.slots[slot] = assembled
        logger.debug("%s: assembled %s into %s[%d]", self.name, model, target.name, slot)
        self._notify(StoredChanged(model, new_entry))
        self._notify(MechBayChanged(target, slot, assembled, assembled.loadout))
        return assembled

    def store_mech(
        self,
        bay: MechBay | int,
        mech: AssembledMech | int,
    ) -> tuple[StoredMech, Loadout] | None:
        """Disassemble a bay slot and return its chassis to the stored ledger.

        A chassis returning to an unresolved or missing entry resolves it, keeping
        the chassis' default configuration.

        Returns:
            The stored chassis and the removed loadout, or None when the slot is empty.

        Raises:
            CountRangeError: The stored count cannot grow by one.
        """

        target = self._bay(bay)
        slot = mech if isinstance(mech, int) else target.slot_of(mech)
        if slot is None or not 0 <= slot < target.capacity:
            return None
        occupant = target.slots[slot]
        if occupant is None:
            return None
        current = self._stored.get(occupant.model)
        quantity = 1 if current is None else current.add(1).count

        chassis, loadout = target.store_mech(slot)
        if current is not None and is_resolved(current):
            _, new_entry = self._set_entry(self._stored, chassis.model, quantity)
        else:
            design = chassis if chassis.default_config is not None else chassis.chassis()
            _, new_entry = self._set_entry(
                self._stored, chassis.model, create_count(Resolved(design), quantity)
            )
        logger.debug("%s: stored %s from %s[%d]", self.name, chassis.model, target.name, slot)
        self._notify(StoredChanged(chassis.model, new_entry))
        self._notify(MechBayChanged(target, slot, None, loadout))
        return chassis, loadout
