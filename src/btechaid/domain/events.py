"""Change events emitted by a storage after each committed mutation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .equipment import Loadout
from .ledger import LedgerEntry
from .models import AssembledMech

if TYPE_CHECKING:
    from .bay import MechBay


@dataclass(frozen=True, slots=True)
class PartsChanged:
    """Parts of ``model`` changed; ``count`` is None when the entry was removed."""

    model: str
    count: LedgerEntry | None


@dataclass(frozen=True, slots=True)
class StoredChanged:
    """Stored chassis of ``model`` changed; ``count`` is None when the entry was removed."""

    model: str
    count: LedgerEntry | None


@dataclass(frozen=True, slots=True)
class MechBayChanged:
    """A bay slot changed.

    ``mech`` is the new occupant, or None when the slot was emptied.  ``loadout``
    is the equipment assembled onto the mech, or the equipment returned to the
    stores when the slot was emptied.
    """

    bay: MechBay
    slot: int
    mech: AssembledMech | None
    loadout: Loadout | None

    @property
    def assembled(self) -> bool:
        return self.mech is not None


StorageEvent = PartsChanged | StoredChanged | MechBayChanged

StorageListener = Callable[[StorageEvent], None]
