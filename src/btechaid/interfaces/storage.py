"""Mech Storage Protocol Interface.

This module defines the protocol (interface) for mech storages: two ledgers of
counted models plus the mech bays holding assembled units.
"""

from typing import Protocol

from btechaid.domain.bay import MechBay
from btechaid.domain.count import Count
from btechaid.domain.ledger import LedgerEntry, LedgerView


class IMechStorage(Protocol):
    """Protocol defining the interface of a mech storage.

    Missing models are reported as None by the getters; it is a normal state,
    not an error.
    """

    name: str

    @property
    def parts(self) -> LedgerView:
        """Live view of the partial mech salvage, keyed by model."""
        ...

    @property
    def stored(self) -> LedgerView:
        """Live view of the stored chassis, keyed by model."""
        ...

    @property
    def bays(self) -> tuple[MechBay, ...]:
        """The mech bays of the storage."""
        ...

    @property
    def is_complete(self) -> bool:
        """True when every parts and stored entry is backed by a resolved mech."""
        ...

    def get_parts(self, model: str) -> LedgerEntry | None: ...

    def set_parts(self, model: str, count: int | Count[object]) -> LedgerEntry | None: ...

    def add_parts(self, model: str, delta: int) -> LedgerEntry | None: ...

    def remove_parts(self, model: str, count: int) -> LedgerEntry | None: ...

    def delete_parts(self, model: str) -> int | None: ...

    def get_stored(self, model: str) -> LedgerEntry | None: ...

    def set_stored(self, model: str, count: int | Count[object]) -> LedgerEntry | None: ...

    def add_stored(self, model: str, delta: int) -> LedgerEntry | None: ...

    def remove_stored(self, model: str, delta: int) -> LedgerEntry | None: ...

    def delete_stored(self, model: str) -> int | None: ...
