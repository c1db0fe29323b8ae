"""Ledger identities and the live map-like view over a storage ledger."""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableMapping
from dataclasses import dataclass

from .count import Count, IntCount
from .models import Mech


@dataclass(frozen=True, slots=True)
class Unresolved:
    """A model known only by name, pending lookup in a catalog."""

    model: str

    def __str__(self) -> str:
        return self.model


@dataclass(frozen=True, slots=True)
class Resolved:
    """A model backed by a full mech definition."""

    mech: Mech

    @property
    def model(self) -> str:
        return self.mech.model

    def __str__(self) -> str:
        return self.mech.model


ModelIdentity = Unresolved | Resolved

LedgerEntry = IntCount[ModelIdentity]


def as_identity(value: object) -> ModelIdentity:
    """Coerce a model name, a mech, or an identity into a ledger identity."""

    match value:
        case Unresolved() | Resolved():
            return value
        case Mech():
            return Resolved(value)
        case str():
            return Unresolved(value)
        case _:
            raise TypeError(f"Cannot use {value!r} as a model identity")


def is_resolved(entry: Count[ModelIdentity]) -> bool:
    match entry.value:
        case Resolved():
            return True
        case Unresolved():
            return False


class LedgerView(MutableMapping[str, LedgerEntry]):
    """Live view over one ledger of a storage.

    Reads, writes and deletes are routed to the owning storage's accessors, so
    the view always reflects current state and every mutation goes through the
    same validation and notification path.
    """

    def __init__(
        self,
        getter: Callable[[str], LedgerEntry | None],
        setter: Callable[[str, int | Count[object]], LedgerEntry | None],
        deleter: Callable[[str], int | None],
        keys: Callable[[], list[str]],
    ) -> None:
        self._getter = getter
        self._setter = setter
        self._deleter = deleter
        self._keys = keys

    def get(self, key: str, default: LedgerEntry | None = None) -> LedgerEntry | None:  # type: ignore[override]
        entry = self._getter(key)
        return default if entry is None else entry

    def set(self, key: str, value: int | Count[object]) -> LedgerEntry | None:
        """Replace the entry for ``key``; returns the previous entry."""
        return self._setter(key, value)

    def delete(self, key: str) -> int | None:
        """Remove the entry for ``key``; returns the removed quantity."""
        return self._deleter(key)

    def keys(self) -> list[str]:  # type: ignore[override]
        return self._keys()

    def __getitem__(self, key: str) -> LedgerEntry:
        entry = self._getter(key)
        if entry is None:
            raise KeyError(key)
        return entry

    def __setitem__(self, key: str, value: int | Count[object]) -> None:  # type: ignore[override]
        self._setter(key, value)

    def __delitem__(self, key: str) -> None:
        if self._deleter(key) is None:
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._getter(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys())

    def __len__(self) -> int:
        return len(self._keys())

    def __repr__(self) -> str:
        entries = ", ".join(f"{key}: {int(self[key])}" for key in self._keys())
        return f"LedgerView({{{entries}}})"
