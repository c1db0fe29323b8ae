"""In-memory domain model for a BattleTech roster aid."""

from btechaid.domain.bay import MechBay
from btechaid.domain.catalog import MechCatalog, resolve_storage
from btechaid.domain.count import (
    Count,
    CountRangeError,
    IntCount,
    IntCountOptions,
    create_count,
    create_int_count,
)
from btechaid.domain.ledger import LedgerView, Resolved, Unresolved
from btechaid.domain.loadout import LoadoutError
from btechaid.domain.models import AssembledMech, Mech, StoredMech
from btechaid.domain.storage import BayFullError, SimpleStorage, UnresolvedModelError
from btechaid.logger import LoggingLogger
from btechaid.main import load_model

__all__ = [
    "AssembledMech",
    "BayFullError",
    "Count",
    "CountRangeError",
    "IntCount",
    "IntCountOptions",
    "LedgerView",
    "LoadoutError",
    "LoggingLogger",
    "Mech",
    "MechBay",
    "MechCatalog",
    "Resolved",
    "SimpleStorage",
    "StoredMech",
    "Unresolved",
    "UnresolvedModelError",
    "create_count",
    "create_int_count",
    "load_model",
    "resolve_storage",
]
