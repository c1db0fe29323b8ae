"""Domain model for the BattleTech roster aid.

This package holds everything the roster needs in memory:

* Value objects for counted quantities (see :mod:`count`).
* Dataclasses for mechs, equipment and loadouts (see :mod:`models` and
  :mod:`equipment`).
* The mech storage ledger with its bays and change events (see :mod:`storage`).
* The authoritative mech catalog used to resolve ledger entries (see
  :mod:`catalog`).
"""

from . import (
    bay,
    catalog,
    count,
    enums,
    equipment,
    events,
    ledger,
    loadout,
    models,
    rules_config,
    storage,
)

__all__ = [
    "bay",
    "catalog",
    "count",
    "enums",
    "equipment",
    "events",
    "ledger",
    "loadout",
    "models",
    "rules_config",
    "storage",
]
