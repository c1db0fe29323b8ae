"""Authoritative mech catalog and ledger resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import TypeAdapter

from btechaid.schemas import MechRecord

from .count import create_count
from .ledger import Resolved, is_resolved
from .models import Mech
from .rules_config import DEFAULT_RULES, RulesConfig
from .storage import SimpleStorage

logger = logging.getLogger(__name__)

_RECORDS: TypeAdapter[list[MechRecord]] = TypeAdapter(list[MechRecord])


class MechCatalog:
    """Stores mech definitions by model name."""

    def __init__(self, mechs: Iterable[Mech] = (), *, rules: RulesConfig = DEFAULT_RULES) -> None:
        self._rules = rules
        self._mechs: dict[str, Mech] = {}
        for mech in mechs:
            self.define(mech)

    def define(self, mech: Mech) -> None:
        """Register a mech. Overwrites if the model exists."""
        self._mechs[mech.model] = mech

    def get(self, model: str) -> Mech:
        """Look up a definition. Raises KeyError if not defined."""
        if model not in self._mechs:
            raise KeyError(model)
        return self._mechs[model]

    def has(self, model: str) -> bool:
        return model in self._mechs

    def models(self) -> list[str]:
        return list(self._mechs.keys())

    def remove(self, model: str) -> None:
        """Remove a definition. Raises KeyError if not defined."""
        if model not in self._mechs:
            raise KeyError(model)
        del self._mechs[model]

    def load_records(self, records: Iterable[Mapping[str, Any]]) -> list[Mech]:
        """Validate raw mech records and define them.

        Raises:
            pydantic.ValidationError: A record is malformed; nothing is defined.
        """

        mechs = [record.to_domain(self._rules) for record in _RECORDS.validate_python(list(records))]
        for mech in mechs:
            self.define(mech)
        return mechs

    def __len__(self) -> int:
        return len(self._mechs)

    def __contains__(self, model: object) -> bool:
        return model in self._mechs


def resolve_storage(storage: SimpleStorage, catalog: MechCatalog) -> list[str]:
    """Resolve every unresolved ledger entry whose model the catalog defines.

    Quantities are untouched.  Returns the models that were resolved.
    """

    resolved: list[str] = []
    for model in storage.unresolved_models():
        if not catalog.has(model):
            continue
        mech = catalog.get(model)
        parts = storage.get_parts(model)
        if parts is not None and not is_resolved(parts):
            storage.set_parts(model, create_count(Resolved(mech), parts.count))
        stored = storage.get_stored(model)
        if stored is not None and not is_resolved(stored):
            storage.set_stored(model, create_count(Resolved(mech), stored.count))
        resolved.append(model)

    missing = storage.unresolved_models()
    logger.info(
        "%s: resolved %d model(s) from catalog, %d still unresolved",
        storage.name,
        len(resolved),
        len(missing),
    )
    return resolved
