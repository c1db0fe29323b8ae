"""Unit tests for the mech catalog and ledger resolution."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from btechaid.domain.catalog import MechCatalog, resolve_storage
from btechaid.domain.enums import MechType, WeightClass
from btechaid.domain.equipment import Weapon
from btechaid.domain.ledger import Resolved, Unresolved
from btechaid.domain.models import Mech, StoredMech
from btechaid.domain.rules_config import RulesConfig, UnitRules
from btechaid.domain.storage import SimpleStorage

ATLAS = Mech("Atlas", tonnage=100)
LOCUST = Mech("Locust", tonnage=20)


class TestMechCatalog:
    def test_define_and_get(self):
        catalog = MechCatalog([ATLAS])

        assert catalog.get("Atlas") is ATLAS
        assert catalog.has("Atlas")
        assert "Atlas" in catalog
        assert len(catalog) == 1
        assert catalog.models() == ["Atlas"]

    def test_get_missing_raises(self):
        with pytest.raises(KeyError):
            MechCatalog().get("Atlas")

    def test_define_overwrites(self):
        catalog = MechCatalog([ATLAS])
        replacement = Mech("Atlas", "Atlas II", tonnage=100)

        catalog.define(replacement)

        assert catalog.get("Atlas") is replacement

    def test_remove(self):
        catalog = MechCatalog([ATLAS])

        catalog.remove("Atlas")

        assert not catalog.has("Atlas")
        with pytest.raises(KeyError):
            catalog.remove("Atlas")

    def test_load_records(self):
        catalog = MechCatalog()

        mechs = catalog.load_records(
            [
                {"model": "AS7-D", "name": "Atlas", "tonnage": 100},
                {"model": "GOL-1H", "mech_type": "Quad", "tonnage": 100},
            ]
        )

        assert [mech.model for mech in mechs] == ["AS7-D", "GOL-1H"]
        assert catalog.get("AS7-D").weight_class is WeightClass.ASSAULT
        assert catalog.get("GOL-1H").mech_type is MechType.QUAD

    def test_load_records_with_default_config(self):
        catalog = MechCatalog()

        catalog.load_records(
            [
                {
                    "model": "HBK-4G",
                    "tonnage": 50,
                    "default_config": {
                        "RT": [
                            {
                                "name": "AC/20",
                                "weight": 14,
                                "size": 10,
                                "heat": 7,
                                "weapon_type": "Ballistic",
                                "damage": 20,
                            }
                        ],
                        "CT": [{"name": "Heat Sink", "weight": 1}],
                    },
                }
            ]
        )

        mech = catalog.get("HBK-4G")
        assert isinstance(mech, StoredMech)
        assert isinstance(mech.default_config["RT"][0], Weapon)
        assert not isinstance(mech.default_config["CT"][0], Weapon)
        assert mech.assemble().available_tonnage() == 35

    def test_load_records_uses_rules_default_tonnage(self):
        catalog = MechCatalog(rules=RulesConfig(units=UnitRules(default_mech_tonnage=45)))

        catalog.load_records([{"model": "PHX-1"}])

        assert catalog.get("PHX-1").tonnage == 45

    def test_invalid_records_define_nothing(self):
        catalog = MechCatalog()

        with pytest.raises(ValidationError):
            catalog.load_records([{"model": "AS7-D", "tonnage": 100}, {"model": "", "tonnage": -5}])

        assert len(catalog) == 0


class TestResolveStorage:
    def test_resolves_known_models(self, caplog):
        storage = SimpleStorage("Hangar")
        storage.add_parts("Atlas", 2)
        storage.add_stored("Atlas", 1)
        storage.add_stored("Locust", 3)
        storage.add_parts("Marauder", 1)
        catalog = MechCatalog([ATLAS, LOCUST])

        with caplog.at_level(logging.INFO, logger="btechaid.domain.catalog"):
            resolved = resolve_storage(storage, catalog)

        assert resolved == ["Atlas", "Locust"]
        assert storage.get_parts("Atlas").value == Resolved(ATLAS)
        assert storage.get_parts("Atlas").count == 2
        assert storage.get_stored("Atlas").value == Resolved(ATLAS)
        assert storage.get_stored("Locust").count == 3
        assert storage.get_parts("Marauder").value == Unresolved("Marauder")
        assert not storage.is_complete
        assert "1 still unresolved" in caplog.text

    def test_full_resolution_completes_storage(self):
        storage = SimpleStorage("Hangar")
        storage.add_parts("Atlas", 2)
        storage.add_stored("Locust", 1)

        resolve_storage(storage, MechCatalog([ATLAS, LOCUST]))

        assert storage.is_complete

    def test_notifies_each_resolution(self):
        storage = SimpleStorage("Hangar")
        storage.add_parts("Atlas", 2)
        events = []
        storage.subscribe(events.append)

        resolve_storage(storage, MechCatalog([ATLAS]))

        assert len(events) == 1
        assert events[0].count.value == Resolved(ATLAS)
