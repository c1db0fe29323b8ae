"""Unit tests for mech, equipment, and loadout shapes."""

from __future__ import annotations

import pytest

from btechaid.domain.enums import MechLocation, MechType, WeaponType, WeightClass
from btechaid.domain.equipment import Equipment, Modifier, Weapon, total_weight
from btechaid.domain.loadout import LoadoutError, validate_loadout
from btechaid.domain.models import AssembledMech, Mech, StoredMech, weight_class_for

MEDIUM_LASER = Weapon("Medium Laser", weight=1, size=1, heat=3, weapon_type=WeaponType.ENERGY, damage=5)
AC20 = Weapon("AC/20", weight=14, size=10, heat=7, weapon_type=WeaponType.BALLISTIC, damage=20)
HEAT_SINK = Equipment("Heat Sink", weight=1, modifiers=(Modifier("Heat Sink", "heat", -1),))


class TestMech:
    def test_defaults(self):
        mech = Mech("Locust LCT-1V")

        assert mech.name == "Locust LCT-1V"
        assert mech.mech_type is MechType.HUMANOID
        assert mech.tonnage == 20
        assert mech.weight_class is WeightClass.LIGHT

    def test_explicit_fields(self):
        mech = Mech("AS7-D", "Atlas", MechType.HUMANOID, 100)

        assert mech.name == "Atlas"
        assert mech.weight_class is WeightClass.ASSAULT

    @pytest.mark.parametrize(
        ("tonnage", "expected"),
        [
            (35, WeightClass.LIGHT),
            (40, WeightClass.MEDIUM),
            (55, WeightClass.MEDIUM),
            (60, WeightClass.HEAVY),
            (75, WeightClass.HEAVY),
            (80, WeightClass.ASSAULT),
            (100, WeightClass.ASSAULT),
            (135, WeightClass.SUPER_HEAVY),
        ],
    )
    def test_weight_class_thresholds(self, tonnage, expected):
        assert weight_class_for(tonnage) is expected
        assert Mech("X", tonnage=tonnage).weight_class is expected

    def test_rejects_empty_model(self):
        with pytest.raises(ValueError):
            Mech("")

    def test_rejects_non_positive_tonnage(self):
        with pytest.raises(ValueError):
            Mech("X", tonnage=0)

    def test_chassis_strips_subclass_state(self):
        assembled = AssembledMech.from_mech(Mech("HBK-4G", "Hunchback", tonnage=50), {"RT": [AC20]})

        chassis = assembled.chassis()

        assert type(chassis) is Mech
        assert chassis == Mech("HBK-4G", "Hunchback", tonnage=50)


class TestEquipment:
    def test_total_weight_single(self):
        assert total_weight(AC20) == 14

    def test_total_weight_list(self):
        assert total_weight([AC20, MEDIUM_LASER, HEAT_SINK]) == 16

    def test_total_weight_loadout(self):
        loadout = {"RT": [AC20], "LA": [MEDIUM_LASER], "CT": []}

        assert total_weight(loadout) == 15

    def test_weapon_is_equipment(self):
        assert isinstance(MEDIUM_LASER, Equipment)
        assert MEDIUM_LASER.damage_mods == ()


class TestLoadout:
    def test_valid_loadout_passes(self):
        validate_loadout(Mech("HBK-4G", tonnage=50), {MechLocation.RIGHT_TORSO.value: [AC20]})

    def test_unknown_location_rejected(self):
        with pytest.raises(LoadoutError, match="Unknown location"):
            validate_loadout(Mech("HBK-4G", tonnage=50), {"T": [AC20]})

    def test_non_equipment_rejected(self):
        with pytest.raises(LoadoutError, match="non-equipment"):
            validate_loadout(Mech("HBK-4G", tonnage=50), {"RT": ["AC/20"]})

    def test_overweight_rejected(self):
        with pytest.raises(LoadoutError, match="exceeding"):
            validate_loadout(Mech("LCT-1V", tonnage=20), {"RT": [AC20], "LT": [AC20]})


class TestStoredAndAssembled:
    def test_assemble_with_loadout(self):
        stored = StoredMech.from_mech(Mech("HBK-4G", "Hunchback", tonnage=50))

        assembled = stored.assemble({"RT": [AC20], "LA": [MEDIUM_LASER]})

        assert isinstance(assembled, AssembledMech)
        assert assembled.model == "HBK-4G"
        assert assembled.available_tonnage() == 35

    def test_assemble_uses_default_config(self):
        stored = StoredMech.from_mech(Mech("HBK-4G", tonnage=50), {"RT": [AC20]})

        assembled = stored.assemble()

        assert assembled.loadout == {"RT": [AC20]}
        assert assembled.loadout is not stored.default_config

    def test_assemble_without_any_loadout(self):
        assembled = StoredMech.from_mech(Mech("LCT-1V")).assemble()

        assert assembled.loadout == {}
        assert assembled.available_tonnage() == 20

    def test_assemble_rejects_malformed_loadout(self):
        stored = StoredMech.from_mech(Mech("LCT-1V", tonnage=20))

        with pytest.raises(LoadoutError):
            stored.assemble({"RT": [AC20, AC20]})
