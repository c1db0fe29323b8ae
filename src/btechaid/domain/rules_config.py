"""Declarative rule configuration for the roster domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WeightClassRules:
    """Upper tonnage bounds (inclusive) of each weight class."""

    light_max: int = 35
    medium_max: int = 55
    heavy_max: int = 75
    assault_max: int = 100


@dataclass(frozen=True, slots=True)
class UnitRules:
    """Defaults for newly created units."""

    default_mech_tonnage: int = 20


@dataclass(frozen=True, slots=True)
class StorageRules:
    """Defaults for mech storage facilities."""

    default_bay_capacity: int = 2


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for the roster domain."""

    weight_classes: WeightClassRules = WeightClassRules()
    units: UnitRules = UnitRules()
    storage: StorageRules = StorageRules()


DEFAULT_RULES = RulesConfig()
