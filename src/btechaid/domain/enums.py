"""Enumerations shared by the roster domain."""

from __future__ import annotations

from enum import StrEnum


class WeightClass(StrEnum):
    """Weight classification derived from unit tonnage."""

    LIGHT = "Light"
    MEDIUM = "Medium"
    HEAVY = "Heavy"
    ASSAULT = "Assault"
    SUPER_HEAVY = "Super Heavy"


class MechType(StrEnum):
    """Chassis layout of a mech."""

    QUAD = "Quad"
    HUMANOID = "Humanoid"


class WeaponType(StrEnum):
    """Weapon families."""

    ENERGY = "Energy"
    BALLISTIC = "Ballistic"
    MISSILE = "Missile"
    SUPPORT = "Support"


class MechLocation(StrEnum):
    """Hit locations of a mech."""

    HEAD = "H"
    LEFT_TORSO = "LT"
    CENTER_TORSO = "CT"
    RIGHT_TORSO = "RT"
    LEFT_ARM = "LA"
    RIGHT_ARM = "RA"
    LEFT_LEG = "LL"
    RIGHT_LEG = "RL"


class VehicleLocation(StrEnum):
    """Hit locations of a combat vehicle."""

    FRONT = "F"
    LEFT_SIDE = "LS"
    RIGHT_SIDE = "RS"
    REAR = "R"
    TURRET = "T"
    BODY = "B"
