from .equipment import EquipmentRecord, LoadoutItemRecord, ModifierRecord, WeaponRecord
from .mech import MechRecord

__all__ = [
    "EquipmentRecord",
    "LoadoutItemRecord",
    "MechRecord",
    "ModifierRecord",
    "WeaponRecord",
]
