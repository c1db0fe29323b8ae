from typing import Annotated

from pydantic import BaseModel, Field

from btechaid.domain.enums import WeaponType
from btechaid.domain.equipment import Equipment, Modifier, Weapon


class ModifierRecord(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the modifier")
    target: str = Field(..., min_length=1, description="Statistic the modifier applies to")
    modifier: float = Field(..., description="Modifier amount")

    def to_domain(self) -> Modifier:
        return Modifier(self.name, self.target, self.modifier)


class EquipmentRecord(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the equipment")
    weight: float = Field(..., ge=0, description="Weight in tons")
    size: int = Field(default=1, ge=0, description="Size in critical slots")
    modifiers: list[ModifierRecord] = Field(default_factory=list, description="Granted modifiers")
    heat: int = Field(default=0, ge=0, description="Heat produced on use")

    def to_domain(self) -> Equipment:
        return Equipment(
            name=self.name,
            weight=self.weight,
            size=self.size,
            modifiers=tuple(mod.to_domain() for mod in self.modifiers),
            heat=self.heat,
        )


class WeaponRecord(EquipmentRecord):
    weapon_type: WeaponType = Field(..., description="Weapon family")
    damage: int = Field(..., ge=0, description="Damage per hit")
    damage_mods: list[ModifierRecord] = Field(default_factory=list, description="Damage modifiers")

    def to_domain(self) -> Weapon:
        return Weapon(
            name=self.name,
            weight=self.weight,
            size=self.size,
            modifiers=tuple(mod.to_domain() for mod in self.modifiers),
            heat=self.heat,
            weapon_type=self.weapon_type,
            damage=self.damage,
            damage_mods=tuple(mod.to_domain() for mod in self.damage_mods),
        )


# Items carrying weapon fields validate as weapons, anything else as plain equipment.
LoadoutItemRecord = Annotated[WeaponRecord | EquipmentRecord, Field(union_mode="left_to_right")]
