from pydantic import BaseModel, Field

from btechaid.domain.enums import MechType
from btechaid.domain.models import Mech, StoredMech
from btechaid.domain.rules_config import DEFAULT_RULES, RulesConfig

from .equipment import LoadoutItemRecord


class MechRecord(BaseModel):
    model: str = Field(..., min_length=1, description="Unique model name of the design")
    name: str | None = Field(None, description="Display name; defaults to the model")
    mech_type: MechType = Field(default=MechType.HUMANOID, description="Chassis layout")
    tonnage: int | None = Field(None, gt=0, description="Tonnage; defaults to the rules default")
    default_config: dict[str, list[LoadoutItemRecord]] | None = Field(
        None, description="Default loadout by location code"
    )

    def to_domain(self, rules: RulesConfig = DEFAULT_RULES) -> Mech:
        tonnage = self.tonnage if self.tonnage is not None else rules.units.default_mech_tonnage
        mech = Mech(self.model, self.name, self.mech_type, tonnage)
        if self.default_config is None:
            return mech
        config = {
            location: [item.to_domain() for item in items]
            for location, items in self.default_config.items()
        }
        return StoredMech.from_mech(mech, config)
