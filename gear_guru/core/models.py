from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

GearStatus = Literal["Ready", "Update", "Cleaned"]
SizingKind = Literal["Simple", "Detailed"]
TabName = Literal["family", "gear", "measure", "resources"]
SelectionField = Literal["sport", "skill_level"]

GEAR_STATUSES: tuple[GearStatus, GearStatus, GearStatus] = ("Ready", "Update", "Cleaned")
TAB_NAMES: tuple[TabName, TabName, TabName, TabName] = ("family", "gear", "measure", "resources")
SELECTION_FIELDS: tuple[SelectionField, SelectionField] = ("sport", "skill_level")


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


class ProfilePhotoSource(StrictModel):
    primary: str = Field(min_length=1)
    fallback: str | None = None


class MemberProfile(StrictModel):
    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    height: str
    weight: str
    shoe_size: str = Field(alias="shoeSize")
    hand_size: str = Field(alias="handSize")
    photo: ProfilePhotoSource | None = None

    def attribute_rows(self) -> list[tuple[str, str]]:
        return [
            ("Age", str(self.age)),
            ("Height", self.height),
            ("Weight", self.weight),
            ("Shoe", self.shoe_size),
            ("Hand", self.hand_size),
        ]


class SizingItem(StrictModel):
    label: str
    value: str


class SizingEntry(StrictModel):
    label: str = Field(min_length=1)
    kind: SizingKind
    values: list[str] = Field(default_factory=list)
    items: list[SizingItem] = Field(default_factory=list)
    icon: str = Field(min_length=1)

    @model_validator(mode="after")
    def validate_kind_payload(self) -> "SizingEntry":
        if self.kind == "Simple" and self.items:
            raise ValueError(f"Simple sizing entry '{self.label}' cannot carry items.")
        if self.kind == "Detailed" and self.values:
            raise ValueError(f"Detailed sizing entry '{self.label}' cannot carry values.")
        return self


class GearItem(StrictModel):
    id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    brand: str
    spec: str
    icon: str | None = None
    status: str

    @property
    def icon_key(self) -> str:
        return self.icon or self.type


class MemberBundle(StrictModel):
    profile: MemberProfile
    sizing: list[SizingEntry] | None = None
    gear: list[GearItem] | None = None

    @model_validator(mode="after")
    def validate_unique_gear_ids(self) -> "MemberBundle":
        seen: set[str] = set()
        for item in self.gear or []:
            if item.id in seen:
                raise ValueError(f"Duplicate gear id '{item.id}'.")
            seen.add(item.id)
        return self

    def gear_by_id(self) -> dict[str, GearItem]:
        return {item.id: item for item in self.gear or []}
