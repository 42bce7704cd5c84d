from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from doga_server.models.room_types import RoomType


class RoomTypeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name_tr: str = Field(serialization_alias="nameTR")
    name_en: str = Field(serialization_alias="nameEN")
    active: bool
    created_at: int = Field(serialization_alias="createdAt")
    updated_at: int = Field(serialization_alias="updatedAt")

    @classmethod
    def from_type(cls, room_type: RoomType) -> "RoomTypeResponse":
        return cls(
            id=room_type.id,
            name_tr=room_type.name_tr,
            name_en=room_type.name_en,
            active=room_type.active,
            created_at=room_type.created_at,
            updated_at=room_type.updated_at,
        )

    def dump(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class RoomTypeWriteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name_tr: str | None = Field(default=None, validation_alias=AliasChoices("nameTR", "name_tr"))
    name_en: str | None = Field(default=None, validation_alias=AliasChoices("nameEN", "name_en"))
    active: bool | None = None

    def column_changes(self) -> dict[str, Any]:
        columns = {"name_tr": self.name_tr, "name_en": self.name_en, "active": self.active}
        return {column: value for column, value in columns.items() if value is not None}
