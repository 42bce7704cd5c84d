import time
import uuid as uuid_module

from sqlmodel import Field, SQLModel


class RoomType(SQLModel, table=True):
    __tablename__ = "room_types"

    id: str = Field(default_factory=lambda: str(uuid_module.uuid4()), primary_key=True)
    name_tr: str
    name_en: str
    active: bool = Field(default=True)
    created_at: int = Field(default_factory=lambda: int(time.time()))
    updated_at: int = Field(default_factory=lambda: int(time.time()))

    def name(self, lang: str) -> str:
        return self.name_tr if lang == "tr" else self.name_en
