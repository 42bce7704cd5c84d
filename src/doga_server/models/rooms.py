import time
import uuid as uuid_module

from sqlalchemy import JSON, Column, Index
from sqlmodel import Field, SQLModel


class Room(SQLModel, table=True):
    __tablename__ = "rooms"
    __table_args__ = (
        Index("ix_rooms_active_order_number", "active", "order_number"),
    )

    id: str = Field(default_factory=lambda: str(uuid_module.uuid4()), primary_key=True)
    name_tr: str
    name_en: str
    description_tr: str = Field(default="")
    description_en: str = Field(default="")
    main_image_url: str = Field(default="")
    price_tr: str = Field(default="")
    price_en: str = Field(default="")
    capacity: int = Field(default=2)
    size: int = Field(default=0)
    features_tr: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    features_en: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    type: str | None = Field(default=None, index=True)
    room_type_id: str | None = Field(default=None, foreign_key="room_types.id", ondelete="SET NULL")
    active: bool = Field(default=True)
    order_number: int = Field(default=0)
    created_at: int = Field(default_factory=lambda: int(time.time()))
    updated_at: int = Field(default_factory=lambda: int(time.time()))

    def name(self, lang: str) -> str:
        return self.name_tr if lang == "tr" else self.name_en

    def description(self, lang: str) -> str:
        return self.description_tr if lang == "tr" else self.description_en

    def price(self, lang: str) -> str:
        return self.price_tr if lang == "tr" else self.price_en

    def features(self, lang: str) -> list[str]:
        return list(self.features_tr if lang == "tr" else self.features_en)


class RoomGallery(SQLModel, table=True):
    __tablename__ = "room_gallery"
    __table_args__ = (
        Index("ix_room_gallery_room_id_order_number", "room_id", "order_number"),
    )

    id: str = Field(default_factory=lambda: str(uuid_module.uuid4()), primary_key=True)
    room_id: str = Field(foreign_key="rooms.id", ondelete="CASCADE", index=True)
    image_url: str
    order_number: int = Field(default=1)
    created_at: int = Field(default_factory=lambda: int(time.time()))
