import time
import uuid as uuid_module

from sqlalchemy import Index
from sqlmodel import Field, SQLModel


class Service(SQLModel, table=True):
    __tablename__ = "services"

    id: str = Field(default_factory=lambda: str(uuid_module.uuid4()), primary_key=True)
    title_tr: str
    title_en: str
    description_tr: str = Field(default="")
    description_en: str = Field(default="")
    main_image_url: str = Field(default="")
    icon: str = Field(default="")
    active: bool = Field(default=True, index=True)
    order_number: int = Field(default=0)
    created_at: int = Field(default_factory=lambda: int(time.time()))
    updated_at: int = Field(default_factory=lambda: int(time.time()))

    def title(self, lang: str) -> str:
        return self.title_tr if lang == "tr" else self.title_en

    def description(self, lang: str) -> str:
        return self.description_tr if lang == "tr" else self.description_en


class ServiceGallery(SQLModel, table=True):
    __tablename__ = "service_gallery"
    __table_args__ = (
        Index("ix_service_gallery_service_id_order_number", "service_id", "order_number"),
    )

    id: str = Field(default_factory=lambda: str(uuid_module.uuid4()), primary_key=True)
    service_id: str = Field(foreign_key="services.id", ondelete="CASCADE", index=True)
    image_url: str
    order_number: int = Field(default=1)
    created_at: int = Field(default_factory=lambda: int(time.time()))
