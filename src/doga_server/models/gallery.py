import time
import uuid as uuid_module

from sqlmodel import Field, SQLModel

MEDIA_TYPES = ("image", "video")


class GalleryItem(SQLModel, table=True):
    __tablename__ = "gallery_items"

    id: str = Field(default_factory=lambda: str(uuid_module.uuid4()), primary_key=True)
    title_tr: str = Field(default="")
    title_en: str = Field(default="")
    media_type: str = Field(default="image", index=True)
    image_url: str = Field(default="")
    video_url: str = Field(default="")
    active: bool = Field(default=True)
    order_number: int = Field(default=1)
    created_at: int = Field(default_factory=lambda: int(time.time()))

    def title(self, lang: str) -> str:
        return self.title_tr if lang == "tr" else self.title_en
