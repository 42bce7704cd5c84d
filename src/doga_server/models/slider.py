import time
import uuid as uuid_module

from sqlmodel import Field, SQLModel


class SliderItem(SQLModel, table=True):
    __tablename__ = "slider_items"

    id: str = Field(default_factory=lambda: str(uuid_module.uuid4()), primary_key=True)
    title_tr: str = Field(default="")
    title_en: str = Field(default="")
    subtitle_tr: str = Field(default="")
    subtitle_en: str = Field(default="")
    description_tr: str = Field(default="")
    description_en: str = Field(default="")
    image_url: str
    video_url: str = Field(default="")
    button_text_tr: str = Field(default="")
    button_text_en: str = Field(default="")
    button_url: str = Field(default="")
    active: bool = Field(default=True, index=True)
    order_number: int = Field(default=0)
    created_at: int = Field(default_factory=lambda: int(time.time()))
    updated_at: int = Field(default_factory=lambda: int(time.time()))

    def title(self, lang: str) -> str:
        primary, fallback = (self.title_tr, self.title_en) if lang == "tr" else (self.title_en, self.title_tr)
        return primary or fallback

    def subtitle(self, lang: str) -> str:
        return self.subtitle_tr if lang == "tr" else self.subtitle_en

    def button_text(self, lang: str) -> str:
        return self.button_text_tr if lang == "tr" else self.button_text_en
