from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from doga_server.models.slider import SliderItem

# request field -> column
SLIDER_COLUMNS = {
    "title_tr": "title_tr",
    "title_en": "title_en",
    "subtitle_tr": "subtitle_tr",
    "subtitle_en": "subtitle_en",
    "description_tr": "description_tr",
    "description_en": "description_en",
    "image": "image_url",
    "video_url": "video_url",
    "button_text_tr": "button_text_tr",
    "button_text_en": "button_text_en",
    "button_url": "button_url",
    "active": "active",
    "order": "order_number",
}


class SliderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title_tr: str = Field(serialization_alias="titleTR")
    title_en: str = Field(serialization_alias="titleEN")
    subtitle_tr: str = Field(serialization_alias="subtitleTR")
    subtitle_en: str = Field(serialization_alias="subtitleEN")
    description_tr: str = Field(serialization_alias="descriptionTR")
    description_en: str = Field(serialization_alias="descriptionEN")
    image: str
    video_url: str = Field(serialization_alias="videoUrl")
    button_text_tr: str = Field(serialization_alias="buttonTextTR")
    button_text_en: str = Field(serialization_alias="buttonTextEN")
    button_url: str = Field(serialization_alias="buttonUrl")
    active: bool
    order: int
    created_at: int = Field(serialization_alias="createdAt")
    updated_at: int = Field(serialization_alias="updatedAt")

    @classmethod
    def from_item(cls, item: SliderItem) -> "SliderResponse":
        return cls(
            id=item.id,
            title_tr=item.title_tr,
            title_en=item.title_en,
            subtitle_tr=item.subtitle_tr,
            subtitle_en=item.subtitle_en,
            description_tr=item.description_tr,
            description_en=item.description_en,
            image=item.image_url,
            video_url=item.video_url,
            button_text_tr=item.button_text_tr,
            button_text_en=item.button_text_en,
            button_url=item.button_url,
            active=item.active,
            order=item.order_number,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )

    def dump(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SliderWriteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    title_tr: str | None = Field(default=None, validation_alias=AliasChoices("titleTR", "title_tr"))
    title_en: str | None = Field(default=None, validation_alias=AliasChoices("titleEN", "title_en"))
    subtitle_tr: str | None = Field(default=None, validation_alias=AliasChoices("subtitleTR", "subtitle_tr"))
    subtitle_en: str | None = Field(default=None, validation_alias=AliasChoices("subtitleEN", "subtitle_en"))
    description_tr: str | None = Field(default=None, validation_alias=AliasChoices("descriptionTR", "description_tr"))
    description_en: str | None = Field(default=None, validation_alias=AliasChoices("descriptionEN", "description_en"))
    image: str | None = Field(default=None, validation_alias=AliasChoices("image", "imageUrl", "image_url"))
    video_url: str | None = Field(default=None, validation_alias=AliasChoices("videoUrl", "video_url"))
    button_text_tr: str | None = Field(default=None, validation_alias=AliasChoices("buttonTextTR", "button_text_tr"))
    button_text_en: str | None = Field(default=None, validation_alias=AliasChoices("buttonTextEN", "button_text_en"))
    button_url: str | None = Field(default=None, validation_alias=AliasChoices("buttonUrl", "button_url"))
    active: bool | None = None
    order: int | None = Field(default=None, validation_alias=AliasChoices("order", "orderNumber", "order_number"))

    def has_required_fields(self) -> bool:
        return bool((self.title_tr or self.title_en) and self.image)

    def new_item(self) -> SliderItem:
        return SliderItem(
            title_tr=self.title_tr or "",
            title_en=self.title_en or "",
            subtitle_tr=self.subtitle_tr or "",
            subtitle_en=self.subtitle_en or "",
            description_tr=self.description_tr or "",
            description_en=self.description_en or "",
            image_url=self.image or "",
            video_url=self.video_url or "",
            button_text_tr=self.button_text_tr or "",
            button_text_en=self.button_text_en or "",
            button_url=self.button_url or "",
            active=True if self.active is None else self.active,
            order_number=self.order or 0,
        )

    def column_changes(self) -> dict[str, Any]:
        """Columns to update; fields that are absent or null stay as they are."""
        return {
            column: getattr(self, field)
            for field, column in SLIDER_COLUMNS.items()
            if getattr(self, field) is not None
        }
