from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from doga_server.models.gallery import GalleryItem


class GalleryItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title_tr: str = Field(serialization_alias="titleTR")
    title_en: str = Field(serialization_alias="titleEN")
    type: str
    image_url: str = Field(serialization_alias="imageUrl")
    video_url: str = Field(serialization_alias="videoUrl")
    active: bool
    order: int
    created_at: int = Field(serialization_alias="createdAt")

    @classmethod
    def from_item(cls, item: GalleryItem) -> "GalleryItemResponse":
        return cls(
            id=item.id,
            title_tr=item.title_tr,
            title_en=item.title_en,
            type=item.media_type,
            image_url=item.image_url,
            video_url=item.video_url,
            active=item.active,
            order=item.order_number,
            created_at=item.created_at,
        )

    def dump(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class GalleryItemWriteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title_tr: str | None = Field(default=None, validation_alias=AliasChoices("titleTR", "title_tr"))
    title_en: str | None = Field(default=None, validation_alias=AliasChoices("titleEN", "title_en"))
    type: Literal["image", "video"] | None = Field(default=None, validation_alias=AliasChoices("type", "mediaType"))
    image_url: str | None = Field(default=None, validation_alias=AliasChoices("imageUrl", "image_url"))
    video_url: str | None = Field(default=None, validation_alias=AliasChoices("videoUrl", "video_url"))
    active: bool | None = None
    order: int | None = Field(default=None, validation_alias=AliasChoices("order", "orderNumber", "order_number"))

    def column_changes(self) -> dict[str, Any]:
        columns = {
            "title_tr": self.title_tr,
            "title_en": self.title_en,
            "media_type": self.type,
            "image_url": self.image_url,
            "video_url": self.video_url,
            "active": self.active,
            "order_number": self.order,
        }
        return {column: value for column, value in columns.items() if value is not None}
