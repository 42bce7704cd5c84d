from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from doga_server.models.services import Service, ServiceGallery

SERVICE_COLUMNS = {
    "title_tr": "title_tr",
    "title_en": "title_en",
    "description_tr": "description_tr",
    "description_en": "description_en",
    "image": "main_image_url",
    "icon": "icon",
    "active": "active",
    "order": "order_number",
}


class ServiceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title_tr: str = Field(serialization_alias="titleTR")
    title_en: str = Field(serialization_alias="titleEN")
    description_tr: str = Field(serialization_alias="descriptionTR")
    description_en: str = Field(serialization_alias="descriptionEN")
    image: str
    main_image_url: str = Field(serialization_alias="mainImageUrl")
    icon: str
    active: bool
    order: int
    images: list[str]
    created_at: int = Field(serialization_alias="createdAt")
    updated_at: int = Field(serialization_alias="updatedAt")
    title: str | None = None
    description: str | None = None

    @classmethod
    def from_service(cls, service: Service, images: list[str], lang: str | None = None) -> "ServiceResponse":
        return cls(
            id=service.id,
            title_tr=service.title_tr,
            title_en=service.title_en,
            description_tr=service.description_tr,
            description_en=service.description_en,
            image=service.main_image_url,
            main_image_url=service.main_image_url,
            icon=service.icon,
            active=service.active,
            order=service.order_number,
            images=images,
            created_at=service.created_at,
            updated_at=service.updated_at,
            title=service.title(lang) if lang else None,
            description=service.description(lang) if lang else None,
        )

    def dump(self) -> dict[str, Any]:
        exclude = {"title", "description"} if self.title is None else None
        return self.model_dump(by_alias=True, exclude=exclude)


class ServiceWriteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title_tr: str | None = Field(default=None, validation_alias=AliasChoices("titleTR", "title_tr"))
    title_en: str | None = Field(default=None, validation_alias=AliasChoices("titleEN", "title_en"))
    description_tr: str | None = Field(default=None, validation_alias=AliasChoices("descriptionTR", "description_tr"))
    description_en: str | None = Field(default=None, validation_alias=AliasChoices("descriptionEN", "description_en"))
    image: str | None = Field(default=None, validation_alias=AliasChoices("image", "mainImageUrl", "main_image_url"))
    icon: str | None = None
    active: bool | None = None
    order: int | None = Field(default=None, validation_alias=AliasChoices("order", "orderNumber", "order_number"))
    images: list[str] | None = None

    @field_validator("title_tr", "title_en", mode="before")
    @classmethod
    def strip_titles(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def column_changes(self) -> dict[str, Any]:
        return {
            column: getattr(self, field)
            for field, column in SERVICE_COLUMNS.items()
            if getattr(self, field) is not None
        }


class ServiceGalleryRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    service_id: str = Field(serialization_alias="serviceId")
    image_url: str = Field(serialization_alias="imageUrl")
    order: int
    created_at: int = Field(serialization_alias="createdAt")

    @classmethod
    def from_row(cls, row: ServiceGallery) -> "ServiceGalleryRow":
        return cls(
            id=row.id,
            service_id=row.service_id,
            image_url=row.image_url,
            order=row.order_number,
            created_at=row.created_at,
        )

    def dump(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ServiceGalleryAddRequest(BaseModel):
    image_url: str | None = Field(default=None, validation_alias=AliasChoices("imageUrl", "image_url"))
    order: int | None = None


class ServiceGalleryReplaceRequest(BaseModel):
    # Kept loose so that non-string entries can be dropped instead of rejected.
    images: Any = None
    image: str | None = None

    def valid_images(self) -> list[str]:
        if self.images is None:
            raise ValueError("Image list is required")
        if not isinstance(self.images, list):
            raise ValueError("Image list must be an array")
        urls = [url.strip() for url in self.images if isinstance(url, str) and url.strip()]
        if not urls:
            raise ValueError("No valid image found")
        return urls

    def main_image(self) -> str | None:
        return (self.image or "").strip() or None
