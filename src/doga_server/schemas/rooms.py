from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


NULLABLE_COLUMNS = {"type", "room_type_id"}


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class RoomResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name_tr: str = Field(serialization_alias="nameTR")
    name_en: str = Field(serialization_alias="nameEN")
    description_tr: str = Field(serialization_alias="descriptionTR")
    description_en: str = Field(serialization_alias="descriptionEN")
    image: str
    main_image_url: str = Field(serialization_alias="mainImageUrl")
    price_tr: str = Field(serialization_alias="priceTR")
    price_en: str = Field(serialization_alias="priceEN")
    capacity: int
    size: int
    features_tr: list[str] = Field(serialization_alias="featuresTR")
    features_en: list[str] = Field(serialization_alias="featuresEN")
    type: str | None
    room_type_id: str | None = Field(serialization_alias="roomTypeId")
    active: bool
    order: int
    order_number: int = Field(serialization_alias="orderNumber")
    gallery: list[str]
    name: str | None = None
    description: str | None = None
    price: str | None = None
    features: list[str] | None = None


class RoomWriteRequest(BaseModel):
    """Room fields accepted by create and update.

    Only the fields present in the request body are applied on update, so
    every field is optional here and required fields are checked by the
    create endpoint.
    """

    model_config = ConfigDict(extra="ignore")

    name_tr: str | None = Field(default=None, validation_alias=AliasChoices("nameTR", "name_tr"))
    name_en: str | None = Field(default=None, validation_alias=AliasChoices("nameEN", "name_en"))
    description_tr: str | None = Field(default=None, validation_alias=AliasChoices("descriptionTR", "description_tr"))
    description_en: str | None = Field(default=None, validation_alias=AliasChoices("descriptionEN", "description_en"))
    image: str | None = None
    main_image_url: str | None = Field(default=None, validation_alias=AliasChoices("mainImageUrl", "main_image_url"))
    price_tr: str | None = Field(default=None, validation_alias=AliasChoices("priceTR", "price_tr"))
    price_en: str | None = Field(default=None, validation_alias=AliasChoices("priceEN", "price_en"))
    capacity: int | None = Field(default=None, ge=1)
    size: int | None = Field(default=None, ge=0)
    features_tr: list[str] | None = Field(default=None, validation_alias=AliasChoices("featuresTR", "features_tr"))
    features_en: list[str] | None = Field(default=None, validation_alias=AliasChoices("featuresEN", "features_en"))
    type: str | None = None
    room_type_id: str | None = Field(default=None, validation_alias=AliasChoices("roomTypeId", "room_type_id"))
    active: bool | None = None
    order: int | None = None
    order_number: int | None = Field(default=None, validation_alias=AliasChoices("orderNumber", "order_number"))
    gallery: list[str] | None = None

    strip_names = field_validator("name_tr", "name_en", mode="before")(_strip)

    def resolved_image(self) -> str | None:
        if "image" in self.model_fields_set:
            return self.image
        if "main_image_url" in self.model_fields_set:
            return self.main_image_url
        return None

    def resolved_order(self) -> int | None:
        if "order" in self.model_fields_set:
            return self.order
        if "order_number" in self.model_fields_set:
            return self.order_number
        return None

    def column_changes(self) -> dict[str, Any]:
        """Column values to write, limited to fields the client sent."""
        plain_fields = (
            "name_tr",
            "name_en",
            "description_tr",
            "description_en",
            "price_tr",
            "price_en",
            "capacity",
            "size",
            "features_tr",
            "features_en",
            "type",
            "room_type_id",
            "active",
        )
        changes = {name: getattr(self, name) for name in plain_fields if name in self.model_fields_set}
        if "image" in self.model_fields_set or "main_image_url" in self.model_fields_set:
            changes["main_image_url"] = self.resolved_image() or ""
        if "order" in self.model_fields_set or "order_number" in self.model_fields_set:
            order = self.resolved_order()
            if order is not None:
                changes["order_number"] = order
        return {key: value for key, value in changes.items() if not (value is None and key not in NULLABLE_COLUMNS)}



class RoomGalleryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    main_image: str = Field(serialization_alias="mainImage")
    gallery: list[str]


class RoomGalleryReplaceRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    main_image_url: str | None = Field(default=None, validation_alias=AliasChoices("mainImageUrl", "main_image_url"))
    gallery: list[str | dict[str, Any]] = Field(default_factory=list)

    def gallery_urls(self) -> list[str]:
        urls: list[str] = []
        for item in self.gallery:
            if isinstance(item, dict):
                url = item.get("imageUrl")
                if not isinstance(url, str):
                    raise ValueError("Gallery objects must carry an imageUrl")
                urls.append(url)
            else:
                urls.append(item)
        return urls


class RoomGalleryAddRequest(BaseModel):
    image_path: str | None = Field(default=None, validation_alias=AliasChoices("imagePath", "image_path"))
