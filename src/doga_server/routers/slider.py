import logging
from typing import Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_db_session, get_readonly_db_session, get_settings, get_storage
from doga_server.schemas.envelope import NO_CACHE_HEADERS, ok
from doga_server.schemas.slider import SliderResponse, SliderWriteRequest
from doga_server.services import slider as slider_service
from doga_server.services.storage import ObjectStorage
from doga_server.services.uploads import (
    SLIDER_IMAGE_TYPES,
    SLIDER_VIDEO_TYPES,
    UploadPolicy,
    media_kind,
    read_checked,
    slider_media_key,
)
from doga_server.settings import Settings

router = APIRouter(tags=["slider"])
logger = logging.getLogger(__name__)


@router.get("/api/slider")
async def list_active_slides(session: AsyncSession = Depends(get_readonly_db_session)) -> JSONResponse:
    slides = await slider_service.list_slides(session, active_only=True)
    return JSONResponse(content=ok([SliderResponse.from_item(item).dump() for item in slides]), headers=NO_CACHE_HEADERS)


@router.get("/api/admin/slider")
async def list_slides(
    id: str | None = None,
    session: AsyncSession = Depends(get_readonly_db_session),
) -> dict[str, Any]:
    if id:
        item = await slider_service.get_slide(session, id)
        if item is None:
            raise HTTPException(status_code=404, detail="Slider item not found")
        return ok(SliderResponse.from_item(item).dump())

    slides = await slider_service.list_slides(session)
    return ok([SliderResponse.from_item(item).dump() for item in slides])


@router.post("/api/admin/slider")
async def create_slide(body: SliderWriteRequest, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    if not body.has_required_fields():
        raise HTTPException(status_code=400, detail="A title (TR or EN) and an image are required")

    item = await slider_service.create_slide(session, body)
    return ok(SliderResponse.from_item(item).dump(), "Slider item created")


@router.put("/api/admin/slider")
async def update_slide(body: SliderWriteRequest, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    if not body.id:
        raise HTTPException(status_code=400, detail="Slider id is required")

    item = await slider_service.get_slide(session, body.id)
    if item is None:
        raise HTTPException(status_code=404, detail="Slider item not found")

    item = await slider_service.update_slide(session, item, body)
    return ok(SliderResponse.from_item(item).dump(), "Slider item updated")


@router.delete("/api/admin/slider")
async def delete_slide(id: str | None = None, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    if not id:
        raise HTTPException(status_code=400, detail="Slider id is required")

    item = await slider_service.get_slide(session, id)
    if item is None:
        raise HTTPException(status_code=404, detail="Slider item not found")

    await slider_service.delete_slide(session, item)
    return ok(message="Slider item deleted")


@router.post("/api/admin/slider/upload")
async def upload_slider_media(
    file: UploadFile | None = File(default=None),
    folder: str = Form(default="slider"),
    settings: Settings = Depends(get_settings),
    storage: ObjectStorage = Depends(get_storage),
) -> dict[str, Any]:
    if file is None:
        raise HTTPException(status_code=400, detail="File not found")

    content_type = file.content_type or ""
    policy = (
        UploadPolicy(SLIDER_VIDEO_TYPES, settings.max_video_bytes, kind="video")
        if media_kind(content_type) == "video"
        else UploadPolicy(SLIDER_IMAGE_TYPES, settings.max_image_bytes)
    )
    data = await read_checked(file, policy)

    key = slider_media_key(folder, file.filename)
    logger.info(f"Uploading slider media {file.filename} ({len(data)} bytes, {content_type}) as {key}")
    stored = await storage.put_object(key, data, content_type)
    return {"success": True, "fileUrl": stored.url, "fileId": stored.key, "fileType": media_kind(content_type)}
