import logging
from typing import Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from doga_server.dependencies import get_settings, get_storage, require_admin
from doga_server.services.storage import ObjectStorage
from doga_server.services.uploads import ROOM_IMAGE_TYPES, UploadPolicy, read_checked, room_image_key
from doga_server.settings import Settings

router = APIRouter(tags=["upload"])
logger = logging.getLogger(__name__)


@router.post("/api/upload", dependencies=[Depends(require_admin)])
async def upload_room_image(
    file: UploadFile | None = File(default=None),
    room_id: str = Form(default="", alias="roomId"),
    settings: Settings = Depends(get_settings),
    storage: ObjectStorage = Depends(get_storage),
) -> dict[str, Any]:
    if file is None:
        raise HTTPException(status_code=400, detail="File not found")

    data = await read_checked(file, UploadPolicy(ROOM_IMAGE_TYPES, settings.max_image_bytes))

    key = room_image_key(room_id, file.filename)
    logger.info(f"Uploading {file.filename} ({file.content_type}, {len(data)} bytes) as {key}")
    stored = await storage.put_object(key, data, file.content_type or "application/octet-stream")
    return {"success": True, "url": stored.url, "message": "File uploaded"}
