from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_db_session, get_readonly_db_session
from doga_server.models.gallery import MEDIA_TYPES, GalleryItem
from doga_server.schemas.envelope import NO_CACHE_HEADERS, ok
from doga_server.schemas.gallery import GalleryItemResponse, GalleryItemWriteRequest
from doga_server.services import gallery as gallery_service

router = APIRouter(tags=["gallery"])


async def load_item(session: AsyncSession, item_id: str) -> GalleryItem:
    item = await gallery_service.get_item(session, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Gallery item not found")
    return item


@router.get("/api/gallery")
async def list_public_items(
    type: str | None = None,
    session: AsyncSession = Depends(get_readonly_db_session),
) -> JSONResponse:
    if type is not None and type not in MEDIA_TYPES:
        raise HTTPException(status_code=400, detail=f"Unknown media type: {type}")
    items = await gallery_service.list_items(session, media_type=type)
    return JSONResponse(content=ok([GalleryItemResponse.from_item(item).dump() for item in items]), headers=NO_CACHE_HEADERS)


@router.get("/api/admin/gallery")
async def list_items(session: AsyncSession = Depends(get_readonly_db_session)) -> dict[str, Any]:
    items = await gallery_service.list_items(session, include_inactive=True)
    return ok([GalleryItemResponse.from_item(item).dump() for item in items])


@router.post("/api/admin/gallery")
async def create_item(body: GalleryItemWriteRequest, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    item = await gallery_service.create_item(session, body)
    return ok(GalleryItemResponse.from_item(item).dump(), "Gallery item created")


@router.get("/api/admin/gallery/{item_id}")
async def get_item(item_id: str, session: AsyncSession = Depends(get_readonly_db_session)) -> dict[str, Any]:
    item = await load_item(session, item_id)
    return ok(GalleryItemResponse.from_item(item).dump())


@router.put("/api/admin/gallery/{item_id}")
async def update_item(
    item_id: str,
    body: GalleryItemWriteRequest,
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, Any]:
    item = await load_item(session, item_id)
    item = await gallery_service.update_item(session, item, body)
    return ok(GalleryItemResponse.from_item(item).dump(), "Gallery item updated")


@router.delete("/api/admin/gallery/{item_id}")
async def delete_item(item_id: str, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    item = await load_item(session, item_id)
    await gallery_service.delete_item(session, item)
    return ok(message="Gallery item deleted")
