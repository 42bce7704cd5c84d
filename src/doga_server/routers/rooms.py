import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_db_session, get_readonly_db_session, get_room_id_resolver, require_admin
from doga_server.models.rooms import Room
from doga_server.schemas.envelope import NO_CACHE_HEADERS, failure, ok
from doga_server.schemas.rooms import (
    RoomGalleryAddRequest,
    RoomGalleryReplaceRequest,
    RoomGalleryResponse,
    RoomWriteRequest,
)
from doga_server.services import rooms as room_service
from doga_server.services.room_ids import RoomIdResolver, validate_room_id

router = APIRouter(prefix="/api/rooms", tags=["rooms"])
logger = logging.getLogger(__name__)


async def load_room(session: AsyncSession, room_id: str) -> Room:
    room = await room_service.get_room(session, validate_room_id(room_id))
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


@router.get("")
async def list_rooms(session: AsyncSession = Depends(get_readonly_db_session)) -> JSONResponse:
    rooms = await room_service.list_rooms(session, include_inactive=True)
    data = await room_service.room_payloads(session, rooms)
    return JSONResponse(content=ok(data), headers=NO_CACHE_HEADERS)


@router.post("", dependencies=[Depends(require_admin)])
async def create_room(
    body: RoomWriteRequest,
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> dict[str, Any]:
    if not body.name_tr or not body.name_en:
        raise HTTPException(status_code=400, detail="nameTR and nameEN are required")

    room = await room_service.create_room(session, body)
    resolver.invalidate()
    return ok(await room_service.room_payload(session, room), "Room created")


@router.get("/gallery/{room_id}")
async def get_room_gallery(room_id: str, session: AsyncSession = Depends(get_readonly_db_session)) -> dict[str, Any]:
    room = await load_room(session, room_id)
    galleries = await room_service.gallery_urls(session, [room.id])
    gallery = RoomGalleryResponse(main_image=room.main_image_url, gallery=galleries.get(room.id, []))
    return ok(gallery.model_dump(by_alias=True))


@router.put("/gallery/{room_id}", dependencies=[Depends(require_admin)])
async def replace_room_gallery(
    room_id: str,
    body: RoomGalleryReplaceRequest,
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> dict[str, Any]:
    room = await load_room(session, room_id)
    urls = body.gallery_urls()
    if body.main_image_url:
        room.main_image_url = body.main_image_url
    await room_service.replace_gallery(session, room, urls)
    resolver.invalidate()
    gallery = RoomGalleryResponse(main_image=room.main_image_url, gallery=urls)
    return ok(gallery.model_dump(by_alias=True), "Gallery updated")


@router.post("/gallery/{room_id}", dependencies=[Depends(require_admin)], response_model=None)
async def add_room_gallery_image(
    room_id: str,
    body: RoomGalleryAddRequest,
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> dict[str, Any] | JSONResponse:
    if not body.image_path:
        raise HTTPException(status_code=400, detail="imagePath is required")

    room = await load_room(session, room_id)
    item = await room_service.add_gallery_image(session, room, body.image_path)
    if item is None:
        return JSONResponse(content=failure("Image is already in the gallery"))
    resolver.invalidate()
    return ok({"id": item.id, "imageUrl": item.image_url, "order": item.order_number}, "Image added to gallery")


@router.delete("/gallery/{room_id}", dependencies=[Depends(require_admin)], response_model=None)
async def remove_room_gallery_image(
    room_id: str,
    image_path: str | None = Query(default=None, alias="imagePath"),
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> dict[str, Any] | JSONResponse:
    if not image_path:
        raise HTTPException(status_code=400, detail="imagePath is required")

    room = await load_room(session, room_id)
    if not await room_service.remove_gallery_image(session, room, image_path):
        return JSONResponse(content=failure("Image not found in gallery"))
    resolver.invalidate()
    return ok(message="Image removed from gallery")


@router.get("/{room_id}")
async def get_room(room_id: str, session: AsyncSession = Depends(get_readonly_db_session)) -> JSONResponse:
    room = await load_room(session, room_id)
    return JSONResponse(content=ok(await room_service.room_payload(session, room)), headers=NO_CACHE_HEADERS)


@router.put("/{room_id}", dependencies=[Depends(require_admin)])
async def update_room(
    room_id: str,
    body: RoomWriteRequest,
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> dict[str, Any]:
    room = await load_room(session, room_id)
    room = await room_service.update_room(session, room, body)
    resolver.invalidate()
    return ok(await room_service.room_payload(session, room), "Room updated")


@router.delete("/{room_id}", dependencies=[Depends(require_admin)])
async def delete_room(
    room_id: str,
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> dict[str, Any]:
    room = await load_room(session, room_id)
    await room_service.delete_room(session, room)
    resolver.invalidate()
    return ok(message="Room deleted")
