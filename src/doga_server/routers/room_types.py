from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_db_session, get_readonly_db_session
from doga_server.models.room_types import RoomType
from doga_server.schemas.envelope import ok
from doga_server.schemas.room_types import RoomTypeResponse, RoomTypeWriteRequest
from doga_server.services import room_types as room_type_service

router = APIRouter(prefix="/api/admin/room-types", tags=["room-types"])


async def load_room_type(session: AsyncSession, type_id: str) -> RoomType:
    room_type = await room_type_service.get_room_type(session, type_id)
    if room_type is None:
        raise HTTPException(status_code=404, detail="Room type not found")
    return room_type


@router.get("")
async def list_room_types(session: AsyncSession = Depends(get_readonly_db_session)) -> dict[str, Any]:
    room_types = await room_type_service.list_room_types(session)
    return ok([RoomTypeResponse.from_type(room_type).dump() for room_type in room_types])


@router.post("")
async def create_room_type(body: RoomTypeWriteRequest, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    if not body.name_tr or not body.name_en:
        raise HTTPException(status_code=400, detail="nameTR and nameEN are required")
    room_type = await room_type_service.create_room_type(session, body)
    return ok(RoomTypeResponse.from_type(room_type).dump(), "Room type created")


@router.get("/{type_id}")
async def get_room_type(type_id: str, session: AsyncSession = Depends(get_readonly_db_session)) -> dict[str, Any]:
    room_type = await load_room_type(session, type_id)
    return ok(RoomTypeResponse.from_type(room_type).dump())


@router.put("/{type_id}")
async def update_room_type(
    type_id: str,
    body: RoomTypeWriteRequest,
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, Any]:
    room_type = await load_room_type(session, type_id)
    room_type = await room_type_service.update_room_type(session, room_type, body)
    return ok(RoomTypeResponse.from_type(room_type).dump(), "Room type updated")


@router.post("/{type_id}/toggle")
async def toggle_room_type(type_id: str, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    room_type = await load_room_type(session, type_id)
    room_type = await room_type_service.toggle_room_type(session, room_type)
    return ok(RoomTypeResponse.from_type(room_type).dump())


@router.delete("/{type_id}")
async def delete_room_type(type_id: str, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    room_type = await load_room_type(session, type_id)
    await room_type_service.delete_room_type(session, room_type)
    return ok(message="Room type deleted")
