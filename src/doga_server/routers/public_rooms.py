from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_readonly_db_session, get_room_id_resolver
from doga_server.i18n import SUPPORTED_LANGUAGES
from doga_server.schemas.envelope import NO_CACHE_HEADERS, ok
from doga_server.services import rooms as room_service
from doga_server.services.room_ids import RoomIdResolver

router = APIRouter(prefix="/api/public-rooms", tags=["rooms"])


def requested_language(lang: str | None) -> str | None:
    if lang is None:
        return None
    if lang not in SUPPORTED_LANGUAGES:
        raise HTTPException(status_code=400, detail=f"Unsupported language: {lang}")
    return lang


@router.get("")
async def list_public_rooms(
    lang: str | None = None,
    include_inactive: bool = Query(default=False, alias="includeInactive"),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> JSONResponse:
    rooms = await room_service.list_rooms(session, include_inactive=include_inactive)
    data = await room_service.room_payloads(session, rooms, requested_language(lang))
    return JSONResponse(content=ok(data), headers=NO_CACHE_HEADERS)


@router.get("/{room_id}")
async def get_public_room(
    room_id: str,
    lang: str | None = None,
    session: AsyncSession = Depends(get_readonly_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> JSONResponse:
    room = await resolver.resolve(session, room_id)
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")
    data = await room_service.room_payload(session, room, requested_language(lang))
    return JSONResponse(content=ok(data), headers=NO_CACHE_HEADERS)
