import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_db_session, get_room_id_resolver
from doga_server.schemas.envelope import ok
from doga_server.services.room_ids import RoomIdResolver
from doga_server.services.seed import import_seed_rooms

router = APIRouter(prefix="/api/admin", tags=["rooms"])
logger = logging.getLogger(__name__)


@router.post("/import-rooms")
async def import_rooms(
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> dict[str, Any]:
    rooms = await import_seed_rooms(session)
    resolver.invalidate()
    logger.info(f"Imported {len(rooms)} seed rooms")
    return ok(
        [{"id": room.id, "nameTR": room.name_tr, "nameEN": room.name_en, "success": True} for room in rooms],
        "Rooms imported",
    )
