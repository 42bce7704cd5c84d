import logging
import time

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from doga_server.models.room_types import RoomType
from doga_server.models.rooms import Room
from doga_server.schemas.room_types import RoomTypeWriteRequest

logger = logging.getLogger(__name__)


async def list_room_types(session: AsyncSession, active_only: bool = False) -> list[RoomType]:
    query = select(RoomType)
    if active_only:
        query = query.where(col(RoomType.active).is_(True))
    result = await session.execute(query.order_by(col(RoomType.name_tr).asc()))
    return list(result.scalars().all())


async def get_room_type(session: AsyncSession, type_id: str) -> RoomType | None:
    return await session.get(RoomType, type_id)


async def create_room_type(session: AsyncSession, body: RoomTypeWriteRequest) -> RoomType:
    room_type = RoomType(**body.column_changes())
    session.add(room_type)
    await session.flush()
    logger.info(f"Created room type {room_type.id} ({room_type.name_tr})")
    return room_type


async def update_room_type(session: AsyncSession, room_type: RoomType, body: RoomTypeWriteRequest) -> RoomType:
    for column, value in body.column_changes().items():
        setattr(room_type, column, value)
    room_type.updated_at = int(time.time())
    await session.flush()
    return room_type


async def toggle_room_type(session: AsyncSession, room_type: RoomType) -> RoomType:
    room_type.active = not room_type.active
    room_type.updated_at = int(time.time())
    await session.flush()
    logger.info(f"Room type {room_type.id} is now {'active' if room_type.active else 'inactive'}")
    return room_type


async def delete_room_type(session: AsyncSession, room_type: RoomType) -> None:
    await session.execute(update(Room).where(col(Room.room_type_id) == room_type.id).values(room_type_id=None))
    await session.delete(room_type)
    await session.flush()
    logger.info(f"Deleted room type {room_type.id}")
