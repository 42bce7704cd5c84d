import logging
import time
from collections import defaultdict

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from doga_server.models.rooms import Room, RoomGallery
from doga_server.schemas.rooms import RoomResponse, RoomWriteRequest
from doga_server.services.ordering import next_order_number, renumber

logger = logging.getLogger(__name__)


async def list_rooms(session: AsyncSession, include_inactive: bool = False) -> list[Room]:
    query = select(Room)
    if not include_inactive:
        query = query.where(col(Room.active).is_(True))
    result = await session.execute(query.order_by(col(Room.order_number).asc(), col(Room.created_at).asc()))
    return list(result.scalars().all())


async def get_room(session: AsyncSession, room_id: str) -> Room | None:
    return await session.get(Room, room_id)


async def gallery_urls(session: AsyncSession, room_ids: list[str]) -> dict[str, list[str]]:
    if not room_ids:
        return {}
    result = await session.execute(
        select(RoomGallery)
        .where(col(RoomGallery.room_id).in_(room_ids))
        .order_by(col(RoomGallery.room_id), col(RoomGallery.order_number).asc())
    )
    galleries: dict[str, list[str]] = defaultdict(list)
    for item in result.scalars().all():
        galleries[item.room_id].append(item.image_url)
    return galleries


def to_room_response(room: Room, gallery: list[str], lang: str | None = None) -> RoomResponse:
    response = RoomResponse(
        id=room.id,
        name_tr=room.name_tr,
        name_en=room.name_en,
        description_tr=room.description_tr,
        description_en=room.description_en,
        image=room.main_image_url,
        main_image_url=room.main_image_url,
        price_tr=room.price_tr,
        price_en=room.price_en,
        capacity=room.capacity,
        size=room.size,
        features_tr=list(room.features_tr),
        features_en=list(room.features_en),
        type=room.type,
        room_type_id=room.room_type_id,
        active=room.active,
        order=room.order_number,
        order_number=room.order_number,
        gallery=gallery,
    )
    if lang:
        response.name = room.name(lang)
        response.description = room.description(lang)
        response.price = room.price(lang)
        response.features = room.features(lang)
    return response


LOCALIZED_FIELDS = {"name", "description", "price", "features"}


def dump_room(response: RoomResponse) -> dict:
    # localized fields only appear when a language was requested
    exclude = LOCALIZED_FIELDS if response.name is None else None
    return response.model_dump(by_alias=True, exclude=exclude)


async def room_payloads(session: AsyncSession, rooms: list[Room], lang: str | None = None) -> list[dict]:
    galleries = await gallery_urls(session, [room.id for room in rooms])
    return [dump_room(to_room_response(room, galleries.get(room.id, []), lang)) for room in rooms]


async def room_payload(session: AsyncSession, room: Room, lang: str | None = None) -> dict:
    payloads = await room_payloads(session, [room], lang)
    return payloads[0]


async def replace_gallery(session: AsyncSession, room: Room, urls: list[str]) -> None:
    await session.execute(delete(RoomGallery).where(col(RoomGallery.room_id) == room.id))
    for position, url in enumerate(urls, start=1):
        session.add(RoomGallery(room_id=room.id, image_url=url, order_number=position))
    await session.flush()


async def create_room(session: AsyncSession, body: RoomWriteRequest) -> Room:
    changes = body.column_changes()
    if "order_number" not in changes:
        changes["order_number"] = await next_order_number(session, Room)
    room = Room(**changes)
    session.add(room)
    await session.flush()
    if body.gallery is not None:
        await replace_gallery(session, room, body.gallery)
    logger.info(f"Created room {room.id} ({room.name_tr})")
    return room


async def update_room(session: AsyncSession, room: Room, body: RoomWriteRequest) -> Room:
    changes = body.column_changes()
    for key, value in changes.items():
        setattr(room, key, value)
    room.updated_at = int(time.time())
    await session.flush()
    if body.gallery is not None:
        await replace_gallery(session, room, body.gallery)
    logger.info(f"Updated room {room.id}: {sorted(changes)}")
    return room


async def delete_room(session: AsyncSession, room: Room) -> None:
    await session.execute(delete(RoomGallery).where(col(RoomGallery.room_id) == room.id))
    await session.delete(room)
    await session.flush()
    await renumber(session, Room)
    logger.info(f"Deleted room {room.id}")


async def add_gallery_image(session: AsyncSession, room: Room, image_url: str) -> RoomGallery | None:
    """Append an image to the room gallery, or return None if it is already there."""
    existing = await session.execute(
        select(RoomGallery)
        .where(col(RoomGallery.room_id) == room.id)
        .where(col(RoomGallery.image_url) == image_url)
        .limit(1)
    )
    if existing.scalar_one_or_none() is not None:
        return None

    count = await session.execute(
        select(func.count()).select_from(RoomGallery).where(col(RoomGallery.room_id) == room.id)
    )
    item = RoomGallery(room_id=room.id, image_url=image_url, order_number=int(count.scalar_one()) + 1)
    session.add(item)
    await session.flush()
    return item


async def remove_gallery_image(session: AsyncSession, room: Room, image_url: str) -> bool:
    result = await session.execute(
        delete(RoomGallery).where(col(RoomGallery.room_id) == room.id).where(col(RoomGallery.image_url) == image_url)
    )
    if not result.rowcount:
        return False
    await renumber(session, RoomGallery, col(RoomGallery.room_id) == room.id)
    return True
