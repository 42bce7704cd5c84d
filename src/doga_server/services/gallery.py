import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from doga_server.models.gallery import MEDIA_TYPES, GalleryItem
from doga_server.schemas.gallery import GalleryItemWriteRequest
from doga_server.services.ordering import next_order_number, renumber

logger = logging.getLogger(__name__)


def check_media(item: GalleryItem) -> None:
    if item.media_type not in MEDIA_TYPES:
        raise ValueError(f"Unknown media type: {item.media_type}")
    if item.media_type == "image" and not item.image_url:
        raise ValueError("Image items need an imageUrl")
    if item.media_type == "video" and not item.video_url:
        raise ValueError("Video items need a videoUrl")


async def list_items(
    session: AsyncSession, media_type: str | None = None, include_inactive: bool = False
) -> list[GalleryItem]:
    query = select(GalleryItem)
    if not include_inactive:
        query = query.where(col(GalleryItem.active).is_(True))
    if media_type:
        query = query.where(col(GalleryItem.media_type) == media_type)
    result = await session.execute(query.order_by(col(GalleryItem.order_number).asc(), col(GalleryItem.created_at).asc()))
    return list(result.scalars().all())


async def get_item(session: AsyncSession, item_id: str) -> GalleryItem | None:
    return await session.get(GalleryItem, item_id)


async def create_item(session: AsyncSession, body: GalleryItemWriteRequest) -> GalleryItem:
    changes = body.column_changes()
    if "order_number" not in changes:
        changes["order_number"] = await next_order_number(session, GalleryItem)
    item = GalleryItem(**changes)
    check_media(item)
    session.add(item)
    await session.flush()
    logger.info(f"Created {item.media_type} gallery item {item.id}")
    return item


async def update_item(session: AsyncSession, item: GalleryItem, body: GalleryItemWriteRequest) -> GalleryItem:
    for column, value in body.column_changes().items():
        setattr(item, column, value)
    check_media(item)
    await session.flush()
    logger.info(f"Updated gallery item {item.id}")
    return item


async def delete_item(session: AsyncSession, item: GalleryItem) -> None:
    await session.delete(item)
    await session.flush()
    await renumber(session, GalleryItem)
    logger.info(f"Deleted gallery item {item.id}")
