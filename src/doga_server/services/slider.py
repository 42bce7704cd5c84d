import logging
import time

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from doga_server.models.slider import SliderItem
from doga_server.schemas.slider import SliderWriteRequest

logger = logging.getLogger(__name__)


async def list_slides(session: AsyncSession, active_only: bool = False) -> list[SliderItem]:
    query = select(SliderItem)
    if active_only:
        query = query.where(col(SliderItem.active).is_(True))
    result = await session.execute(query.order_by(col(SliderItem.order_number).asc(), col(SliderItem.created_at).asc()))
    return list(result.scalars().all())


async def get_slide(session: AsyncSession, slide_id: str) -> SliderItem | None:
    return await session.get(SliderItem, slide_id)


async def create_slide(session: AsyncSession, body: SliderWriteRequest) -> SliderItem:
    item = body.new_item()
    session.add(item)
    await session.flush()
    logger.info(f"Created slide {item.id}")
    return item


async def update_slide(session: AsyncSession, item: SliderItem, body: SliderWriteRequest) -> SliderItem:
    for column, value in body.column_changes().items():
        setattr(item, column, value)
    item.updated_at = int(time.time())
    await session.flush()
    logger.info(f"Updated slide {item.id}")
    return item


async def delete_slide(session: AsyncSession, item: SliderItem) -> None:
    await session.delete(item)
    await session.flush()
    logger.info(f"Deleted slide {item.id}")
