from typing import Any

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select


async def next_order_number(session: AsyncSession, model: Any, *filters: Any) -> int:
    result = await session.execute(select(func.coalesce(func.max(col(model.order_number)), 0)).where(*filters))
    return int(result.scalar_one()) + 1


async def renumber(session: AsyncSession, model: Any, *filters: Any) -> None:
    """Rewrite order_number as 1..n keeping the current relative order."""
    result = await session.execute(
        select(model).where(*filters).order_by(col(model.order_number).asc(), col(model.created_at).asc())
    )
    for position, row in enumerate(result.scalars().all(), start=1):
        if row.order_number != position:
            row.order_number = position
    await session.flush()
