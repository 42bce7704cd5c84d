"""Queries behind the hotel services pages and their galleries."""

import logging
import time
from collections import defaultdict

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from doga_server.models.services import Service, ServiceGallery
from doga_server.schemas.services import ServiceWriteRequest
from doga_server.services.ordering import next_order_number, renumber

logger = logging.getLogger(__name__)


async def list_services(session: AsyncSession, include_inactive: bool = False) -> list[Service]:
    query = select(Service)
    if not include_inactive:
        query = query.where(col(Service.active).is_(True))
    result = await session.execute(query.order_by(col(Service.order_number).asc(), col(Service.created_at).asc()))
    return list(result.scalars().all())


async def get_service(session: AsyncSession, service_id: str) -> Service | None:
    return await session.get(Service, service_id.strip())


async def gallery_rows(session: AsyncSession, service_id: str) -> list[ServiceGallery]:
    result = await session.execute(
        select(ServiceGallery)
        .where(col(ServiceGallery.service_id) == service_id)
        .order_by(col(ServiceGallery.order_number).asc(), col(ServiceGallery.created_at).asc())
    )
    return list(result.scalars().all())


async def gallery_urls(session: AsyncSession, service_ids: list[str]) -> dict[str, list[str]]:
    if not service_ids:
        return {}
    result = await session.execute(
        select(ServiceGallery)
        .where(col(ServiceGallery.service_id).in_(service_ids))
        .order_by(col(ServiceGallery.service_id), col(ServiceGallery.order_number).asc())
    )
    galleries: dict[str, list[str]] = defaultdict(list)
    for row in result.scalars().all():
        galleries[row.service_id].append(row.image_url)
    return galleries


async def replace_gallery(session: AsyncSession, service: Service, urls: list[str]) -> list[ServiceGallery]:
    await session.execute(delete(ServiceGallery).where(col(ServiceGallery.service_id) == service.id))
    rows = [ServiceGallery(service_id=service.id, image_url=url, order_number=position) for position, url in enumerate(urls, start=1)]
    session.add_all(rows)
    await session.flush()
    return rows


async def create_service(session: AsyncSession, body: ServiceWriteRequest) -> Service:
    changes = body.column_changes()
    if "order_number" not in changes:
        changes["order_number"] = await next_order_number(session, Service)
    service = Service(**changes)
    session.add(service)
    await session.flush()
    if body.images is not None:
        await replace_gallery(session, service, body.images)
    logger.info(f"Created service {service.id} ({service.title_tr})")
    return service


async def update_service(session: AsyncSession, service: Service, body: ServiceWriteRequest) -> Service:
    for column, value in body.column_changes().items():
        setattr(service, column, value)
    service.updated_at = int(time.time())
    await session.flush()
    if body.images is not None:
        await replace_gallery(session, service, body.images)
    logger.info(f"Updated service {service.id}")
    return service


async def delete_service(session: AsyncSession, service: Service) -> None:
    await session.execute(delete(ServiceGallery).where(col(ServiceGallery.service_id) == service.id))
    await session.delete(service)
    await session.flush()
    await renumber(session, Service)
    logger.info(f"Deleted service {service.id}")


async def add_gallery_image(
    session: AsyncSession, service: Service, image_url: str, order: int | None = None
) -> ServiceGallery:
    if not order:
        order = await next_order_number(session, ServiceGallery, col(ServiceGallery.service_id) == service.id)
    row = ServiceGallery(service_id=service.id, image_url=image_url, order_number=order)
    session.add(row)
    await session.flush()
    return row


async def remove_gallery_image(session: AsyncSession, service: Service, image_id: str) -> bool:
    row = await session.get(ServiceGallery, image_id)
    if row is None or row.service_id != service.id:
        return False
    await session.delete(row)
    await session.flush()
    await renumber(session, ServiceGallery, col(ServiceGallery.service_id) == service.id)
    return True


async def set_gallery(
    session: AsyncSession, service: Service, urls: list[str], main_image: str | None = None
) -> list[ServiceGallery]:
    """Replace the gallery and set the main image, defaulting to the first image."""
    service.main_image_url = main_image or urls[0]
    service.updated_at = int(time.time())
    rows = await replace_gallery(session, service, urls)
    logger.info(f"Replaced gallery of service {service.id} with {len(rows)} images")
    return rows
