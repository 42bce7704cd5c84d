import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_db_session, get_readonly_db_session
from doga_server.models.services import Service
from doga_server.routers.public_rooms import requested_language
from doga_server.schemas.envelope import NO_CACHE_HEADERS, ok
from doga_server.schemas.services import (
    ServiceGalleryAddRequest,
    ServiceGalleryReplaceRequest,
    ServiceGalleryRow,
    ServiceResponse,
    ServiceWriteRequest,
)
from doga_server.services import hotel_services

router = APIRouter(tags=["services"])
logger = logging.getLogger(__name__)


async def load_service(session: AsyncSession, service_id: str) -> Service:
    service = await hotel_services.get_service(session, service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


async def service_payload(session: AsyncSession, service: Service, lang: str | None = None) -> dict[str, Any]:
    galleries = await hotel_services.gallery_urls(session, [service.id])
    return ServiceResponse.from_service(service, galleries.get(service.id, []), lang).dump()


async def service_payloads(session: AsyncSession, services: list[Service], lang: str | None = None) -> list[dict[str, Any]]:
    galleries = await hotel_services.gallery_urls(session, [service.id for service in services])
    return [ServiceResponse.from_service(service, galleries.get(service.id, []), lang).dump() for service in services]


@router.get("/api/services")
async def list_public_services(
    lang: str | None = None,
    session: AsyncSession = Depends(get_readonly_db_session),
) -> JSONResponse:
    services = await hotel_services.list_services(session)
    data = await service_payloads(session, services, requested_language(lang))
    return JSONResponse(content=ok(data), headers=NO_CACHE_HEADERS)


@router.get("/api/services/{service_id}")
async def get_public_service(
    service_id: str,
    lang: str | None = None,
    session: AsyncSession = Depends(get_readonly_db_session),
) -> JSONResponse:
    service = await load_service(session, service_id)
    if not service.active:
        raise HTTPException(status_code=404, detail="Service not found")
    data = await service_payload(session, service, requested_language(lang))
    return JSONResponse(content=ok(data), headers=NO_CACHE_HEADERS)


@router.get("/api/admin/services")
async def list_services(session: AsyncSession = Depends(get_readonly_db_session)) -> dict[str, Any]:
    services = await hotel_services.list_services(session, include_inactive=True)
    return ok(await service_payloads(session, services))


@router.post("/api/admin/services")
async def create_service(body: ServiceWriteRequest, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    if not body.title_tr or not body.title_en:
        raise HTTPException(status_code=400, detail="titleTR and titleEN are required")

    service = await hotel_services.create_service(session, body)
    return ok(await service_payload(session, service), "Service created")


@router.get("/api/admin/services/{service_id}")
async def get_service(service_id: str, session: AsyncSession = Depends(get_readonly_db_session)) -> dict[str, Any]:
    service = await load_service(session, service_id)
    return ok(await service_payload(session, service))


@router.put("/api/admin/services/{service_id}")
async def update_service(
    service_id: str,
    body: ServiceWriteRequest,
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, Any]:
    service = await load_service(session, service_id)
    service = await hotel_services.update_service(session, service, body)
    return ok(await service_payload(session, service), "Service updated")


@router.delete("/api/admin/services/{service_id}")
async def delete_service(service_id: str, session: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    service = await load_service(session, service_id)
    await hotel_services.delete_service(session, service)
    return ok(message="Service deleted")


@router.get("/api/admin/services/{service_id}/gallery")
async def get_service_gallery(
    service_id: str,
    session: AsyncSession = Depends(get_readonly_db_session),
) -> list[dict[str, Any]]:
    service = await load_service(session, service_id)
    rows = await hotel_services.gallery_rows(session, service.id)
    return [ServiceGalleryRow.from_row(row).dump() for row in rows]


@router.post("/api/admin/services/{service_id}/gallery", status_code=201)
async def add_service_gallery_image(
    service_id: str,
    body: ServiceGalleryAddRequest,
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, Any]:
    if not body.image_url:
        raise HTTPException(status_code=400, detail="imageUrl is required")

    service = await load_service(session, service_id)
    row = await hotel_services.add_gallery_image(session, service, body.image_url, body.order)
    return ServiceGalleryRow.from_row(row).dump()


@router.delete("/api/admin/services/{service_id}/gallery")
async def remove_service_gallery_image(
    service_id: str,
    image_id: str | None = Query(default=None, alias="imageId"),
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, Any]:
    if not image_id:
        raise HTTPException(status_code=400, detail="imageId is required")

    service = await load_service(session, service_id)
    if not await hotel_services.remove_gallery_image(session, service, image_id):
        raise HTTPException(status_code=404, detail="Gallery image not found")
    return ok(message="Gallery image deleted")


@router.put("/api/admin/services/{service_id}/gallery")
async def replace_service_gallery(
    service_id: str,
    body: ServiceGalleryReplaceRequest,
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, Any]:
    urls = body.valid_images()
    service = await load_service(session, service_id)
    rows = await hotel_services.set_gallery(session, service, urls, body.main_image())
    return ok(
        {"mainImageUrl": service.main_image_url, "images": [ServiceGalleryRow.from_row(row).dump() for row in rows]},
        "Service gallery updated",
    )
