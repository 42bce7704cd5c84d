import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from htpy.starlette import HtpyResponse
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.dependencies import get_readonly_db_session, get_room_id_resolver
from doga_server.i18n import SUPPORTED_LANGUAGES, t
from doga_server.models.rooms import Room
from doga_server.services import gallery as gallery_service
from doga_server.services import hotel_services
from doga_server.services import rooms as room_service
from doga_server.services import slider as slider_service
from doga_server.services.room_ids import InvalidRoomIdError, RoomIdResolver, readable_room_ids
from doga_server.views.pages.error import render_error_page
from doga_server.views.pages.gallery import render_gallery_page
from doga_server.views.pages.home import render_home_page
from doga_server.views.pages.rooms import render_room_detail_page, render_rooms_page
from doga_server.views.pages.services import render_service_detail_page, render_services_page

router = APIRouter(tags=["pages"])
logger = logging.getLogger(__name__)

FEATURED_ROOMS = 4


def page_language(lang: str) -> str:
    if lang not in SUPPORTED_LANGUAGES:
        raise HTTPException(status_code=404, detail="Page not found")
    return lang


def room_hrefs(lang: str, rooms: list[Room]) -> dict[str, str]:
    return {room_id: f"/{lang}/rooms/{slug}" for room_id, slug in readable_room_ids(rooms).items()}


def matches_query(room: Room, query: str) -> bool:
    needle = query.casefold()
    haystack = (room.name_tr, room.name_en, room.description_tr, room.description_en, room.type or "")
    return any(needle in text.casefold() for text in haystack)


@router.get("/{lang}", response_model=None)
async def home_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    slides = await slider_service.list_slides(session, active_only=True)
    rooms = await room_service.list_rooms(session)
    services = await hotel_services.list_services(session)
    return HtpyResponse(
        render_home_page(
            lang=lang,
            slides=slides,
            rooms=rooms[:FEATURED_ROOMS],
            services=services,
            room_hrefs=room_hrefs(lang, rooms),
        )
    )


@router.get("/{lang}/rooms", response_model=None)
async def rooms_page(
    type: str | None = None,
    q: str = "",
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    rooms = await room_service.list_rooms(session)
    room_types = sorted({room.type for room in rooms if room.type})
    hrefs = room_hrefs(lang, rooms)

    selected = [room for room in rooms if not type or room.type == type]
    if q.strip():
        selected = [room for room in selected if matches_query(room, q.strip())]

    return HtpyResponse(
        render_rooms_page(
            lang=lang,
            rooms=selected,
            room_types=room_types,
            room_hrefs=hrefs,
            selected_type=type or None,
            query=q,
        )
    )


@router.get("/{lang}/rooms/{room_id}", response_model=None)
async def room_detail_page(
    request: Request,
    room_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> HtpyResponse:
    try:
        room = await resolver.resolve(session, room_id, fuzzy=True)
    except InvalidRoomIdError:
        logger.warning(f"Invalid room id requested: {room_id}")
        return HtpyResponse(
            render_error_page(lang=lang, status_code=400, heading=t(lang, "invalid_room_id")),
            status_code=400,
        )

    if room is None or not room.active:
        return HtpyResponse(
            render_error_page(
                lang=lang,
                status_code=404,
                heading=t(lang, "room_not_found"),
                message=t(lang, "room_not_found_text"),
            ),
            status_code=404,
        )

    galleries = await room_service.gallery_urls(session, [room.id])
    return HtpyResponse(
        render_room_detail_page(
            lang=lang,
            room=room,
            gallery=galleries.get(room.id, []),
            path=request.url.path.removeprefix(f"/{lang}"),
        )
    )


@router.get("/{lang}/services", response_model=None)
async def services_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    services = await hotel_services.list_services(session)
    return HtpyResponse(render_services_page(lang=lang, services=services))


@router.get("/{lang}/services/{service_id}", response_model=None)
async def service_detail_page(
    service_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    service = await hotel_services.get_service(session, service_id)
    if service is None or not service.active:
        return HtpyResponse(
            render_error_page(lang=lang, status_code=404, heading=t(lang, "service_not_found")),
            status_code=404,
        )
    galleries = await hotel_services.gallery_urls(session, [service.id])
    return HtpyResponse(render_service_detail_page(lang=lang, service=service, images=galleries.get(service.id, [])))


@router.get("/{lang}/gallery", response_model=None)
async def gallery_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    items = await gallery_service.list_items(session)
    return HtpyResponse(render_gallery_page(lang=lang, items=items))
