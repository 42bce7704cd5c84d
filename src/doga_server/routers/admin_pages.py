"""Back-office HTML pages. Every form posts back and redirects with 303."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from htpy.starlette import HtpyResponse
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import RedirectResponse

from doga_server.dependencies import (
    current_admin,
    get_db_session,
    get_readonly_db_session,
    get_room_id_resolver,
    get_settings,
)
from doga_server.i18n import t
from doga_server.routers.auth import clear_session_cookie, set_session_cookie
from doga_server.routers.pages import page_language
from doga_server.schemas.gallery import GalleryItemWriteRequest
from doga_server.schemas.rooms import RoomWriteRequest
from doga_server.schemas.services import ServiceWriteRequest
from doga_server.schemas.slider import SliderWriteRequest
from doga_server.services import gallery as gallery_service
from doga_server.services import hotel_services
from doga_server.services import room_types as room_type_service
from doga_server.services import rooms as room_service
from doga_server.services import slider as slider_service
from doga_server.services.auth import AdminUser, issue_token, validate_credentials
from doga_server.services.room_ids import RoomIdResolver
from doga_server.services.seed import import_seed_rooms
from doga_server.settings import Settings
from doga_server.views.pages.admin import render_dashboard_page, render_login_page
from doga_server.views.pages.admin_gallery import render_admin_gallery_page, render_gallery_form_page
from doga_server.views.pages.admin_rooms import render_admin_rooms_page, render_room_form_page
from doga_server.views.pages.admin_services import render_admin_services_page, render_service_form_page
from doga_server.views.pages.admin_slider import render_admin_slider_page, render_slider_form_page

router = APIRouter(tags=["admin-pages"])
logger = logging.getLogger(__name__)


def lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


class RoomForm(BaseModel):
    name_tr: str
    name_en: str
    description_tr: str = ""
    description_en: str = ""
    main_image_url: str = ""
    price_tr: str = ""
    price_en: str = ""
    capacity: int = 2
    size: int = 0
    features_tr: str = ""
    features_en: str = ""
    type: str = ""
    room_type_id: str = ""
    order_number: int = 0
    gallery: str = ""
    active: bool = False

    @classmethod
    def as_form(
        cls,
        name_tr: str = Form(...),
        name_en: str = Form(...),
        description_tr: str = Form(""),
        description_en: str = Form(""),
        main_image_url: str = Form(""),
        price_tr: str = Form(""),
        price_en: str = Form(""),
        capacity: int = Form(2),
        size: int = Form(0),
        features_tr: str = Form(""),
        features_en: str = Form(""),
        type: str = Form(""),
        room_type_id: str = Form(""),
        order_number: int = Form(0),
        gallery: str = Form(""),
        active: bool = Form(False),
    ) -> "RoomForm":
        return cls(
            name_tr=name_tr,
            name_en=name_en,
            description_tr=description_tr,
            description_en=description_en,
            main_image_url=main_image_url,
            price_tr=price_tr,
            price_en=price_en,
            capacity=capacity,
            size=size,
            features_tr=features_tr,
            features_en=features_en,
            type=type,
            room_type_id=room_type_id,
            order_number=order_number,
            gallery=gallery,
            active=active,
        )

    def to_request(self) -> RoomWriteRequest:
        data: dict[str, Any] = {
            "name_tr": self.name_tr,
            "name_en": self.name_en,
            "description_tr": self.description_tr,
            "description_en": self.description_en,
            "main_image_url": self.main_image_url,
            "price_tr": self.price_tr,
            "price_en": self.price_en,
            "capacity": self.capacity,
            "size": self.size,
            "features_tr": lines(self.features_tr),
            "features_en": lines(self.features_en),
            "type": self.type.strip() or None,
            "room_type_id": self.room_type_id or None,
            "gallery": lines(self.gallery),
            "active": self.active,
        }
        if self.order_number > 0:
            data["order_number"] = self.order_number
        return RoomWriteRequest.model_validate(data)


class SliderForm(BaseModel):
    title_tr: str = ""
    title_en: str = ""
    subtitle_tr: str = ""
    subtitle_en: str = ""
    description_tr: str = ""
    description_en: str = ""
    image: str = ""
    video_url: str = ""
    button_text_tr: str = ""
    button_text_en: str = ""
    button_url: str = ""
    order: int = 0
    active: bool = False

    @classmethod
    def as_form(
        cls,
        title_tr: str = Form(""),
        title_en: str = Form(""),
        subtitle_tr: str = Form(""),
        subtitle_en: str = Form(""),
        description_tr: str = Form(""),
        description_en: str = Form(""),
        image: str = Form(""),
        video_url: str = Form(""),
        button_text_tr: str = Form(""),
        button_text_en: str = Form(""),
        button_url: str = Form(""),
        order: int = Form(0),
        active: bool = Form(False),
    ) -> "SliderForm":
        return cls(
            title_tr=title_tr,
            title_en=title_en,
            subtitle_tr=subtitle_tr,
            subtitle_en=subtitle_en,
            description_tr=description_tr,
            description_en=description_en,
            image=image,
            video_url=video_url,
            button_text_tr=button_text_tr,
            button_text_en=button_text_en,
            button_url=button_url,
            order=order,
            active=active,
        )

    def to_request(self) -> SliderWriteRequest:
        return SliderWriteRequest.model_validate(self.model_dump())


class ServiceForm(BaseModel):
    title_tr: str
    title_en: str
    description_tr: str = ""
    description_en: str = ""
    image: str = ""
    icon: str = ""
    order: int = 0
    images: str = ""
    active: bool = False

    @classmethod
    def as_form(
        cls,
        title_tr: str = Form(...),
        title_en: str = Form(...),
        description_tr: str = Form(""),
        description_en: str = Form(""),
        image: str = Form(""),
        icon: str = Form(""),
        order: int = Form(0),
        images: str = Form(""),
        active: bool = Form(False),
    ) -> "ServiceForm":
        return cls(
            title_tr=title_tr,
            title_en=title_en,
            description_tr=description_tr,
            description_en=description_en,
            image=image,
            icon=icon,
            order=order,
            images=images,
            active=active,
        )

    def to_request(self) -> ServiceWriteRequest:
        data = self.model_dump(exclude={"order", "images"})
        data["images"] = lines(self.images)
        if self.order > 0:
            data["order"] = self.order
        return ServiceWriteRequest.model_validate(data)


class GalleryForm(BaseModel):
    title_tr: str = ""
    title_en: str = ""
    type: str = "image"
    image_url: str = ""
    video_url: str = ""
    order: int = 0
    active: bool = False

    @classmethod
    def as_form(
        cls,
        title_tr: str = Form(""),
        title_en: str = Form(""),
        type: str = Form("image"),
        image_url: str = Form(""),
        video_url: str = Form(""),
        order: int = Form(0),
        active: bool = Form(False),
    ) -> "GalleryForm":
        return cls(
            title_tr=title_tr,
            title_en=title_en,
            type=type,
            image_url=image_url,
            video_url=video_url,
            order=order,
            active=active,
        )

    def to_request(self) -> GalleryItemWriteRequest:
        data = self.model_dump(exclude={"order"})
        if self.order > 0:
            data["order"] = self.order
        return GalleryItemWriteRequest.model_validate(data)


# Login


@router.get("/{lang}/admin/login", response_model=None)
async def login_page(request: Request, lang: str = Depends(page_language)) -> Any:
    if current_admin(request) is not None:
        return redirect(f"/{lang}/admin")
    return HtpyResponse(render_login_page(lang=lang))


@router.post("/{lang}/admin/login", response_model=None)
async def login_form(
    lang: str = Depends(page_language),
    username: str = Form(""),
    password: str = Form(""),
    settings: Settings = Depends(get_settings),
) -> Any:
    if not validate_credentials(settings, username, password):
        logger.warning(f"Failed admin login for {username}")
        return HtpyResponse(render_login_page(lang=lang, error=t(lang, "invalid_credentials")), status_code=401)

    response = redirect(f"/{lang}/admin")
    set_session_cookie(response, settings, issue_token(settings, username))
    logger.info(f"Admin {username} logged in")
    return response


@router.post("/{lang}/admin/logout", response_model=None)
async def logout_form(lang: str = Depends(page_language), settings: Settings = Depends(get_settings)) -> RedirectResponse:
    response = redirect(f"/{lang}/admin/login")
    clear_session_cookie(response, settings)
    return response


@router.get("/{lang}/admin", response_model=None)
async def dashboard_page(
    request: Request,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    admin: AdminUser | None = current_admin(request)
    counts = {
        "rooms": len(await room_service.list_rooms(session, include_inactive=True)),
        "slider": len(await slider_service.list_slides(session)),
        "services": len(await hotel_services.list_services(session, include_inactive=True)),
        "gallery": len(await gallery_service.list_items(session, include_inactive=True)),
    }
    return HtpyResponse(render_dashboard_page(lang=lang, username=admin.username if admin else "", counts=counts))


@router.post("/{lang}/admin/import-rooms", response_model=None)
async def import_rooms_form(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> RedirectResponse:
    await import_seed_rooms(session)
    resolver.invalidate()
    return redirect(f"/{lang}/admin/rooms")


# Rooms


@router.get("/{lang}/admin/rooms", response_model=None)
async def admin_rooms_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    rooms = await room_service.list_rooms(session, include_inactive=True)
    return HtpyResponse(render_admin_rooms_page(lang=lang, rooms=rooms))


@router.get("/{lang}/admin/rooms/create", response_model=None)
async def create_room_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    room_types = await room_type_service.list_room_types(session, active_only=True)
    return HtpyResponse(render_room_form_page(lang=lang, room=None, gallery=[], room_types=room_types))


@router.get("/{lang}/admin/rooms/{room_id}/edit", response_model=None)
async def edit_room_page(
    room_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    room = await room_service.get_room(session, room_id)
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")
    galleries = await room_service.gallery_urls(session, [room.id])
    room_types = await room_type_service.list_room_types(session)
    return HtpyResponse(
        render_room_form_page(lang=lang, room=room, gallery=galleries.get(room.id, []), room_types=room_types)
    )


@router.post("/{lang}/admin/rooms", response_model=None)
async def create_room_form(
    lang: str = Depends(page_language),
    body: RoomForm = Depends(RoomForm.as_form),
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> RedirectResponse:
    request = body.to_request()
    if not request.name_tr or not request.name_en:
        raise HTTPException(status_code=400, detail="nameTR and nameEN are required")
    room = await room_service.create_room(session, request)
    resolver.invalidate()
    return redirect(f"/{lang}/admin/rooms/{room.id}/edit")


@router.post("/{lang}/admin/rooms/{room_id}", response_model=None)
async def update_room_form(
    room_id: str,
    lang: str = Depends(page_language),
    body: RoomForm = Depends(RoomForm.as_form),
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> RedirectResponse:
    request = body.to_request()
    if not request.name_tr or not request.name_en:
        raise HTTPException(status_code=400, detail="nameTR and nameEN are required")
    room = await room_service.get_room(session, room_id)
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")
    await room_service.update_room(session, room, request)
    resolver.invalidate()
    return redirect(f"/{lang}/admin/rooms/{room.id}/edit")


@router.post("/{lang}/admin/rooms/{room_id}/delete", response_model=None)
async def delete_room_form(
    room_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_db_session),
    resolver: RoomIdResolver = Depends(get_room_id_resolver),
) -> RedirectResponse:
    room = await room_service.get_room(session, room_id)
    if room is not None:
        await room_service.delete_room(session, room)
        resolver.invalidate()
    return redirect(f"/{lang}/admin/rooms")


# Slider


@router.get("/{lang}/admin/slider", response_model=None)
async def admin_slider_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    slides = await slider_service.list_slides(session)
    return HtpyResponse(render_admin_slider_page(lang=lang, slides=slides))


@router.get("/{lang}/admin/slider/create", response_model=None)
async def create_slide_page(lang: str = Depends(page_language)) -> HtpyResponse:
    return HtpyResponse(render_slider_form_page(lang=lang, item=None))


@router.get("/{lang}/admin/slider/{slide_id}/edit", response_model=None)
async def edit_slide_page(
    slide_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    item = await slider_service.get_slide(session, slide_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Slider item not found")
    return HtpyResponse(render_slider_form_page(lang=lang, item=item))


@router.post("/{lang}/admin/slider", response_model=None)
async def create_slide_form(
    lang: str = Depends(page_language),
    body: SliderForm = Depends(SliderForm.as_form),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    request = body.to_request()
    if not request.has_required_fields():
        raise HTTPException(status_code=400, detail="A title (TR or EN) and an image are required")
    await slider_service.create_slide(session, request)
    return redirect(f"/{lang}/admin/slider")


@router.post("/{lang}/admin/slider/{slide_id}", response_model=None)
async def update_slide_form(
    slide_id: str,
    lang: str = Depends(page_language),
    body: SliderForm = Depends(SliderForm.as_form),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    item = await slider_service.get_slide(session, slide_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Slider item not found")
    await slider_service.update_slide(session, item, body.to_request())
    return redirect(f"/{lang}/admin/slider/{item.id}/edit")


@router.post("/{lang}/admin/slider/{slide_id}/delete", response_model=None)
async def delete_slide_form(
    slide_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    item = await slider_service.get_slide(session, slide_id)
    if item is not None:
        await slider_service.delete_slide(session, item)
    return redirect(f"/{lang}/admin/slider")


# Services


@router.get("/{lang}/admin/services", response_model=None)
async def admin_services_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    services = await hotel_services.list_services(session, include_inactive=True)
    return HtpyResponse(render_admin_services_page(lang=lang, services=services))


@router.get("/{lang}/admin/services/create", response_model=None)
async def create_service_page(lang: str = Depends(page_language)) -> HtpyResponse:
    return HtpyResponse(render_service_form_page(lang=lang, service=None, images=[]))


@router.get("/{lang}/admin/services/{service_id}/edit", response_model=None)
async def edit_service_page(
    service_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    service = await hotel_services.get_service(session, service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    galleries = await hotel_services.gallery_urls(session, [service.id])
    return HtpyResponse(render_service_form_page(lang=lang, service=service, images=galleries.get(service.id, [])))


@router.post("/{lang}/admin/services", response_model=None)
async def create_service_form(
    lang: str = Depends(page_language),
    body: ServiceForm = Depends(ServiceForm.as_form),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    request = body.to_request()
    if not request.title_tr or not request.title_en:
        raise HTTPException(status_code=400, detail="titleTR and titleEN are required")
    service = await hotel_services.create_service(session, request)
    return redirect(f"/{lang}/admin/services/{service.id}/edit")


@router.post("/{lang}/admin/services/{service_id}", response_model=None)
async def update_service_form(
    service_id: str,
    lang: str = Depends(page_language),
    body: ServiceForm = Depends(ServiceForm.as_form),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    request = body.to_request()
    if not request.title_tr or not request.title_en:
        raise HTTPException(status_code=400, detail="titleTR and titleEN are required")
    service = await hotel_services.get_service(session, service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    await hotel_services.update_service(session, service, request)
    return redirect(f"/{lang}/admin/services/{service.id}/edit")


@router.post("/{lang}/admin/services/{service_id}/delete", response_model=None)
async def delete_service_form(
    service_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    service = await hotel_services.get_service(session, service_id)
    if service is not None:
        await hotel_services.delete_service(session, service)
    return redirect(f"/{lang}/admin/services")


# Gallery


@router.get("/{lang}/admin/gallery", response_model=None)
async def admin_gallery_page(
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    items = await gallery_service.list_items(session, include_inactive=True)
    return HtpyResponse(render_admin_gallery_page(lang=lang, items=items))


@router.get("/{lang}/admin/gallery/create", response_model=None)
async def create_gallery_item_page(lang: str = Depends(page_language)) -> HtpyResponse:
    return HtpyResponse(render_gallery_form_page(lang=lang, item=None))


@router.get("/{lang}/admin/gallery/{item_id}/edit", response_model=None)
async def edit_gallery_item_page(
    item_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> HtpyResponse:
    item = await gallery_service.get_item(session, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Gallery item not found")
    return HtpyResponse(render_gallery_form_page(lang=lang, item=item))


@router.post("/{lang}/admin/gallery", response_model=None)
async def create_gallery_item_form(
    lang: str = Depends(page_language),
    body: GalleryForm = Depends(GalleryForm.as_form),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    await gallery_service.create_item(session, body.to_request())
    return redirect(f"/{lang}/admin/gallery")


@router.post("/{lang}/admin/gallery/{item_id}", response_model=None)
async def update_gallery_item_form(
    item_id: str,
    lang: str = Depends(page_language),
    body: GalleryForm = Depends(GalleryForm.as_form),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    item = await gallery_service.get_item(session, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Gallery item not found")
    await gallery_service.update_item(session, item, body.to_request())
    return redirect(f"/{lang}/admin/gallery/{item.id}/edit")


@router.post("/{lang}/admin/gallery/{item_id}/delete", response_model=None)
async def delete_gallery_item_form(
    item_id: str,
    lang: str = Depends(page_language),
    session: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    item = await gallery_service.get_item(session, item_id)
    if item is not None:
        await gallery_service.delete_item(session, item)
    return redirect(f"/{lang}/admin/gallery")
