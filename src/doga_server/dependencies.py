from collections.abc import AsyncIterator
from typing import Protocol, cast

from fastapi import HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.services.auth import AdminUser, verify_token
from doga_server.services.room_ids import RoomIdResolver
from doga_server.services.storage import ObjectStorage
from doga_server.settings import Settings


class HasStorage(Protocol):
    storage: ObjectStorage


class HasSettings(Protocol):
    settings: Settings


class HasRoomIds(Protocol):
    room_ids: RoomIdResolver


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.get_db_session() as session:
        yield session


async def get_readonly_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.get_db_session(read_only=True) as session:
        yield session


def get_settings(request: Request) -> Settings:
    state = cast(HasSettings, request.app.state)
    return getattr(state, "settings", Settings())


def get_storage(request: Request) -> ObjectStorage:
    state = cast(HasStorage, request.app.state)
    return state.storage


def get_room_id_resolver(request: Request) -> RoomIdResolver:
    state = cast(HasRoomIds, request.app.state)
    return state.room_ids


def current_admin(request: Request) -> AdminUser | None:
    settings = get_settings(request)
    return verify_token(settings, request.cookies.get(settings.session_cookie_name))


def require_admin(request: Request) -> AdminUser:
    admin = current_admin(request)
    if admin is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return admin
