"""Legacy room id remapping.

Room pages used to be addressed by slugs such as ``standard-room``. Those
links still circulate, so a requested id is resolved through a static map of
known slugs, then a map derived from the current rooms, then a few fallback
lookups before giving up.
"""

import logging
import re
import time
from collections import Counter

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from doga_server.models.rooms import Room

logger = logging.getLogger(__name__)

STATIC_ROOM_IDS: dict[str, str] = {
    "standard-room": "43c7e499-ba30-40a9-a010-79902cd38558",
    "triple-room": "d50b9afd-9964-4fe0-8f5c-70bcf19beb76",
    "suite-room": "448a5110-8ffa-4059-8264-6e171f919ff1",
    "apart-room": "73c5fbe8-0b05-4c21-8374-09bbd5fee920",
    # Stray id that was published for the standard room
    "08a00bb0-48fa-4cfc-90e6-f08a53797154": "43c7e499-ba30-40a9-a010-79902cd38558",
}

STATIC_ASSET_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif|svg|webp|css|js|ico|woff|woff2|ttf|json|xml)$", re.IGNORECASE)
SLUG_SUFFIX = "-room"


class InvalidRoomIdError(ValueError):
    """Raised for ids that can never name a room."""


def map_room_id(room_id: str) -> str:
    return STATIC_ROOM_IDS.get(room_id, room_id)


def validate_room_id(room_id: str) -> str:
    room_id = room_id.strip()
    if not room_id:
        raise InvalidRoomIdError("Invalid room id")
    if STATIC_ASSET_PATTERN.search(room_id):
        raise InvalidRoomIdError("Invalid room id: looks like a static file")
    return room_id


def room_slug(room_type: str | None) -> str | None:
    if not room_type:
        return None
    return f"{room_type.strip().lower()}{SLUG_SUFFIX}"


def readable_room_ids(rooms: list[Room]) -> dict[str, str]:
    """Map room id to its public slug when the slug is unambiguous."""
    counts = Counter(room_slug(room.type) for room in rooms)
    readable: dict[str, str] = {}
    for room in rooms:
        slug = room_slug(room.type)
        readable[room.id] = slug if slug and counts[slug] == 1 else room.id
    return readable


class RoomIdResolver:
    def __init__(self, ttl_seconds: int = 300) -> None:
        self.ttl_seconds = ttl_seconds
        self._dynamic_ids: dict[str, str] = {}
        self._refreshed_at: float | None = None

    def invalidate(self) -> None:
        self._refreshed_at = None

    def is_stale(self) -> bool:
        if self._refreshed_at is None:
            return True
        return time.monotonic() - self._refreshed_at > self.ttl_seconds

    async def dynamic_ids(self, session: AsyncSession) -> dict[str, str]:
        if self.is_stale():
            result = await session.execute(select(Room).order_by(col(Room.order_number).asc()))
            rooms = list(result.scalars().all())
            self._dynamic_ids = {slug: room_id for room_id, slug in readable_room_ids(rooms).items() if slug != room_id}
            self._refreshed_at = time.monotonic()
            logger.info(f"Refreshed dynamic room id map with {len(self._dynamic_ids)} slugs")
        return self._dynamic_ids

    async def map_id(self, session: AsyncSession, room_id: str) -> str:
        if room_id in STATIC_ROOM_IDS:
            return STATIC_ROOM_IDS[room_id]
        dynamic_ids = await self.dynamic_ids(session)
        return dynamic_ids.get(room_id, room_id)

    async def resolve(self, session: AsyncSession, raw_id: str, *, fuzzy: bool = False) -> Room | None:
        """Find the room behind a requested id.

        With ``fuzzy`` set, a room whose name contains the slug stem also
        matches; the HTML detail page uses this for hand-typed links.
        """
        original_id = validate_room_id(raw_id)
        mapped_id = await self.map_id(session, original_id)

        room = await session.get(Room, mapped_id)
        if room is not None:
            return room

        if mapped_id != original_id:
            room = await session.get(Room, original_id)
            if room is not None:
                return room

        # The static map may point at ids from another database; match on type instead.
        stem = original_id.lower().removesuffix(SLUG_SUFFIX)
        result = await session.execute(select(Room).order_by(col(Room.order_number).asc()))
        candidates = list(result.scalars().all())
        for candidate in candidates:
            if candidate.type and candidate.type.strip().lower() == stem:
                return candidate

        if fuzzy and stem:
            for candidate in candidates:
                if stem in candidate.name_tr.lower() or stem in candidate.name_en.lower():
                    return candidate

        logger.info(f"No room matches id {original_id} (mapped to {mapped_id})")
        return None
