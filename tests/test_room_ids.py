import pytest

from doga_server.models.rooms import Room
from doga_server.services.room_ids import (
    STATIC_ROOM_IDS,
    InvalidRoomIdError,
    RoomIdResolver,
    map_room_id,
    readable_room_ids,
    room_slug,
    validate_room_id,
)


def _room(room_id: str, room_type: str | None) -> Room:
    return Room(id=room_id, name_tr=room_id, name_en=room_id, type=room_type)


@pytest.mark.parametrize("raw", ["", "   ", "logo.png", "styles.CSS", "photo.jpeg", "manifest.json"])
def test_validate_room_id_rejects(raw: str) -> None:
    with pytest.raises(InvalidRoomIdError):
        validate_room_id(raw)


def test_validate_room_id_strips_whitespace() -> None:
    assert validate_room_id("  suite-room ") == "suite-room"


def test_map_room_id_uses_static_table() -> None:
    assert map_room_id("suite-room") == STATIC_ROOM_IDS["suite-room"]
    assert map_room_id("something-else") == "something-else"


def test_room_slug() -> None:
    assert room_slug("Suite ") == "suite-room"
    assert room_slug(None) is None
    assert room_slug("") is None


def test_readable_room_ids_only_for_unique_types() -> None:
    rooms = [_room("a", "standard"), _room("b", "standard"), _room("c", "suite"), _room("d", None)]
    assert readable_room_ids(rooms) == {"a": "a", "b": "b", "c": "suite-room", "d": "d"}


def test_resolver_starts_stale_until_refreshed() -> None:
    resolver = RoomIdResolver(ttl_seconds=300)
    assert resolver.is_stale()
    resolver._refreshed_at = 0.0
    resolver.ttl_seconds = 10**12
    assert not resolver.is_stale()
    resolver.invalidate()
    assert resolver.is_stale()
