from typing import Any, Callable

from fastapi.testclient import TestClient

from doga_server.services.room_ids import STATIC_ROOM_IDS


def test_inactive_rooms_are_hidden_by_default(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    make_room(nameEN="Open")
    make_room(nameEN="Closed", active=False)

    visible = client.get("/api/public-rooms").json()["data"]
    assert [room["nameEN"] for room in visible] == ["Open"]

    everything = client.get("/api/public-rooms", params={"includeInactive": "true"}).json()["data"]
    assert [room["nameEN"] for room in everything] == ["Open", "Closed"]


def test_language_adds_localized_fields(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    make_room(descriptionTR="Deniz manzaralı", descriptionEN="Sea view", featuresTR=["Balkon"], featuresEN=["Balcony"])

    room = client.get("/api/public-rooms", params={"lang": "en"}).json()["data"][0]
    assert room["name"] == "Sea Room"
    assert room["description"] == "Sea view"
    assert room["features"] == ["Balcony"]
    assert room["nameTR"] == "Deniz Odası"

    turkish = client.get("/api/public-rooms", params={"lang": "tr"}).json()["data"][0]
    assert turkish["name"] == "Deniz Odası"
    assert turkish["features"] == ["Balkon"]


def test_unsupported_language_is_rejected(client: TestClient) -> None:
    response = client.get("/api/public-rooms", params={"lang": "de"})
    assert response.status_code == 400


def test_public_room_by_id(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    room = make_room()
    response = client.get(f"/api/public-rooms/{room['id']}", params={"lang": "en"})
    assert response.status_code == 200
    assert response.json()["data"]["id"] == room["id"]
    assert "no-store" in response.headers["cache-control"]


def test_legacy_slug_falls_back_to_room_type(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    room = make_room(type="standard")
    response = client.get("/api/public-rooms/standard-room")
    assert response.status_code == 200
    assert response.json()["data"]["id"] == room["id"]


def test_unique_type_gives_readable_slug(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    room = make_room(type="family")
    response = client.get("/api/public-rooms/family-room")
    assert response.status_code == 200
    assert response.json()["data"]["id"] == room["id"]


def test_slugs_resolve_to_imported_rooms(admin_client: TestClient) -> None:
    assert admin_client.post("/api/admin/import-rooms").status_code == 200

    for slug in ("standard-room", "triple-room", "suite-room", "apart-room"):
        response = admin_client.get(f"/api/public-rooms/{slug}")
        assert response.json()["data"]["id"] == STATIC_ROOM_IDS[slug]

    stray = admin_client.get("/api/public-rooms/08a00bb0-48fa-4cfc-90e6-f08a53797154")
    assert stray.json()["data"]["id"] == STATIC_ROOM_IDS["standard-room"]


def test_static_asset_names_are_not_room_ids(client: TestClient) -> None:
    response = client.get("/api/public-rooms/favicon.ico")
    assert response.status_code == 400


def test_unknown_public_room_is_not_found(client: TestClient) -> None:
    response = client.get("/api/public-rooms/penthouse-room")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_public_room_does_not_match_on_name(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    make_room(nameTR="Deniz Odası", nameEN="Sea Room")

    response = client.get("/api/public-rooms/a")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Room not found"}
    assert client.get("/api/public-rooms/sea-room").status_code == 404
