from typing import Any, Callable

from fastapi.testclient import TestClient


def test_create_room_requires_admin(client: TestClient) -> None:
    response = client.post("/api/rooms", json={"nameTR": "Oda", "nameEN": "Room"})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_create_room_requires_both_names(admin_client: TestClient) -> None:
    response = admin_client.post("/api/rooms", json={"nameTR": "Oda", "nameEN": "  "})
    assert response.status_code == 400
    assert response.json()["message"] == "nameTR and nameEN are required"


def test_create_room_returns_camel_case_payload(make_room: Callable[..., dict[str, Any]]) -> None:
    room = make_room(
        priceTR="1.500 ₺",
        priceEN="€50",
        featuresTR=["Klima"],
        featuresEN=["Air Conditioning"],
        mainImageUrl="https://media.test/room.jpg",
        gallery=["https://media.test/1.jpg", "https://media.test/2.jpg"],
        type="standard",
    )

    assert room["nameTR"] == "Deniz Odası"
    assert room["nameEN"] == "Sea Room"
    assert room["image"] == "https://media.test/room.jpg"
    assert room["mainImageUrl"] == "https://media.test/room.jpg"
    assert room["featuresEN"] == ["Air Conditioning"]
    assert room["gallery"] == ["https://media.test/1.jpg", "https://media.test/2.jpg"]
    assert room["order"] == 1
    assert room["orderNumber"] == 1
    assert room["active"] is True
    assert "name" not in room


def test_new_rooms_are_appended_in_order(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    first = make_room(nameEN="First")
    second = make_room(nameEN="Second", order=5)
    third = make_room(nameEN="Third")

    assert (first["order"], second["order"], third["order"]) == (1, 5, 6)

    response = client.get("/api/rooms")
    assert response.status_code == 200
    assert "no-store" in response.headers["cache-control"]
    names = [room["nameEN"] for room in response.json()["data"]]
    assert names == ["First", "Second", "Third"]


def test_update_room_only_changes_sent_fields(
    admin_client: TestClient, make_room: Callable[..., dict[str, Any]]
) -> None:
    room = make_room(priceEN="€50", type="standard")

    response = admin_client.put(f"/api/rooms/{room['id']}", json={"priceEN": "€60", "active": False})
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["priceEN"] == "€60"
    assert updated["active"] is False
    assert updated["nameEN"] == "Sea Room"
    assert updated["type"] == "standard"


def test_update_room_can_clear_type(admin_client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    room = make_room(type="suite")
    response = admin_client.put(f"/api/rooms/{room['id']}", json={"type": None})
    assert response.json()["data"]["type"] is None


def test_delete_room_renumbers_remaining(admin_client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    first = make_room(nameEN="First")
    make_room(nameEN="Second")
    make_room(nameEN="Third")

    response = admin_client.delete(f"/api/rooms/{first['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Room deleted"}

    rooms = admin_client.get("/api/rooms").json()["data"]
    assert [(room["nameEN"], room["order"]) for room in rooms] == [("Second", 1), ("Third", 2)]
    assert admin_client.get(f"/api/rooms/{first['id']}").status_code == 404


def test_get_room_rejects_static_file_names(client: TestClient) -> None:
    response = client.get("/api/rooms/logo.png")
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_get_unknown_room_is_not_found(client: TestClient) -> None:
    response = client.get("/api/rooms/7f9d6a42-0000-4000-8000-000000000000")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Room not found"}


def test_invalid_capacity_is_a_bad_request(admin_client: TestClient) -> None:
    response = admin_client.post("/api/rooms", json={"nameTR": "Oda", "nameEN": "Room", "capacity": 0})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"]
