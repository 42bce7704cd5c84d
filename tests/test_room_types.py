from typing import Any, Callable

from fastapi.testclient import TestClient


def test_room_type_lifecycle(admin_client: TestClient) -> None:
    created = admin_client.post("/api/admin/room-types", json={"nameTR": "Aile Odası", "nameEN": "Family Room"})
    assert created.status_code == 200
    room_type = created.json()["data"]
    assert room_type["active"] is True

    toggled = admin_client.post(f"/api/admin/room-types/{room_type['id']}/toggle").json()["data"]
    assert toggled["active"] is False

    updated = admin_client.put(f"/api/admin/room-types/{room_type['id']}", json={"nameEN": "Family"}).json()["data"]
    assert updated["nameEN"] == "Family"
    assert updated["nameTR"] == "Aile Odası"
    assert updated["active"] is False

    listed = admin_client.get("/api/admin/room-types").json()["data"]
    assert [item["id"] for item in listed] == [room_type["id"]]


def test_room_type_requires_names(admin_client: TestClient) -> None:
    assert admin_client.post("/api/admin/room-types", json={"nameTR": "Aile"}).status_code == 400


def test_deleting_room_type_detaches_rooms(
    admin_client: TestClient, make_room: Callable[..., dict[str, Any]]
) -> None:
    room_type = admin_client.post("/api/admin/room-types", json={"nameTR": "Suit", "nameEN": "Suite"}).json()["data"]
    room = make_room(roomTypeId=room_type["id"])
    assert room["roomTypeId"] == room_type["id"]

    assert admin_client.delete(f"/api/admin/room-types/{room_type['id']}").status_code == 200
    assert admin_client.get(f"/api/admin/room-types/{room_type['id']}").status_code == 404
    assert admin_client.get(f"/api/rooms/{room['id']}").json()["data"]["roomTypeId"] is None
