from typing import Any, Callable

from fastapi.testclient import TestClient


def test_replace_gallery_sets_images_and_main_image(
    admin_client: TestClient, make_room: Callable[..., dict[str, Any]]
) -> None:
    room = make_room()

    response = admin_client.put(
        f"/api/rooms/gallery/{room['id']}",
        json={"mainImageUrl": "https://media.test/main.jpg", "gallery": ["https://media.test/a.jpg", "https://media.test/b.jpg"]},
    )
    assert response.status_code == 200

    gallery = admin_client.get(f"/api/rooms/gallery/{room['id']}").json()["data"]
    assert gallery == {
        "mainImage": "https://media.test/main.jpg",
        "gallery": ["https://media.test/a.jpg", "https://media.test/b.jpg"],
    }


def test_replace_gallery_accepts_image_objects(
    admin_client: TestClient, make_room: Callable[..., dict[str, Any]]
) -> None:
    room = make_room()
    response = admin_client.put(
        f"/api/rooms/gallery/{room['id']}",
        json={"gallery": [{"imageUrl": "https://media.test/a.jpg"}, "https://media.test/b.jpg"]},
    )
    assert response.json()["data"]["gallery"] == ["https://media.test/a.jpg", "https://media.test/b.jpg"]


def test_add_gallery_image_appends_and_skips_duplicates(
    admin_client: TestClient, make_room: Callable[..., dict[str, Any]]
) -> None:
    room = make_room(gallery=["https://media.test/a.jpg"])

    added = admin_client.post(f"/api/rooms/gallery/{room['id']}", json={"imagePath": "https://media.test/b.jpg"})
    assert added.status_code == 200
    assert added.json()["data"]["order"] == 2

    duplicate = admin_client.post(f"/api/rooms/gallery/{room['id']}", json={"imagePath": "https://media.test/b.jpg"})
    assert duplicate.status_code == 200
    assert duplicate.json()["success"] is False

    gallery = admin_client.get(f"/api/rooms/gallery/{room['id']}").json()["data"]["gallery"]
    assert gallery == ["https://media.test/a.jpg", "https://media.test/b.jpg"]


def test_add_gallery_image_requires_path(admin_client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    room = make_room()
    response = admin_client.post(f"/api/rooms/gallery/{room['id']}", json={})
    assert response.status_code == 400


def test_remove_gallery_image_closes_gap(admin_client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    room = make_room(gallery=["https://media.test/a.jpg", "https://media.test/b.jpg", "https://media.test/c.jpg"])

    response = admin_client.delete(
        f"/api/rooms/gallery/{room['id']}", params={"imagePath": "https://media.test/a.jpg"}
    )
    assert response.json()["success"] is True

    missing = admin_client.delete(f"/api/rooms/gallery/{room['id']}", params={"imagePath": "https://media.test/a.jpg"})
    assert missing.json()["success"] is False

    # order numbers were rewritten so the next append lands at the end
    added = admin_client.post(f"/api/rooms/gallery/{room['id']}", json={"imagePath": "https://media.test/d.jpg"})
    assert added.json()["data"]["order"] == 3

    gallery = admin_client.get(f"/api/rooms/gallery/{room['id']}").json()["data"]["gallery"]
    assert gallery == ["https://media.test/b.jpg", "https://media.test/c.jpg", "https://media.test/d.jpg"]


def test_gallery_writes_require_admin(client: TestClient) -> None:
    response = client.put("/api/rooms/gallery/some-room", json={"gallery": []})
    assert response.status_code == 401


def test_gallery_of_unknown_room_is_not_found(client: TestClient) -> None:
    assert client.get("/api/rooms/gallery/no-such-room").status_code == 404
