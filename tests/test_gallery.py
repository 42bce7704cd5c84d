from typing import Any

from fastapi.testclient import TestClient


def _create_item(client: TestClient, **fields: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"titleTR": "Plaj", "titleEN": "Beach", "type": "image", "imageUrl": "https://media.test/beach.jpg"}
    body.update(fields)
    response = client.post("/api/admin/gallery", json=body)
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_public_gallery_filters_by_type(admin_client: TestClient) -> None:
    _create_item(admin_client, titleEN="Beach")
    _create_item(admin_client, titleEN="Drone", type="video", imageUrl="", videoUrl="https://media.test/drone.mp4")
    _create_item(admin_client, titleEN="Old", active=False)

    everything = admin_client.get("/api/gallery").json()["data"]
    assert [item["titleEN"] for item in everything] == ["Beach", "Drone"]

    videos = admin_client.get("/api/gallery", params={"type": "video"}).json()["data"]
    assert [item["titleEN"] for item in videos] == ["Drone"]
    assert videos[0]["videoUrl"] == "https://media.test/drone.mp4"


def test_public_gallery_rejects_unknown_type(client: TestClient) -> None:
    response = client.get("/api/gallery", params={"type": "audio"})
    assert response.status_code == 400


def test_create_item_validates_media(admin_client: TestClient) -> None:
    bad_type = admin_client.post("/api/admin/gallery", json={"type": "audio", "imageUrl": "https://media.test/a.jpg"})
    assert bad_type.status_code == 400

    no_video = admin_client.post("/api/admin/gallery", json={"type": "video"})
    assert no_video.status_code == 400
    assert no_video.json()["message"] == "Video items need a videoUrl"


def test_update_item(admin_client: TestClient) -> None:
    item = _create_item(admin_client)
    response = admin_client.put(f"/api/admin/gallery/{item['id']}", json={"titleEN": "Sunset", "active": False})
    assert response.status_code == 200
    assert response.json()["data"]["titleEN"] == "Sunset"
    assert response.json()["data"]["titleTR"] == "Plaj"
    assert admin_client.get("/api/gallery").json()["data"] == []


def test_delete_item_renumbers(admin_client: TestClient) -> None:
    first = _create_item(admin_client, titleEN="One")
    _create_item(admin_client, titleEN="Two")

    assert admin_client.delete(f"/api/admin/gallery/{first['id']}").status_code == 200
    items = admin_client.get("/api/admin/gallery").json()["data"]
    assert [(item["titleEN"], item["order"]) for item in items] == [("Two", 1)]
    assert admin_client.get(f"/api/admin/gallery/{first['id']}").status_code == 404
