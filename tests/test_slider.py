from typing import Any

from fastapi.testclient import TestClient

from doga_server.settings import Settings


def _create_slide(client: TestClient, **fields: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"titleTR": "Hoş Geldiniz", "titleEN": "Welcome", "image": "https://media.test/hero.jpg"}
    body.update(fields)
    response = client.post("/api/admin/slider", json=body)
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_create_slide_requires_title_and_image(admin_client: TestClient) -> None:
    no_image = admin_client.post("/api/admin/slider", json={"titleTR": "Başlık"})
    assert no_image.status_code == 400

    no_title = admin_client.post("/api/admin/slider", json={"image": "https://media.test/hero.jpg"})
    assert no_title.status_code == 400


def test_create_slide_with_one_title(admin_client: TestClient) -> None:
    slide = _create_slide(admin_client, titleTR="", titleEN="Only English")
    assert slide["titleEN"] == "Only English"
    assert slide["titleTR"] == ""
    assert slide["active"] is True
    assert slide["videoUrl"] == ""


def test_public_slider_lists_active_slides_in_order(admin_client: TestClient) -> None:
    _create_slide(admin_client, titleEN="Second", order=2)
    _create_slide(admin_client, titleEN="First", order=1)
    _create_slide(admin_client, titleEN="Hidden", order=0, active=False)

    response = admin_client.get("/api/slider")
    assert response.status_code == 200
    assert "no-store" in response.headers["cache-control"]
    assert [slide["titleEN"] for slide in response.json()["data"]] == ["First", "Second"]

    everything = admin_client.get("/api/admin/slider").json()["data"]
    assert [slide["titleEN"] for slide in everything] == ["Hidden", "First", "Second"]


def test_get_single_slide(admin_client: TestClient) -> None:
    slide = _create_slide(admin_client, buttonTextEN="Book now", buttonUrl="/en/rooms")

    response = admin_client.get("/api/admin/slider", params={"id": slide["id"]})
    assert response.json()["data"]["buttonTextEN"] == "Book now"
    assert response.json()["data"]["buttonUrl"] == "/en/rooms"

    assert admin_client.get("/api/admin/slider", params={"id": "missing"}).status_code == 404


def test_update_slide_keeps_unsent_fields(admin_client: TestClient) -> None:
    slide = _create_slide(admin_client, subtitleEN="Ölüdeniz")

    response = admin_client.put("/api/admin/slider", json={"id": slide["id"], "titleEN": "Hello", "active": False})
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["titleEN"] == "Hello"
    assert updated["titleTR"] == "Hoş Geldiniz"
    assert updated["subtitleEN"] == "Ölüdeniz"
    assert updated["active"] is False
    assert admin_client.get("/api/slider").json()["data"] == []


def test_update_slide_requires_id(admin_client: TestClient) -> None:
    assert admin_client.put("/api/admin/slider", json={"titleEN": "Hello"}).status_code == 400
    assert admin_client.put("/api/admin/slider", json={"id": "missing", "titleEN": "Hello"}).status_code == 404


def test_delete_slide(admin_client: TestClient) -> None:
    slide = _create_slide(admin_client)

    assert admin_client.delete("/api/admin/slider").status_code == 400

    response = admin_client.delete("/api/admin/slider", params={"id": slide["id"]})
    assert response.json() == {"success": True, "message": "Slider item deleted"}
    assert admin_client.delete("/api/admin/slider", params={"id": slide["id"]}).status_code == 404


def test_upload_slider_image(admin_client: TestClient, storage: Any) -> None:
    response = admin_client.post(
        "/api/admin/slider/upload",
        files={"file": ("Sea View.JPG", b"\xff\xd8\xff", "image/jpeg")},
        data={"folder": "hero"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["fileType"] == "image"
    assert body["fileId"].startswith("slider/hero/")
    assert body["fileId"].endswith("-sea-view.jpg")
    assert body["fileUrl"] == storage.public_url(body["fileId"])
    assert storage.objects[body["fileId"]] == (b"\xff\xd8\xff", "image/jpeg")


def test_upload_slider_video(admin_client: TestClient) -> None:
    response = admin_client.post("/api/admin/slider/upload", files={"file": ("intro.mp4", b"\x00" * 16, "video/mp4")})
    assert response.status_code == 200
    assert response.json()["fileType"] == "video"
    assert response.json()["fileId"].startswith("slider/slider/")


def test_upload_slider_rejects_other_types(admin_client: TestClient, storage: Any) -> None:
    response = admin_client.post(
        "/api/admin/slider/upload", files={"file": ("notes.pdf", b"%PDF", "application/pdf")}
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert storage.objects == {}


def test_upload_slider_video_size_limit(admin_client: TestClient, settings: Settings, storage: Any) -> None:
    assert settings.max_video_bytes == 50 * 1024 * 1024
    settings.max_video_bytes = 1024 * 1024

    response = admin_client.post(
        "/api/admin/slider/upload", files={"file": ("intro.mp4", b"\x00" * (1024 * 1024 + 1), "video/mp4")}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "File is too large. Videos may be at most 1MB."
    assert storage.objects == {}


def test_upload_slider_rejects_unknown_video_type(admin_client: TestClient) -> None:
    response = admin_client.post(
        "/api/admin/slider/upload", files={"file": ("clip.avi", b"RIFF", "video/x-msvideo")}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid file format. Only video files can be uploaded."


def test_upload_slider_requires_file(admin_client: TestClient) -> None:
    response = admin_client.post("/api/admin/slider/upload", data={"folder": "hero"})
    assert response.status_code == 400
    assert response.json()["message"] == "File not found"
