from typing import Any, Callable

from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_root_redirects_to_default_language(client: TestClient) -> None:
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/tr"


def test_home_page_renders_rooms_and_slides(admin_client: TestClient) -> None:
    admin_client.post("/api/admin/import-rooms")
    admin_client.post(
        "/api/admin/slider",
        json={"titleTR": "Hoş Geldiniz", "titleEN": "Welcome to Ölüdeniz", "image": "https://media.test/hero.jpg"},
    )

    response = admin_client.get("/en")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "© Doğa Hotel Ölüdeniz" in response.text
    assert "Welcome to Ölüdeniz" in response.text
    assert "Standard Room" in response.text
    assert 'href="/en/rooms/suite-room"' in response.text

    turkish = admin_client.get("/tr")
    assert "Standart Oda" in turkish.text


def test_unknown_language_is_not_found(client: TestClient) -> None:
    response = client.get("/de/rooms", headers={"Accept": "text/html"})
    assert response.status_code == 404
    assert "text/html" in response.headers["content-type"]


def test_rooms_page_filters_by_type_and_query(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    make_room(nameEN="Garden Suite", type="suite")
    make_room(nameEN="Pool Standard", type="standard", descriptionEN="Next to the pool")

    by_type = client.get("/en/rooms", params={"type": "suite"})
    assert "Garden Suite" in by_type.text
    assert "Pool Standard" not in by_type.text

    by_query = client.get("/en/rooms", params={"q": "POOL"})
    assert "Pool Standard" in by_query.text
    assert "Garden Suite" not in by_query.text


def test_room_detail_by_slug(admin_client: TestClient) -> None:
    admin_client.post("/api/admin/import-rooms")

    response = admin_client.get("/en/rooms/suite-room")
    assert response.status_code == 200
    assert "Suite Room" in response.text
    assert "Multiple Bed Options" in response.text

    triple = admin_client.get("/en/rooms/triple-room")
    assert "1 Double + 1 Single Bed" in triple.text


def test_room_detail_errors(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    invalid = client.get("/en/rooms/logo.png")
    assert invalid.status_code == 400
    assert "Invalid room id" in invalid.text

    missing = client.get("/en/rooms/penthouse-room")
    assert missing.status_code == 404
    assert "Room not found" in missing.text

    closed = make_room(active=False)
    assert client.get(f"/en/rooms/{closed['id']}").status_code == 404


def test_services_and_gallery_pages(admin_client: TestClient) -> None:
    service = admin_client.post(
        "/api/admin/services", json={"titleTR": "Havuz", "titleEN": "Swimming Pool", "descriptionEN": "Open all day"}
    ).json()["data"]
    admin_client.post(
        "/api/admin/gallery", json={"titleEN": "Beach at dawn", "type": "image", "imageUrl": "https://media.test/b.jpg"}
    )

    assert "Swimming Pool" in admin_client.get("/en/services").text
    detail = admin_client.get(f"/en/services/{service['id']}")
    assert detail.status_code == 200
    assert "Open all day" in detail.text
    assert admin_client.get("/en/services/missing").status_code == 404
    assert "Beach at dawn" in admin_client.get("/en/gallery").text


def test_api_errors_stay_json_for_browsers(client: TestClient) -> None:
    response = client.get("/api/rooms/missing-room", headers={"Accept": "text/html"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Room not found"}


def test_admin_login_form(client: TestClient) -> None:
    failed = client.post("/en/admin/login", data={"username": "dogahotel", "password": "wrong"})
    assert failed.status_code == 401
    assert "text/html" in failed.headers["content-type"]

    response = client.post(
        "/en/admin/login", data={"username": "dogahotel", "password": "secret"}, follow_redirects=False
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/en/admin"
    assert "auth_token=" in response.headers["set-cookie"]

    dashboard = client.get("/en/admin")
    assert dashboard.status_code == 200
    assert "dogahotel" in dashboard.text

    assert client.get("/en/admin/login", follow_redirects=False).status_code == 303

    logout = client.post("/en/admin/logout", follow_redirects=False)
    assert logout.headers["location"] == "/en/admin/login"
    assert client.get("/en/admin", follow_redirects=False).status_code == 303


def test_admin_room_form_creates_and_updates(admin_client: TestClient) -> None:
    response = admin_client.post(
        "/en/admin/rooms",
        data={
            "name_tr": "Bahçe Odası",
            "name_en": "Garden Room",
            "capacity": "3",
            "features_en": "Balcony\n\nGarden view\n",
            "gallery": "https://media.test/1.jpg\nhttps://media.test/2.jpg",
            "active": "true",
        },
        follow_redirects=False,
    )
    assert response.status_code == 303
    room_id = response.headers["location"].split("/")[-2]

    room = admin_client.get(f"/api/rooms/{room_id}").json()["data"]
    assert room["nameEN"] == "Garden Room"
    assert room["featuresEN"] == ["Balcony", "Garden view"]
    assert room["gallery"] == ["https://media.test/1.jpg", "https://media.test/2.jpg"]
    assert room["active"] is True

    # unchecked checkbox means inactive
    admin_client.post(
        f"/en/admin/rooms/{room_id}",
        data={"name_tr": "Bahçe Odası", "name_en": "Garden Room", "capacity": "3"},
        follow_redirects=False,
    )
    assert admin_client.get(f"/api/rooms/{room_id}").json()["data"]["active"] is False

    edit_page = admin_client.get(f"/en/admin/rooms/{room_id}/edit")
    assert edit_page.status_code == 200
    assert "Garden Room" in edit_page.text

    admin_client.post(f"/en/admin/rooms/{room_id}/delete", follow_redirects=False)
    assert admin_client.get(f"/api/rooms/{room_id}").status_code == 404


def test_admin_import_rooms_form(admin_client: TestClient) -> None:
    response = admin_client.post("/tr/admin/import-rooms", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/tr/admin/rooms"
    listing = admin_client.get("/tr/admin/rooms").text
    assert "Standart Oda" in listing
    assert '<span class="tab-badge">4</span>' in listing


def test_room_detail_page_matches_on_name(client: TestClient, make_room: Callable[..., dict[str, Any]]) -> None:
    make_room(nameTR="Deniz Odası", nameEN="Sea Room", descriptionEN="Looks over the bay")

    response = client.get("/en/rooms/sea-room")
    assert response.status_code == 200
    assert "Looks over the bay" in response.text


def test_admin_forms_reject_blank_names(admin_client: TestClient) -> None:
    response = admin_client.post(
        "/en/admin/rooms", data={"name_tr": " ", "name_en": " ", "capacity": "2"}, follow_redirects=False
    )
    assert response.status_code == 400
    assert response.json()["message"] == "nameTR and nameEN are required"
    assert admin_client.get("/api/rooms").json()["data"] == []

    service = admin_client.post(
        "/en/admin/services", data={"title_tr": "Havuz", "title_en": "  "}, follow_redirects=False
    )
    assert service.status_code == 400
    assert admin_client.get("/api/admin/services").json()["data"] == []
