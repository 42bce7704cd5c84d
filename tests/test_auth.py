import time

from fastapi.testclient import TestClient

from doga_server.services.auth import issue_token, validate_credentials, verify_token
from doga_server.settings import Settings


def test_login_requires_username_and_password(client: TestClient) -> None:
    response = client.post("/api/admin/auth", json={"username": "dogahotel"})
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_login_rejects_wrong_password(client: TestClient) -> None:
    response = client.post("/api/admin/auth", json={"username": "dogahotel", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid username or password"}
    assert "auth_token" not in response.cookies


def test_login_sets_session_cookie(client: TestClient) -> None:
    response = client.post("/api/admin/auth", json={"username": "dogahotel", "password": "secret"})
    assert response.status_code == 200
    assert response.json()["success"] is True
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("auth_token=")
    assert "HttpOnly" in set_cookie
    assert "samesite=strict" in set_cookie.lower()

    status = client.get("/api/admin/auth")
    assert status.status_code == 200
    assert status.json()["data"]["username"] == "dogahotel"


def test_admin_api_without_cookie_is_unauthorized(client: TestClient) -> None:
    response = client.get("/api/admin/slider")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized"}


def test_admin_api_rejects_tampered_cookie(client: TestClient) -> None:
    client.cookies.set("auth_token", "not-a-token")
    response = client.get("/api/admin/services")
    assert response.status_code == 401


def test_logout_clears_session(admin_client: TestClient) -> None:
    assert admin_client.get("/api/admin/auth").status_code == 200

    response = admin_client.delete("/api/admin/auth")
    assert response.status_code == 200
    assert response.json()["message"] == "Logged out"

    assert admin_client.get("/api/admin/auth").status_code == 401


def test_admin_page_redirects_to_login(client: TestClient) -> None:
    response = client.get("/en/admin/rooms", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/en/admin/login"


def test_login_page_is_public(client: TestClient) -> None:
    response = client.get("/tr/admin/login")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


def test_empty_admin_password_disables_login() -> None:
    settings = Settings(admin_password="", jwt_secret="test-secret-with-enough-bytes-for-hs256")
    assert validate_credentials(settings, "dogahotel", "") is False


def test_expired_token_is_rejected() -> None:
    settings = Settings(admin_password="secret", jwt_secret="test-secret-with-enough-bytes-for-hs256", session_hours=8)
    stale = issue_token(settings, "dogahotel", now=int(time.time()) - 9 * 60 * 60)
    fresh = issue_token(settings, "dogahotel")

    assert verify_token(settings, stale) is None
    admin = verify_token(settings, fresh)
    assert admin is not None
    assert admin.username == "dogahotel"
    assert admin.role == "admin"


def test_token_signed_with_other_secret_is_rejected() -> None:
    ours = Settings(admin_password="secret", jwt_secret="test-secret-with-enough-bytes-for-hs256")
    theirs = Settings(admin_password="secret", jwt_secret="another-secret-with-enough-bytes-for-hs256")
    assert verify_token(ours, issue_token(theirs, "dogahotel")) is None
