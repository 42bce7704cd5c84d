import json
from pathlib import Path
from typing import Callable

import httpx
import pytest
from typer.testing import CliRunner

from doga_cli.main import app

runner = CliRunner()

Handler = Callable[[httpx.Request], httpx.Response]

ROOM = {
    "id": "448a5110-8ffa-4059-8264-6e171f919ff1",
    "nameTR": "Suit",
    "nameEN": "Suite",
    "name": "Suite",
    "description": "Large family room",
    "type": "suite",
    "capacity": 5,
    "size": 40,
    "price": "€100",
    "priceTR": "3.000 ₺",
    "features": ["Balcony"],
    "gallery": ["a.jpg", "b.jpg"],
    "order": 1,
}


def _use_transport(monkeypatch: pytest.MonkeyPatch, module: str, handler: Handler) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    def get_client() -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(record), base_url="http://doga.test")

    monkeypatch.setattr(f"{module}.get_client", get_client)
    return seen


def test_rooms_list(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _use_transport(
        monkeypatch,
        "doga_cli.rooms.list",
        lambda request: httpx.Response(200, json={"success": True, "data": [ROOM]}),
    )

    result = runner.invoke(app, ["rooms", "list", "--lang", "en", "--all"])

    assert result.exit_code == 0, result.output
    assert "Suite" in result.output
    assert seen[0].url.path == "/api/public-rooms"
    assert seen[0].url.params["includeInactive"] == "true"
    assert seen[0].url.params["lang"] == "en"


def test_rooms_show(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _use_transport(
        monkeypatch,
        "doga_cli.rooms.show",
        lambda request: httpx.Response(200, json={"success": True, "data": ROOM}),
    )

    result = runner.invoke(app, ["rooms", "show", "suite-room", "--lang", "en"])

    assert result.exit_code == 0, result.output
    assert "Large family room" in result.output
    assert "Gallery: 2 images" in result.output
    assert seen[0].url.path == "/api/public-rooms/suite-room"


def test_rooms_show_reports_api_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_transport(
        monkeypatch,
        "doga_cli.rooms.show",
        lambda request: httpx.Response(404, json={"success": False, "message": "Room not found"}),
    )

    result = runner.invoke(app, ["rooms", "show", "penthouse-room"])

    assert result.exit_code == 1
    assert "error: Room not found" in result.output


def test_rooms_import_logs_in_first(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("doga_cli.utils.ADMIN_PASSWORD", "secret")

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/admin/auth":
            return httpx.Response(200, json={"success": True}, headers={"set-cookie": "auth_token=abc; Path=/"})
        return httpx.Response(
            200, json={"success": True, "data": [{"id": ROOM["id"], "nameTR": "Suit", "nameEN": "Suite", "success": True}]}
        )

    seen = _use_transport(monkeypatch, "doga_cli.rooms.seed", handler)

    result = runner.invoke(app, ["rooms", "import", "--yes"])

    assert result.exit_code == 0, result.output
    assert "Imported" in result.output
    assert [request.url.path for request in seen] == ["/api/admin/auth", "/api/admin/import-rooms"]
    assert json.loads(seen[0].content) == {"username": "dogahotel", "password": "secret"}
    assert seen[1].headers["cookie"] == "auth_token=abc"


def test_rooms_import_needs_password(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("doga_cli.utils.ADMIN_PASSWORD", "")
    seen = _use_transport(monkeypatch, "doga_cli.rooms.seed", lambda request: httpx.Response(500))

    result = runner.invoke(app, ["rooms", "import", "--yes"])

    assert result.exit_code == 1
    assert "DOGA_ADMIN_PASSWORD is not set" in result.output
    assert seen == []


def test_rooms_import_can_be_aborted(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = _use_transport(monkeypatch, "doga_cli.rooms.seed", lambda request: httpx.Response(500))

    result = runner.invoke(app, ["rooms", "import"], input="n\n")

    assert result.exit_code == 1
    assert seen == []


def test_slider_list(monkeypatch: pytest.MonkeyPatch) -> None:
    slide = {"titleTR": "Merhaba", "titleEN": "Hello", "image": "h.jpg", "videoUrl": "", "order": 1}
    _use_transport(
        monkeypatch,
        "doga_cli.slider.list",
        lambda request: httpx.Response(200, json={"success": True, "data": [slide]}),
    )

    result = runner.invoke(app, ["slider", "list", "--lang", "en"])

    assert result.exit_code == 0, result.output
    assert "Hello" in result.output
    assert "h.jpg" in result.output


def test_upload(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("doga_cli.utils.ADMIN_PASSWORD", "secret")
    image = tmp_path / "pool.png"
    image.write_bytes(b"\x89PNG")

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/admin/auth":
            return httpx.Response(200, json={"success": True})
        return httpx.Response(200, json={"success": True, "url": "https://m.test/p.png", "message": "File uploaded"})

    seen = _use_transport(monkeypatch, "doga_cli.upload", handler)

    result = runner.invoke(app, ["upload", str(image), "--room-id", "abc"])

    assert result.exit_code == 0, result.output
    assert "https://m.test/p.png" in result.output
    upload_request = seen[1]
    assert upload_request.url.path == "/api/upload"
    assert b'name="roomId"' in upload_request.content
    assert b"image/png" in upload_request.content


def test_upload_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["upload", str(tmp_path / "missing.png")])
    assert result.exit_code == 1
    assert "file not found" in result.output
