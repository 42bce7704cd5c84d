import os
from typing import Any

import httpx
import typer
from rich.console import Console

console = Console()

BASE_URL = os.environ.get("DOGA_BASE_URL", "http://localhost:8000")
ADMIN_USERNAME = os.environ.get("DOGA_ADMIN_USERNAME", "dogahotel")
ADMIN_PASSWORD = os.environ.get("DOGA_ADMIN_PASSWORD", "")


class ApiError(Exception):
    """Raised when the server answers with success=false or an error status."""


def get_client() -> httpx.Client:
    return httpx.Client(base_url=BASE_URL, timeout=60.0)


def unwrap(response: httpx.Response) -> Any:
    try:
        body = response.json()
    except ValueError:
        response.raise_for_status()
        raise ApiError(f"Unexpected response from {response.request.url}")

    if response.is_error or not body.get("success", False):
        raise ApiError(body.get("message") or f"HTTP {response.status_code}")
    return body


def login(client: httpx.Client) -> None:
    if not ADMIN_PASSWORD:
        raise ApiError("DOGA_ADMIN_PASSWORD is not set")
    unwrap(client.post("/api/admin/auth", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}))


def fail(error: Exception) -> None:
    print(f"error: {error}", file=typer.get_text_stream("stderr"))
    raise typer.Exit(1)
