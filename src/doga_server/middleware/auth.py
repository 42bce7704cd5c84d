"""Cookie session checks for the back-office."""

from typing import Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from doga_server.i18n import SUPPORTED_LANGUAGES
from doga_server.schemas.envelope import failure
from doga_server.services.auth import verify_token
from doga_server.settings import Settings

API_ADMIN_PREFIX = "/api/admin"
API_LOGIN_PATH = "/api/admin/auth"


def admin_page_language(path: str) -> str | None:
    """Return the language of a back-office page path, or None for other paths."""
    parts = path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] in SUPPORTED_LANGUAGES and parts[1] == "admin":
        return parts[0]
    return None


class AdminAuthMiddleware(BaseHTTPMiddleware):
    """Reject back-office requests that carry no valid session cookie."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        path = request.url.path.rstrip("/") or "/"
        is_admin_api = path == API_ADMIN_PREFIX or path.startswith(f"{API_ADMIN_PREFIX}/")
        lang = admin_page_language(path)

        if is_admin_api and path == API_LOGIN_PATH:
            return await call_next(request)
        if lang is not None and path == f"/{lang}/admin/login":
            return await call_next(request)
        if not is_admin_api and lang is None:
            return await call_next(request)

        settings: Settings = getattr(request.app.state, "settings", None) or Settings()
        admin = verify_token(settings, request.cookies.get(settings.session_cookie_name))
        if admin is not None:
            request.state.admin = admin
            return await call_next(request)

        if is_admin_api:
            return JSONResponse(status_code=401, content=failure("Unauthorized"))
        return RedirectResponse(url=f"/{lang}/admin/login", status_code=303)
