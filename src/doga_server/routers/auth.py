import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, Response

from doga_server.dependencies import get_settings, require_admin
from doga_server.schemas.auth import LoginRequest
from doga_server.schemas.envelope import ok
from doga_server.services.auth import AdminUser, issue_token, validate_credentials
from doga_server.settings import Settings

router = APIRouter(prefix="/api/admin", tags=["auth"])
logger = logging.getLogger(__name__)


def set_session_cookie(response: Response, settings: Settings, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_hours * 60 * 60,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )


@router.post("/auth")
async def login(body: LoginRequest, settings: Settings = Depends(get_settings)) -> JSONResponse:
    if not body.username or not body.password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    if not validate_credentials(settings, body.username, body.password):
        logger.warning(f"Failed admin login for {body.username}")
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = issue_token(settings, body.username)
    response = JSONResponse(content=ok({"username": body.username}, "Login successful"))
    set_session_cookie(response, settings, token)
    logger.info(f"Admin {body.username} logged in")
    return response


@router.get("/auth")
async def session_status(admin: AdminUser = Depends(require_admin)) -> dict[str, Any]:
    return ok({"username": admin.username, "role": admin.role, "expiresAt": admin.expires_at})


@router.delete("/auth")
async def logout(settings: Settings = Depends(get_settings)) -> JSONResponse:
    response = JSONResponse(content=ok(message="Logged out"))
    clear_session_cookie(response, settings)
    return response
