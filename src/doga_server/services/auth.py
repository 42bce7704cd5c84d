"""Single-account admin authentication backed by signed session tokens."""

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Any

import jwt

from doga_server.settings import Settings

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS256"
ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class AdminUser:
    username: str
    role: str = ADMIN_ROLE
    expires_at: int = 0


def validate_credentials(settings: Settings, username: str, password: str) -> bool:
    # An unset password disables login entirely.
    if not settings.admin_password:
        return False
    username_ok = secrets.compare_digest(username.encode(), settings.admin_username.encode())
    password_ok = secrets.compare_digest(password.encode(), settings.admin_password.encode())
    return username_ok and password_ok


def issue_token(settings: Settings, username: str, now: int | None = None) -> str:
    issued_at = int(time.time()) if now is None else now
    payload: dict[str, Any] = {
        "sub": username,
        "name": "Admin User",
        "role": ADMIN_ROLE,
        "iat": issued_at,
        "exp": issued_at + settings.session_hours * 60 * 60,
        "jti": secrets.token_hex(16),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=TOKEN_ALGORITHM)


def verify_token(settings: Settings, token: str | None) -> AdminUser | None:
    if not token:
        return None
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[TOKEN_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired admin session token")
        return None
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected invalid admin session token: {e}")
        return None

    if payload.get("role") != ADMIN_ROLE:
        return None
    return AdminUser(username=str(payload["sub"]), expires_at=int(payload["exp"]))
