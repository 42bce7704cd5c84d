"""Pydantic-based settings for the Doğa Hotel server."""

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the Doğa Hotel server."""

    model_config = SettingsConfigDict(
        env_prefix="DOGA_",
        case_sensitive=False,
        env_file=os.getenv("SETTINGS_ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Service settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    default_language: str = Field(default="tr", description="Language used when none is given")

    # Database settings (non-prefixed DATABASE_URL is accepted too)
    database_url: str = Field(
        default="sqlite+aiosqlite:///data/doga.db",
        validation_alias=AliasChoices("DOGA_DATABASE_URL", "DATABASE_URL"),
        description="Async SQLAlchemy database URL",
    )

    # Admin account
    admin_username: str = Field(default="dogahotel", description="Back-office username")
    admin_password: str = Field(default="", description="Back-office password")
    jwt_secret: str = Field(
        default="change-me",
        validation_alias=AliasChoices("DOGA_JWT_SECRET", "JWT_SECRET"),
        description="Secret used to sign session tokens",
    )
    session_hours: int = Field(default=8, description="Session lifetime in hours")
    session_cookie_name: str = Field(default="auth_token", description="Session cookie name")
    cookie_secure: bool = Field(default=False, description="Only send the session cookie over HTTPS")

    # Object storage
    s3_endpoint_url: str = Field(default="https://s3.tebi.io", description="S3-compatible endpoint")
    s3_region: str = Field(default="auto", description="S3 region")
    s3_access_key: str = Field(
        default="",
        validation_alias=AliasChoices("DOGA_S3_ACCESS_KEY", "TEBI_API_KEY"),
        description="S3 access key",
    )
    s3_secret_key: str = Field(
        default="",
        validation_alias=AliasChoices("DOGA_S3_SECRET_KEY", "TEBI_MASTER_KEY"),
        description="S3 secret key",
    )
    s3_bucket: str = Field(
        default="dogahotelfethiye",
        validation_alias=AliasChoices("DOGA_S3_BUCKET", "TEBI_BUCKET"),
        description="Bucket receiving uploads",
    )
    s3_public_base_url: str = Field(default="", description="Public URL prefix for stored objects")

    # Upload limits
    max_image_bytes: int = Field(default=10 * 1024 * 1024, description="Maximum image upload size (10MB)")
    max_video_bytes: int = Field(default=50 * 1024 * 1024, description="Maximum video upload size (50MB)")

    # Legacy room id remapping
    room_id_cache_seconds: int = Field(default=300, description="Lifetime of the dynamic room id map")

    @property
    def public_base_url(self) -> str:
        """URL prefix that stored object keys are appended to."""
        if self.s3_public_base_url:
            return self.s3_public_base_url.rstrip("/")
        return f"{self.s3_endpoint_url.rstrip('/')}/{self.s3_bucket}"

    @property
    def log_format(self) -> str:
        """Log message format."""
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
