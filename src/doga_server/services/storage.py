"""S3-compatible object storage used for media uploads."""

import logging
from dataclasses import dataclass
from typing import Any

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError
from starlette.concurrency import run_in_threadpool

from doga_server.settings import Settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the object store rejects or fails a request."""


@dataclass(frozen=True)
class StoredObject:
    key: str
    url: str
    content_type: str
    size: int


class ObjectStorage:
    """Thin async wrapper around a boto3 S3 client bound to one bucket."""

    def __init__(self, client: Any, *, bucket: str, public_base_url: str) -> None:
        self._client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ObjectStorage":
        client = boto3.client(
            "s3",
            endpoint_url=settings.s3_endpoint_url,
            region_name=settings.s3_region,
            aws_access_key_id=settings.s3_access_key or None,
            aws_secret_access_key=settings.s3_secret_key or None,
            config=BotoConfig(signature_version="s3v4", retries={"max_attempts": 3, "mode": "standard"}),
        )
        return cls(client, bucket=settings.s3_bucket, public_base_url=settings.public_base_url)

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key.lstrip('/')}"

    async def put_object(self, key: str, data: bytes, content_type: str) -> StoredObject:
        try:
            await run_in_threadpool(
                self._client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
                ACL="public-read",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Upload of {key} to bucket {self.bucket} failed: {e}")
            raise StorageError(f"Failed to store {key}") from e

        logger.info(f"Stored {key} ({len(data)} bytes) in bucket {self.bucket}")
        return StoredObject(key=key, url=self.public_url(key), content_type=content_type, size=len(data))

    async def check_connection(self) -> None:
        try:
            await run_in_threadpool(self._client.head_bucket, Bucket=self.bucket)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Bucket {self.bucket} is not accessible") from e
