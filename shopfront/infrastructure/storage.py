"""Blob storage for uploaded images.

Objects are addressed by a flat name; the owning row stores the public URL
and the name is recovered from the URL's last path segment when the object
has to be deleted.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Optional
from urllib.parse import quote, unquote

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import Depends
from starlette.concurrency import run_in_threadpool

from shopfront.core.config import Settings, get_settings
from shopfront.core.errors import ConfigurationError, StoreError

logger = logging.getLogger(__name__)


class BlobStore(ABC):
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    @abstractmethod
    async def put(self, name: str, data: bytes, content_type: Optional[str] = None) -> str:
        """Store ``data`` under ``name`` and return its public URL"""

    @abstractmethod
    async def delete(self, name: str) -> None:
        """Remove the object; deleting a missing object is not an error"""

    def public_url(self, name: str) -> str:
        return f"{self.base_url}/{quote(name)}"

    @staticmethod
    def name_from_url(url: Optional[str]) -> Optional[str]:
        if not url:
            return None
        name = unquote(url.rstrip("/").rsplit("/", 1)[-1])
        return name or None


class LocalBlobStore(BlobStore):
    """Files under a local directory, served by the app's static mount"""

    def __init__(self, root: str, base_url: str):
        super().__init__(base_url)
        self.root = Path(root)

    def _path_for(self, name: str) -> Path:
        safe_name = Path(name).name
        if safe_name in ("", ".", ".."):
            raise StoreError(f"Invalid blob name: {name!r}")
        return self.root / safe_name

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def put(self, name: str, data: bytes, content_type: Optional[str] = None) -> str:
        path = self._path_for(name)
        try:
            await run_in_threadpool(self._write, path, data)
        except OSError as e:
            raise StoreError(f"Could not store image: {e}") from e
        logger.info("Stored blob %s (%d bytes)", path.name, len(data))
        return self.public_url(path.name)

    async def delete(self, name: str) -> None:
        path = self._path_for(name)
        try:
            await run_in_threadpool(path.unlink, missing_ok=True)
        except OSError as e:
            raise StoreError(f"Could not delete image: {e}") from e
        logger.info("Deleted blob %s", path.name)

class S3BlobStore(BlobStore):
    """Any S3-compatible bucket (AWS S3, Cloudflare R2, MinIO)"""

    def __init__(self, bucket: str, base_url: str, client):
        super().__init__(base_url)
        self.bucket = bucket
        self.client = client

    async def put(self, name: str, data: bytes, content_type: Optional[str] = None) -> str:
        extra = {"ContentType": content_type} if content_type else {}
        try:
            await run_in_threadpool(
                self.client.put_object, Bucket=self.bucket, Key=name, Body=data, **extra
            )
        except (BotoCoreError, ClientError) as e:
            raise StoreError(f"Could not store image: {e}") from e
        logger.info("Stored blob %s in bucket %s (%d bytes)", name, self.bucket, len(data))
        return self.public_url(name)

    async def delete(self, name: str) -> None:
        try:
            await run_in_threadpool(self.client.delete_object, Bucket=self.bucket, Key=name)
        except (BotoCoreError, ClientError) as e:
            raise StoreError(f"Could not delete image: {e}") from e
        logger.info("Deleted blob %s from bucket %s", name, self.bucket)


@lru_cache()
def _s3_client(
    endpoint_url: Optional[str],
    region: Optional[str],
    access_key_id: Optional[str],
    secret_access_key: Optional[str],
):
    return boto3.client(
        "s3",
        endpoint_url=endpoint_url,
        region_name=region,
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
    )


def get_blob_store(settings: Settings = Depends(get_settings)) -> BlobStore:
    if settings.storage_backend == "s3":
        if not settings.s3_bucket:
            raise ConfigurationError("S3 bucket is not configured")
        if not settings.public_blob_url:
            raise ConfigurationError("Public blob URL is not configured")
        client = _s3_client(
            settings.s3_endpoint_url,
            settings.s3_region,
            settings.s3_access_key_id,
            settings.s3_secret_access_key,
        )
        return S3BlobStore(settings.s3_bucket, settings.blob_base_url, client)

    return LocalBlobStore(settings.media_root, settings.blob_base_url)
