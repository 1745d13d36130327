"""
Client for the Supabase Storage REST API, used for shipment photos.
"""

import os
import logging
from typing import List, Optional

import httpx
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

SHIPMENT_IMAGES_BUCKET = os.getenv("STORAGE_BUCKET", "shipment-images")


class StorageError(Exception):
    pass


class StorageClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        service_key: Optional[str] = None,
        bucket: str = SHIPMENT_IMAGES_BUCKET,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or os.getenv("SUPABASE_URL", "")).rstrip("/")
        self.service_key = service_key or os.getenv("SUPABASE_SERVICE_KEY")
        self.bucket = bucket
        self.timeout = timeout or float(os.getenv("STORAGE_TIMEOUT", "30"))

    def is_configured(self) -> bool:
        return bool(self.base_url and self.service_key)

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key or "",
        }

    def get_public_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{path}"

    def path_from_public_url(self, url: str) -> Optional[str]:
        marker = f"/storage/v1/object/public/{self.bucket}/"
        if marker not in url:
            return None
        return url.split(marker, 1)[1]

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        """Store one object and return its public URL. Existing paths are not overwritten."""
        if not self.is_configured():
            raise StorageError("Storage is not configured")

        headers = self._headers()
        headers["Content-Type"] = content_type or "application/octet-stream"
        headers["x-upsert"] = "false"
        try:
            with httpx.Client(timeout=self.timeout) as client:
                r = client.post(
                    f"{self.base_url}/storage/v1/object/{self.bucket}/{path}",
                    content=content,
                    headers=headers,
                )
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Storage upload %s rejected: %s", path, e.response.text)
            raise StorageError(f"Upload failed for {path}: {e.response.text}") from e
        except httpx.HTTPError as e:
            logger.warning("Storage upload %s error: %s", path, e)
            raise StorageError(f"Upload failed for {path}: {e}") from e

        return self.get_public_url(path)

    def remove(self, paths: List[str]) -> None:
        if not self.is_configured():
            raise StorageError("Storage is not configured")
        try:
            with httpx.Client(timeout=self.timeout) as client:
                r = client.request(
                    "DELETE",
                    f"{self.base_url}/storage/v1/object/{self.bucket}",
                    json={"prefixes": paths},
                    headers=self._headers(),
                )
                r.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Storage delete %s error: %s", paths, e)
            raise StorageError(f"Delete failed: {e}") from e


storage_client = StorageClient()


def get_storage() -> StorageClient:
    return storage_client
