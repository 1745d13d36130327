"""
Shipment photo uploads.

Files go to object storage one at a time; each stored file gets its
`shipment_images` row committed before the next one starts. The first
failure ends the batch: earlier uploads stay, later files are not tried.
"""

import logging
import os
import random
import string
import time
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from parcelx.crud import shipment as shipment_crud
from parcelx.models.shipment_image import ShipmentImage
from parcelx.services.storage import StorageClient, StorageError

logger = logging.getLogger(__name__)

_KEY_ALPHABET = string.digits + string.ascii_lowercase

# (filename, content, content_type)
UploadItem = Tuple[str, bytes, Optional[str]]


class ImageUploadError(Exception):
    def __init__(self, message: str, uploaded: List[ShipmentImage], total: int):
        super().__init__(message)
        self.message = message
        self.uploaded = uploaded
        self.total = total


def build_object_key(shipment_id: int, filename: str, now_ms: Optional[int] = None) -> str:
    """`{shipment_id}/{timestamp_ms}-{random}.{ext}`"""
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower() or "jpg"
    suffix = "".join(random.choices(_KEY_ALPHABET, k=6))
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{shipment_id}/{now_ms}-{suffix}.{ext}"


def upload_shipment_images(
    db: Session,
    storage: StorageClient,
    shipment_id: int,
    files: List[UploadItem],
) -> List[ShipmentImage]:
    total = len(files)
    uploaded: List[ShipmentImage] = []

    for index, (filename, content, content_type) in enumerate(files, start=1):
        key = build_object_key(shipment_id, filename)
        try:
            public_url = storage.upload(key, content, content_type)
        except StorageError as e:
            logger.error(
                "Shipment %s: image %s/%s (%s) failed, stopping batch: %s",
                shipment_id,
                index,
                total,
                filename,
                e,
            )
            raise ImageUploadError(str(e), uploaded, total) from e

        image = shipment_crud.create_shipment_image(
            db, shipment_id, image_url=public_url, storage_path=key
        )
        uploaded.append(image)
        logger.info(
            "Shipment %s: uploaded image %s/%s -> %s", shipment_id, index, total, key
        )

    return uploaded


def delete_shipment_image(
    db: Session, storage: StorageClient, image: ShipmentImage
) -> None:
    path = image.storage_path or storage.path_from_public_url(image.image_url)
    if path:
        try:
            storage.remove([path])
        except StorageError as e:
            # Orphaned objects are tolerated; the row still goes
            logger.warning("Could not remove %s from storage: %s", path, e)

    shipment_crud.delete_shipment_image(db, image)
    logger.info("Shipment %s: deleted image %s", image.shipment_id, image.id)
