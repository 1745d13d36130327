"""
Tests for sequential shipment image uploads
"""
import io
import re
import pytest
from fastapi import HTTPException, UploadFile

from parcelx.crud.shipment import get_shipment_images
from parcelx.routers import shipments
from parcelx.services.shipment_images import (
    ImageUploadError,
    build_object_key,
    delete_shipment_image,
    upload_shipment_images,
)


def _files(count):
    return [(f"photo{i}.PNG", b"\x89PNG" + bytes([i]), "image/png") for i in range(1, count + 1)]


def test_object_key_format():
    key = build_object_key(42, "Front View.JPG", now_ms=1735689600000)

    assert re.fullmatch(r"42/1735689600000-[0-9a-z]{6}\.jpg", key)


def test_object_key_without_extension_defaults_to_jpg():
    assert build_object_key(7, "blob").endswith(".jpg")


def test_upload_all_images(db, shipment, fake_storage):
    images = upload_shipment_images(db, fake_storage, shipment.id, _files(3))

    assert len(images) == 3
    assert len(fake_storage.objects) == 3
    stored = get_shipment_images(db, shipment.id)
    assert len(stored) == 3
    for image in stored:
        assert image.image_url.endswith(image.storage_path)
        assert image.storage_path.startswith(f"{shipment.id}/")


def test_second_failure_halts_batch(db, shipment, fake_storage):
    """3 files, the 2nd fails: 1 persisted, 3rd never attempted"""
    fake_storage.fail_on = 2

    with pytest.raises(ImageUploadError) as exc_info:
        upload_shipment_images(db, fake_storage, shipment.id, _files(3))

    error = exc_info.value
    assert len(error.uploaded) == 1
    assert error.total == 3
    assert "quota exceeded" in error.message
    assert fake_storage.calls == 2
    assert len(get_shipment_images(db, shipment.id)) == 1
    # No cleanup of the image stored before the failure
    assert fake_storage.removed == []


def test_upload_endpoint_reports_partial_failure(db, shipment, fake_storage, staff_admin):
    fake_storage.fail_on = 2
    files = [
        UploadFile(file=io.BytesIO(b"one"), filename="one.jpg"),
        UploadFile(file=io.BytesIO(b"two"), filename="two.jpg"),
        UploadFile(file=io.BytesIO(b"three"), filename="three.jpg"),
    ]

    with pytest.raises(HTTPException) as exc_info:
        shipments.upload_shipment_images(
            shipment_id=shipment.id,
            files=files,
            db=db,
            storage=fake_storage,
            current_admin=staff_admin,
        )

    assert exc_info.value.status_code == 502
    assert exc_info.value.detail["uploaded"] == 1
    assert exc_info.value.detail["total"] == 3


def test_upload_endpoint_success(db, shipment, fake_storage, staff_admin):
    files = [UploadFile(file=io.BytesIO(b"one"), filename="one.jpg")]

    result = shipments.upload_shipment_images(
        shipment_id=shipment.id,
        files=files,
        db=db,
        storage=fake_storage,
        current_admin=staff_admin,
    )

    assert result["uploaded"] == 1
    assert result["total"] == 1
    assert list(fake_storage.objects.values()) == [b"one"]


def test_upload_to_missing_shipment(db, fake_storage, staff_admin):
    with pytest.raises(HTTPException) as exc_info:
        shipments.upload_shipment_images(
            shipment_id=999,
            files=[UploadFile(file=io.BytesIO(b"x"), filename="x.jpg")],
            db=db,
            storage=fake_storage,
            current_admin=staff_admin,
        )

    assert exc_info.value.status_code == 404
    assert fake_storage.calls == 0


def test_delete_image_removes_object_then_row(db, shipment, fake_storage):
    image = upload_shipment_images(db, fake_storage, shipment.id, _files(1))[0]
    path = image.storage_path

    delete_shipment_image(db, fake_storage, image)

    assert fake_storage.removed == [path]
    assert get_shipment_images(db, shipment.id) == []


def test_delete_image_endpoint_checks_owner(db, shipment, fake_storage, staff_admin):
    image = upload_shipment_images(db, fake_storage, shipment.id, _files(1))[0]

    with pytest.raises(HTTPException) as exc_info:
        shipments.delete_shipment_image(
            shipment_id=shipment.id + 1,
            image_id=image.id,
            db=db,
            storage=fake_storage,
            current_admin=staff_admin,
        )

    assert exc_info.value.status_code == 404
    assert len(get_shipment_images(db, shipment.id)) == 1
