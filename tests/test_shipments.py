"""
Tests for shipments, tracking history and the dashboard
"""
import re
import pytest
from datetime import datetime
from fastapi import HTTPException
from pydantic import ValidationError

from parcelx.crud import shipment as crud
from parcelx.enums.shipment_options import ShipmentStatus
from parcelx.routers import dashboard, shipments, users
from parcelx.schemas.shipment import (
    ShipmentCreate,
    ShipmentStatusUpdate,
    TrackingUpdateCreate,
)


def test_create_shipment_generates_tracking_number(db, staff_admin):
    created = shipments.create_shipment(
        shipment=ShipmentCreate(origin="Lagos", destination="Accra"),
        db=db,
        current_admin=staff_admin,
    )

    assert re.fullmatch(r"PKX-[0-9A-Z]+", created.tracking_number)
    assert created.status == ShipmentStatus.PENDING
    assert created.customs_currency == "USD"
    assert created.item_quantity == 1


def test_duplicate_tracking_number_rejected(db, shipment, staff_admin):
    with pytest.raises(HTTPException) as exc_info:
        shipments.create_shipment(
            shipment=ShipmentCreate(
                tracking_number=shipment.tracking_number,
                origin="Lagos",
                destination="Accra",
            ),
            db=db,
            current_admin=staff_admin,
        )

    assert exc_info.value.status_code == 400


def test_shipment_validation_rejects_bad_input():
    with pytest.raises(ValidationError):
        ShipmentCreate(origin="", destination="Accra")
    with pytest.raises(ValidationError):
        ShipmentCreate(origin="Lagos", destination="Accra", sender_email="not-an-email")
    with pytest.raises(ValidationError):
        ShipmentCreate(origin="Lagos", destination="Accra", weight=-1)


def test_tracking_updates_are_appended_newest_first(db, shipment, staff_admin):
    shipments.add_tracking_update(
        shipment_id=shipment.id,
        update=TrackingUpdateCreate(
            location="Nairobi hub",
            status=ShipmentStatus.PROCESSING,
            occurrence_time=datetime(2025, 5, 1, 8, 0),
        ),
        db=db,
        current_admin=staff_admin,
    )
    shipments.add_tracking_update(
        shipment_id=shipment.id,
        update=TrackingUpdateCreate(
            location="Voi checkpoint",
            description="Loaded on truck KCX 221",
            occurrence_time=datetime(2025, 5, 1, 14, 30),
        ),
        db=db,
        current_admin=staff_admin,
    )

    history = shipments.read_tracking_updates(
        shipment_id=shipment.id, db=db, current_admin=staff_admin
    )

    assert [u.location for u in history] == ["Voi checkpoint", "Nairobi hub"]
    assert history[0].status == ShipmentStatus.IN_TRANSIT
    # Adding history does not move the shipment itself
    db.refresh(shipment)
    assert shipment.status == ShipmentStatus.PENDING


def test_tracking_update_for_unknown_shipment(db, staff_admin):
    with pytest.raises(HTTPException) as exc_info:
        shipments.add_tracking_update(
            shipment_id=12345,
            update=TrackingUpdateCreate(location="Nowhere"),
            db=db,
            current_admin=staff_admin,
        )

    assert exc_info.value.status_code == 404


def test_status_only_update(db, shipment, staff_admin):
    updated = shipments.update_shipment_status(
        shipment_id=shipment.id,
        update=ShipmentStatusUpdate(status=ShipmentStatus.OUT_FOR_DELIVERY),
        db=db,
        current_admin=staff_admin,
    )

    assert updated.status == ShipmentStatus.OUT_FOR_DELIVERY
    assert updated.origin == "Nairobi"


def test_list_shipments_search_and_filter(db, shipment, staff_admin):
    crud.create_shipment(
        db,
        ShipmentCreate(tracking_number="PKX-KLA1", origin="Kampala", destination="Kigali"),
    )
    crud.create_shipment(
        db,
        ShipmentCreate(
            tracking_number="PKX-ARU1",
            origin="Arusha",
            destination="Mombasa",
            status=ShipmentStatus.DELIVERED,
        ),
    )

    found = shipments.read_shipments(
        search="mombasa",
        status=None,
        page=1,
        page_size=10,
        db=db,
        current_admin=staff_admin,
    )
    assert found["total"] == 2

    delivered = shipments.read_shipments(
        search="mombasa",
        status=ShipmentStatus.DELIVERED,
        page=1,
        page_size=10,
        db=db,
        current_admin=staff_admin,
    )
    assert [s.origin for s in delivered["items"]] == ["Arusha"]


def test_page_size_is_clamped(db, shipment, staff_admin):
    result = shipments.read_shipments(
        search=None,
        status=None,
        page=0,
        page_size=500,
        db=db,
        current_admin=staff_admin,
    )

    assert result["page"] == 1
    assert result["page_size"] == 100


def test_dashboard_stats(db, shipment, customer, staff_admin):
    crud.create_shipment(
        db,
        ShipmentCreate(origin="Kampala", destination="Kigali", status=ShipmentStatus.DELIVERED),
    )

    stats = dashboard.read_dashboard_stats(db=db, current_admin=staff_admin)

    assert stats["total_shipments"] == 2
    assert stats["shipments_by_status"]["Pending"] == 1
    assert stats["shipments_by_status"]["Delivered"] == 1
    assert stats["shipments_by_status"]["Returned"] == 0
    assert stats["total_users"] == 1
    assert len(stats["recent_shipments"]) == 2


def test_user_shipments_limited_to_ten(db, customer, staff_admin):
    for i in range(12):
        crud.create_shipment(
            db,
            ShipmentCreate(
                tracking_number=f"PKX-U{i:02d}",
                origin="Nairobi",
                destination="Kisumu",
                user_id=customer.id,
            ),
        )

    recent = users.read_user_shipments(user_id=customer.id, db=db, current_admin=staff_admin)

    assert len(recent) == 10
