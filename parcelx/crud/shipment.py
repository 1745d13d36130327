from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Dict, List, Optional, Tuple
from datetime import datetime
import time

from parcelx.models.shipment import Shipment
from parcelx.models.tracking_update import TrackingUpdate
from parcelx.models.shipment_image import ShipmentImage
from parcelx.enums.shipment_options import ShipmentStatus
from parcelx.schemas.shipment import (
    ShipmentCreate,
    ShipmentUpdate,
    TrackingUpdateCreate,
)
from parcelx.utils.query_utils import apply_search, paginate, DEFAULT_PAGE_SIZE

BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _to_base36(number: int) -> str:
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits)) or "0"


def generate_tracking_number() -> str:
    """PKX-<current time in ms, base36>, e.g. PKX-LXK2J9Q1"""
    return f"PKX-{_to_base36(int(time.time() * 1000))}"


def get_shipment(db: Session, shipment_id: int) -> Optional[Shipment]:
    return db.query(Shipment).filter(Shipment.id == shipment_id).first()


def get_shipment_by_tracking_number(
    db: Session, tracking_number: str
) -> Optional[Shipment]:
    return (
        db.query(Shipment).filter(Shipment.tracking_number == tracking_number).first()
    )


def get_shipments(
    db: Session,
    search: Optional[str] = None,
    status: Optional[ShipmentStatus] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Tuple[List[Shipment], int]:
    query = apply_search(
        db.query(Shipment),
        search,
        [Shipment.tracking_number, Shipment.origin, Shipment.destination],
    )
    if status:
        query = query.filter(Shipment.status == status)

    query = query.order_by(Shipment.created_at.desc(), Shipment.id.desc())
    return paginate(query, page, page_size)


def get_user_shipments(db: Session, user_id: int, limit: int = 10) -> List[Shipment]:
    return (
        db.query(Shipment)
        .filter(Shipment.user_id == user_id)
        .order_by(Shipment.created_at.desc(), Shipment.id.desc())
        .limit(limit)
        .all()
    )


def get_recent_shipments(db: Session, limit: int = 5) -> List[Shipment]:
    return (
        db.query(Shipment)
        .order_by(Shipment.created_at.desc(), Shipment.id.desc())
        .limit(limit)
        .all()
    )


def count_shipments_by_status(db: Session) -> Dict[str, int]:
    rows = db.query(Shipment.status, func.count(Shipment.id)).group_by(Shipment.status).all()
    counts = {status.value: 0 for status in ShipmentStatus}
    for status, count in rows:
        counts[status.value] = count
    return counts


def create_shipment(db: Session, shipment: ShipmentCreate) -> Shipment:
    data = shipment.model_dump()
    if not data.get("tracking_number"):
        data["tracking_number"] = generate_tracking_number()

    db_shipment = Shipment(**data)
    db.add(db_shipment)
    db.commit()
    db.refresh(db_shipment)
    return db_shipment


def update_shipment(
    db: Session, shipment_id: int, shipment: ShipmentUpdate
) -> Optional[Shipment]:
    db_shipment = get_shipment(db, shipment_id)
    if not db_shipment:
        return None

    update_data = shipment.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_shipment, field, value)

    db.commit()
    db.refresh(db_shipment)
    return db_shipment


def update_shipment_status(
    db: Session, shipment_id: int, status: ShipmentStatus
) -> Optional[Shipment]:
    db_shipment = get_shipment(db, shipment_id)
    if not db_shipment:
        return None

    db_shipment.status = status
    db.commit()
    db.refresh(db_shipment)
    return db_shipment


def delete_shipment(db: Session, shipment_id: int) -> bool:
    db_shipment = get_shipment(db, shipment_id)
    if not db_shipment:
        return False

    db.delete(db_shipment)
    db.commit()
    return True


# Tracking history is append-only: no update or delete helpers
def get_tracking_updates(db: Session, shipment_id: int) -> List[TrackingUpdate]:
    return (
        db.query(TrackingUpdate)
        .filter(TrackingUpdate.shipment_id == shipment_id)
        .order_by(TrackingUpdate.occurrence_time.desc(), TrackingUpdate.id.desc())
        .all()
    )


def add_tracking_update(
    db: Session, shipment_id: int, update: TrackingUpdateCreate
) -> TrackingUpdate:
    db_update = TrackingUpdate(
        shipment_id=shipment_id,
        location=update.location,
        status=update.status,
        description=update.description or None,
        occurrence_time=update.occurrence_time or datetime.utcnow(),
    )
    db.add(db_update)
    db.commit()
    db.refresh(db_update)
    return db_update


def get_shipment_images(db: Session, shipment_id: int) -> List[ShipmentImage]:
    return (
        db.query(ShipmentImage)
        .filter(ShipmentImage.shipment_id == shipment_id)
        .order_by(ShipmentImage.uploaded_at.desc(), ShipmentImage.id.desc())
        .all()
    )


def get_shipment_image(
    db: Session, shipment_id: int, image_id: int
) -> Optional[ShipmentImage]:
    return (
        db.query(ShipmentImage)
        .filter(ShipmentImage.id == image_id, ShipmentImage.shipment_id == shipment_id)
        .first()
    )


def create_shipment_image(
    db: Session,
    shipment_id: int,
    image_url: str,
    storage_path: Optional[str] = None,
    caption: Optional[str] = None,
) -> ShipmentImage:
    db_image = ShipmentImage(
        shipment_id=shipment_id,
        image_url=image_url,
        storage_path=storage_path,
        caption=caption,
    )
    db.add(db_image)
    db.commit()
    db.refresh(db_image)
    return db_image


def delete_shipment_image(db: Session, image: ShipmentImage) -> None:
    db.delete(image)
    db.commit()
