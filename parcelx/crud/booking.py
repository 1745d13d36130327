from sqlalchemy.orm import Session
from typing import Any, Dict, Iterable, List, Optional, Tuple
from datetime import datetime

from parcelx.models.booking import FlightBooking
from parcelx.models.passenger import FlightPassenger
from parcelx.enums.booking_status import BookingStatus, PaymentStatus
from parcelx.schemas.booking import BookingUpdate
from parcelx.utils.query_utils import apply_search, paginate, DEFAULT_PAGE_SIZE


def get_booking(db: Session, booking_id: int) -> Optional[FlightBooking]:
    return db.query(FlightBooking).filter(FlightBooking.id == booking_id).first()


def get_bookings(
    db: Session,
    search: Optional[str] = None,
    status: Optional[BookingStatus] = None,
    payment_status: Optional[PaymentStatus] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Tuple[List[FlightBooking], int]:
    query = db.query(FlightBooking)

    query = apply_search(
        query,
        search,
        [
            FlightBooking.booking_reference,
            FlightBooking.contact_email,
            FlightBooking.contact_phone,
        ],
    )
    if status:
        query = query.filter(FlightBooking.status == status)
    if payment_status:
        query = query.filter(FlightBooking.payment_status == payment_status)

    query = query.order_by(FlightBooking.created_at.desc(), FlightBooking.id.desc())
    return paginate(query, page, page_size)


def get_booking_passengers(db: Session, booking_id: int) -> List[FlightPassenger]:
    return (
        db.query(FlightPassenger)
        .filter(FlightPassenger.booking_id == booking_id)
        .order_by(FlightPassenger.created_at, FlightPassenger.id)
        .all()
    )


def update_booking(
    db: Session, booking_id: int, booking: BookingUpdate
) -> Optional[FlightBooking]:
    db_booking = get_booking(db, booking_id)
    if not db_booking:
        return None

    update_data = booking.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_booking, field, value)

    db.commit()
    db.refresh(db_booking)
    return db_booking


def apply_booking_changes(
    db: Session,
    booking_id: int,
    changes: Dict[str, Any],
    blocked_statuses: Iterable[BookingStatus] = (),
) -> int:
    """
    Apply `changes` to one booking as a single UPDATE statement.

    Rows whose current status is in `blocked_statuses` are left untouched, so
    the guard and the write happen atomically in the database.

    Returns:
        Number of rows updated (0 or 1)
    """
    values = dict(changes)
    values["updated_at"] = datetime.utcnow()

    query = db.query(FlightBooking).filter(FlightBooking.id == booking_id)
    blocked = list(blocked_statuses)
    if blocked:
        query = query.filter(FlightBooking.status.notin_(blocked))

    updated = query.update(values, synchronize_session=False)
    db.commit()
    return updated
