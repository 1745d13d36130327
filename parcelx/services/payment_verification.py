"""
Booking payment-verification workflow.

Every admin action is one UPDATE against `flight_bookings`; nothing is
cached in the process, so the store is the only source of truth. Transitions
are deliberately permissive about the pairing of `status` and
`payment_status` (rejecting a payment leaves a confirmed booking confirmed).

status:         pending -> confirmed -> cancelled, nothing leaves cancelled,
                completed is never set here.
payment_status: unpaid|pending -> paid, any -> failed, any -> pending (reset).
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from parcelx.crud import booking as booking_crud
from parcelx.enums.booking_status import BookingStatus, PaymentStatus
from parcelx.enums.notification_type import NotificationType
from parcelx.models.booking import FlightBooking

logger = logging.getLogger(__name__)

# A booking in one of these states can no longer become confirmed
NON_CONFIRMABLE_STATUSES = (BookingStatus.CANCELLED, BookingStatus.COMPLETED)
NON_CANCELLABLE_STATUSES = (BookingStatus.COMPLETED,)

# Email that matches each admin action when the caller opts in to notify
NOTIFICATION_FOR_ACTION = {
    "mark_paid": NotificationType.PAYMENT_APPROVED,
    "approve_payment": NotificationType.PAYMENT_APPROVED,
    "mark_failed": NotificationType.PAYMENT_REJECTED,
    "reject_payment": NotificationType.PAYMENT_REJECTED,
    "confirm_booking": NotificationType.BOOKING_CONFIRMED,
    "cancel_booking": NotificationType.BOOKING_CANCELLED,
}


class BookingNotFoundError(LookupError):
    pass


class BookingTransitionError(ValueError):
    pass


class BookingUpdateError(RuntimeError):
    """The store rejected the update; the message is surfaced verbatim."""


def _apply(
    db: Session,
    booking_id: int,
    action: str,
    changes: Dict[str, Any],
    blocked_statuses: Iterable[BookingStatus] = (),
) -> FlightBooking:
    blocked_statuses = tuple(blocked_statuses)
    try:
        updated = booking_crud.apply_booking_changes(
            db, booking_id, changes, blocked_statuses=blocked_statuses
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Booking %s: %s failed: %s", booking_id, action, e)
        raise BookingUpdateError(str(e)) from e

    booking = booking_crud.get_booking(db, booking_id)
    if booking is None:
        raise BookingNotFoundError(f"Booking {booking_id} not found")

    if not updated:
        # Row exists, so the status guard is what filtered it out
        raise BookingTransitionError(
            f"Cannot {action.replace('_', ' ')}: booking is {booking.status.value}"
        )

    logger.info(
        "Booking %s (%s): %s -> status=%s payment_status=%s",
        booking_id,
        booking.booking_reference,
        action,
        booking.status.value,
        booking.payment_status.value,
    )
    return booking


def mark_paid(db: Session, booking_id: int, now: Optional[datetime] = None) -> FlightBooking:
    """Mark the payment as verified. Repeating it only refreshes verified_at."""
    return _apply(
        db,
        booking_id,
        "mark_paid",
        {
            "payment_status": PaymentStatus.PAID,
            "verified_at": now or datetime.utcnow(),
        },
    )


def mark_failed(db: Session, booking_id: int) -> FlightBooking:
    return _apply(
        db, booking_id, "mark_failed", {"payment_status": PaymentStatus.FAILED}
    )


def approve_payment(
    db: Session, booking_id: int, now: Optional[datetime] = None
) -> FlightBooking:
    """
    Accept the submitted payment proof: paid + confirmed + verified_at in a
    single update. Cancelled or completed bookings are refused.
    """
    return _apply(
        db,
        booking_id,
        "approve_payment",
        {
            "payment_status": PaymentStatus.PAID,
            "status": BookingStatus.CONFIRMED,
            "verified_at": now or datetime.utcnow(),
        },
        blocked_statuses=NON_CONFIRMABLE_STATUSES,
    )


def reject_payment(db: Session, booking_id: int) -> FlightBooking:
    # Only the payment side changes; the booking is not cancelled automatically
    return _apply(
        db, booking_id, "reject_payment", {"payment_status": PaymentStatus.FAILED}
    )


def confirm_booking(db: Session, booking_id: int) -> FlightBooking:
    return _apply(
        db,
        booking_id,
        "confirm_booking",
        {"status": BookingStatus.CONFIRMED},
        blocked_statuses=NON_CONFIRMABLE_STATUSES,
    )


def cancel_booking(db: Session, booking_id: int) -> FlightBooking:
    # Re-cancelling re-applies the same value
    return _apply(
        db,
        booking_id,
        "cancel_booking",
        {"status": BookingStatus.CANCELLED},
        blocked_statuses=NON_CANCELLABLE_STATUSES,
    )


def reset_payment(db: Session, booking_id: int) -> FlightBooking:
    return _apply(
        db, booking_id, "reset_payment", {"payment_status": PaymentStatus.PENDING}
    )


def refund_payment(db: Session, booking_id: int) -> FlightBooking:
    return _apply(
        db, booking_id, "refund_payment", {"payment_status": PaymentStatus.REFUNDED}
    )
