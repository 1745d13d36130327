from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
import logging

from parcelx.database import get_db
from parcelx.crud import booking as crud
from parcelx.enums.booking_status import BookingStatus, PaymentStatus
from parcelx.models.admin_profile import AdminProfile
from parcelx.models.booking import FlightBooking
from parcelx.schemas.booking import (
    BookingDetailResponse,
    BookingEmailRequest,
    BookingEmailResponse,
    BookingListResponse,
    BookingResponse,
    BookingUpdate,
)
from parcelx.services import payment_verification as workflow
from parcelx.services.auth import get_current_admin
from parcelx.services.email import (
    EmailDeliveryError,
    build_booking_payload,
    email_service,
)
from parcelx.utils.query_utils import DEFAULT_PAGE_SIZE, page_meta

logger = logging.getLogger(__name__)

router = APIRouter()


def booking_recipient(booking: FlightBooking) -> Optional[str]:
    if booking.contact_email:
        return booking.contact_email
    if booking.user is not None:
        return booking.user.email
    return None


def _run_transition(
    db: Session,
    booking_id: int,
    action: str,
    background_tasks: BackgroundTasks,
    notify: bool,
    admin: AdminProfile,
) -> FlightBooking:
    transition = getattr(workflow, action)
    try:
        booking = transition(db, booking_id)
    except workflow.BookingNotFoundError:
        raise HTTPException(status_code=404, detail="Booking not found")
    except workflow.BookingTransitionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except workflow.BookingUpdateError as e:
        raise HTTPException(status_code=502, detail=str(e))

    logger.info(f"Admin {admin.email} ran {action} on booking {booking_id}")

    notification_type = workflow.NOTIFICATION_FOR_ACTION.get(action)
    if notify and notification_type is not None:
        # Payload is built now; the task runs after the session is closed
        background_tasks.add_task(
            email_service.dispatch_booking_email,
            booking_recipient(booking),
            notification_type,
            build_booking_payload(booking),
        )
    return booking


@router.get("/", response_model=BookingListResponse)
def read_bookings(
    search: Optional[str] = None,
    status: Optional[BookingStatus] = None,
    payment_status: Optional[PaymentStatus] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    items, total = crud.get_bookings(
        db,
        search=search,
        status=status,
        payment_status=payment_status,
        page=page,
        page_size=page_size,
    )
    return {"items": items, "total": total, **page_meta(page, page_size)}


@router.get("/{booking_id}", response_model=BookingDetailResponse)
def read_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_booking = crud.get_booking(db, booking_id=booking_id)
    if db_booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return db_booking


@router.patch("/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: int,
    booking: BookingUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_booking = crud.update_booking(db, booking_id=booking_id, booking=booking)
    if db_booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return db_booking


@router.post("/{booking_id}/mark-paid", response_model=BookingResponse)
def mark_paid(
    booking_id: int,
    background_tasks: BackgroundTasks,
    notify: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _run_transition(
        db, booking_id, "mark_paid", background_tasks, notify, current_admin
    )


@router.post("/{booking_id}/mark-failed", response_model=BookingResponse)
def mark_failed(
    booking_id: int,
    background_tasks: BackgroundTasks,
    notify: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _run_transition(
        db, booking_id, "mark_failed", background_tasks, notify, current_admin
    )


@router.post("/{booking_id}/approve-payment", response_model=BookingResponse)
def approve_payment(
    booking_id: int,
    background_tasks: BackgroundTasks,
    notify: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _run_transition(
        db, booking_id, "approve_payment", background_tasks, notify, current_admin
    )


@router.post("/{booking_id}/reject-payment", response_model=BookingResponse)
def reject_payment(
    booking_id: int,
    background_tasks: BackgroundTasks,
    notify: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _run_transition(
        db, booking_id, "reject_payment", background_tasks, notify, current_admin
    )


@router.post("/{booking_id}/confirm", response_model=BookingResponse)
def confirm_booking(
    booking_id: int,
    background_tasks: BackgroundTasks,
    notify: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _run_transition(
        db, booking_id, "confirm_booking", background_tasks, notify, current_admin
    )


@router.post("/{booking_id}/cancel", response_model=BookingResponse)
def cancel_booking(
    booking_id: int,
    background_tasks: BackgroundTasks,
    confirm: bool = False,
    notify: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    """Cancelling must be acknowledged explicitly with `confirm=true`."""
    if not confirm:
        raise HTTPException(
            status_code=400,
            detail="Cancellation must be confirmed with confirm=true",
        )
    return _run_transition(
        db, booking_id, "cancel_booking", background_tasks, notify, current_admin
    )


@router.post("/{booking_id}/reset-payment", response_model=BookingResponse)
def reset_payment(
    booking_id: int,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _run_transition(
        db, booking_id, "reset_payment", background_tasks, False, current_admin
    )


@router.post("/{booking_id}/refund", response_model=BookingResponse)
def refund_payment(
    booking_id: int,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return _run_transition(
        db, booking_id, "refund_payment", background_tasks, False, current_admin
    )


@router.post("/{booking_id}/send-email", response_model=BookingEmailResponse)
def send_booking_email(
    booking_id: int,
    request: BookingEmailRequest,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_booking = crud.get_booking(db, booking_id=booking_id)
    if db_booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")

    to_email = request.to or booking_recipient(db_booking)
    if not to_email:
        raise HTTPException(
            status_code=400, detail="Booking has no contact email; provide 'to'"
        )

    try:
        email_service.send_booking_email(
            to_email, request.type, build_booking_payload(db_booking)
        )
    except EmailDeliveryError as e:
        raise HTTPException(status_code=502, detail=f"Failed to send email: {e}")

    return {"success": True, "message": f"Email sent to {to_email}"}
