from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging

from parcelx.enums.notification_type import NotificationType
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.booking import BookingEmailSnapshot
from parcelx.services.auth import get_current_admin
from parcelx.services.email import EmailDeliveryError, email_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _describe_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'booking'}: {item['msg']}"
        for item in error.errors()
    )


@router.post("/send-booking-email")
def send_booking_email(
    payload: dict = Body(...),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    """
    Send one booking email from a client-supplied booking snapshot.

    Body: `{to, type, booking}` where booking carries the fields the
    templates render (reference, prices, passengers, flight).
    """
    to_email = payload.get("to")
    email_type = payload.get("type")
    booking = payload.get("booking")

    if not to_email or not email_type or not booking:
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields: to, type, booking"},
        )

    try:
        notification_type = NotificationType(email_type)
    except ValueError:
        return JSONResponse(
            status_code=400, content={"error": f"Unknown email type: {email_type}"}
        )

    try:
        snapshot = BookingEmailSnapshot.model_validate(booking)
    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"error": f"Invalid booking data: {_describe_errors(e)}"},
        )

    try:
        email_service.send_booking_email(
            to_email, notification_type, snapshot.model_dump()
        )
    except EmailDeliveryError as e:
        logger.error(f"Email send error: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to send email", "details": str(e)},
        )

    return {"success": True, "message": "Email sent successfully"}


@router.get("/email/test-connection")
def test_email_connection(current_admin: AdminProfile = Depends(get_current_admin)):
    return email_service.test_connection()
