"""
Tests for booking email rendering and the send-booking-email endpoint
"""
import json
import pytest
from datetime import date

from parcelx.enums.notification_type import NotificationType
from parcelx.routers import notifications
from parcelx.services.email import (
    build_booking_payload,
    email_service,
    render_booking_email,
)


def _body(response):
    return json.loads(response.body)


def test_confirmed_email_renders_booking_fields(booking):
    payload = build_booking_payload(booking)

    subject, html = render_booking_email(
        NotificationType.BOOKING_CONFIRMED, payload, today=date(2025, 3, 2)
    )

    assert subject == "E-Ticket Receipt - PX-7Q2K"
    assert "PX-7Q2K" in html
    assert "Pending" in html  # no e-ticket number yet
    assert "02 Mar 2025" in html
    assert "14 Mar 2025" in html
    assert "Business" in html
    assert "$1100.00" in html  # base fare = total - taxes
    assert "$150.00" in html
    assert "$1250.00" in html
    assert "Tether (TRC20)" in html
    assert "Skyline Air" in html
    assert "Nairobi (NBO)" in html
    assert "Dubai (DXB)" in html
    assert "09:30" in html and "15:45" in html
    assert "Ms Jane Traveller" in html
    assert "Passport: A1234567" in html
    assert "Child" in html
    assert "{" not in html.split("<style")[0]


def test_missing_fields_fall_back_to_defaults():
    subject, html = render_booking_email(
        "payment_approved",
        {"booking_reference": "PX-MIN", "total_price": 99.5},
    )

    assert subject == "Payment Confirmed - PX-MIN"
    assert "$99.50" in html
    assert "Crypto" in html


def test_confirmed_email_without_flight_uses_defaults():
    _, html = render_booking_email(
        NotificationType.BOOKING_CONFIRMED,
        {"booking_reference": "PX-NOFLT", "total_price": 10, "passengers": []},
    )

    assert "ParcelX Airways" in html
    assert "No passenger details available" in html
    assert "N/A" in html


def test_booking_values_are_escaped():
    _, html = render_booking_email(
        NotificationType.BOOKING_CANCELLED,
        {"booking_reference": "<script>x</script>", "total_price": 0},
    )

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        render_booking_email("ticket_upgraded", {"booking_reference": "PX-1"})


@pytest.mark.parametrize(
    "notification_type,subject_prefix",
    [
        (NotificationType.BOOKING_CONFIRMED, "E-Ticket Receipt"),
        (NotificationType.PAYMENT_APPROVED, "Payment Confirmed"),
        (NotificationType.BOOKING_CANCELLED, "Booking Cancelled"),
        (NotificationType.PAYMENT_REJECTED, "Payment Issue"),
    ],
)
def test_each_type_has_its_subject(notification_type, subject_prefix):
    subject, _ = render_booking_email(notification_type, {"booking_reference": "PX-9"})

    assert subject == f"{subject_prefix} - PX-9"


def test_send_booking_email_endpoint_success(staff_admin, fake_smtp):
    response = notifications.send_booking_email(
        payload={
            "to": "jane@example.com",
            "type": "payment_rejected",
            "booking": {"booking_reference": "PX-API", "total_price": 300},
        },
        current_admin=staff_admin,
    )

    assert response == {"success": True, "message": "Email sent successfully"}
    msg = fake_smtp.sent[0]
    assert msg["Subject"] == "Payment Issue - PX-API"
    assert msg["From"] == "flights@parcelx.test"


@pytest.mark.parametrize("missing", ["to", "type", "booking"])
def test_send_booking_email_missing_fields(staff_admin, fake_smtp, missing):
    payload = {
        "to": "jane@example.com",
        "type": "booking_confirmed",
        "booking": {"booking_reference": "PX-API"},
    }
    payload.pop(missing)

    response = notifications.send_booking_email(payload=payload, current_admin=staff_admin)

    assert response.status_code == 400
    assert _body(response) == {"error": "Missing required fields: to, type, booking"}
    assert fake_smtp.sent == []


def test_send_booking_email_unknown_type(staff_admin, fake_smtp):
    response = notifications.send_booking_email(
        payload={
            "to": "jane@example.com",
            "type": "seat_upgrade",
            "booking": {"booking_reference": "PX-API"},
        },
        current_admin=staff_admin,
    )

    assert response.status_code == 400
    assert _body(response) == {"error": "Unknown email type: seat_upgrade"}


def test_send_booking_email_smtp_failure(staff_admin, fake_smtp):
    fake_smtp.fail = True

    response = notifications.send_booking_email(
        payload={
            "to": "jane@example.com",
            "type": "booking_cancelled",
            "booking": {"booking_reference": "PX-API"},
        },
        current_admin=staff_admin,
    )

    assert response.status_code == 500
    body = _body(response)
    assert body["error"] == "Failed to send email"
    assert "relay access denied" in body["details"]


def test_dispatch_never_raises(fake_smtp):
    fake_smtp.fail = True

    sent = email_service.dispatch_booking_email(
        "jane@example.com", NotificationType.PAYMENT_APPROVED, {"booking_reference": "PX-BG"}
    )

    assert sent is False


def test_dispatch_without_recipient_is_skipped(fake_smtp):
    sent = email_service.dispatch_booking_email(
        None, NotificationType.PAYMENT_APPROVED, {"booking_reference": "PX-BG"}
    )

    assert sent is False
    assert fake_smtp.sent == []


def test_error_email_requires_recipients(monkeypatch, fake_smtp):
    monkeypatch.setattr(email_service, "to_addrs", [])

    assert email_service.send_error_email({"path": "/bookings"}) is False

    monkeypatch.setattr(email_service, "to_addrs", ["oncall@parcelx.test"])
    try:
        raise RuntimeError("database unreachable")
    except RuntimeError as exc:
        sent = email_service.send_error_email(
            {"path": "/bookings", "method": "GET", "exception": exc}
        )

    assert sent is True
    assert fake_smtp.sent[-1]["To"] == "oncall@parcelx.test"


def _send(booking, email_type="payment_approved"):
    return notifications.send_booking_email(
        payload={"to": "jane@example.com", "type": email_type, "booking": booking},
        current_admin=None,
    )


def test_bad_price_is_reported_as_invalid_field(fake_smtp):
    response = _send({"booking_reference": "PX-BAD", "total_price": "abc"})

    assert response.status_code == 400
    error = _body(response)["error"]
    assert error.startswith("Invalid booking data")
    assert "total_price" in error
    assert "Unknown email type" not in error
    assert fake_smtp.sent == []


def test_numeric_strings_are_accepted(fake_smtp):
    response = _send({"booking_reference": "PX-STR", "total_price": "420.5"})

    assert response == {"success": True, "message": "Email sent successfully"}
    assert fake_smtp.sent[0]["Subject"] == "Payment Confirmed - PX-STR"


@pytest.mark.parametrize(
    "booking,field",
    [
        ({"booking_reference": "PX-P", "passengers": ["Jane"]}, "passengers.0"),
        ({"booking_reference": "PX-P", "passengers": "Jane, Tom"}, "passengers"),
        ({"booking_reference": "PX-F", "flight": "SK101"}, "flight"),
        ({"booking_reference": "PX-F", "flight": {"airline": "Skyline"}}, "flight.airline"),
        ("PX-7Q2K", "booking"),
    ],
)
def test_malformed_snapshot_shapes_return_400(fake_smtp, booking, field):
    response = _send(booking, email_type="booking_confirmed")

    assert response.status_code == 400
    assert f"{field}:" in _body(response)["error"]
    assert fake_smtp.sent == []


def test_unknown_type_checked_before_snapshot(fake_smtp):
    response = _send({"total_price": "abc"}, email_type="seat_upgrade")

    assert response.status_code == 400
    assert _body(response) == {"error": "Unknown email type: seat_upgrade"}
