"""
Tests for the booking payment-verification workflow
"""
import pytest
from datetime import datetime
from sqlalchemy.exc import SQLAlchemyError

from parcelx.crud import booking as booking_crud
from parcelx.enums.booking_status import BookingStatus, PaymentStatus
from parcelx.services import payment_verification as workflow


def test_approve_payment_confirms_and_marks_paid(db, booking):
    """{pending, pending} -> approve -> {confirmed, paid, verified_at set}"""
    now = datetime(2025, 3, 2, 9, 15)

    result = workflow.approve_payment(db, booking.id, now=now)

    assert result.status == BookingStatus.CONFIRMED
    assert result.payment_status == PaymentStatus.PAID
    assert result.verified_at == now


def test_approve_payment_is_a_single_update(db, booking, monkeypatch):
    calls = []
    original = booking_crud.apply_booking_changes

    def spy(db, booking_id, changes, blocked_statuses=()):
        calls.append(dict(changes))
        return original(db, booking_id, changes, blocked_statuses=blocked_statuses)

    monkeypatch.setattr(booking_crud, "apply_booking_changes", spy)

    workflow.approve_payment(db, booking.id)

    assert len(calls) == 1
    assert calls[0]["status"] == BookingStatus.CONFIRMED
    assert calls[0]["payment_status"] == PaymentStatus.PAID
    assert "verified_at" in calls[0]


def test_reject_payment_keeps_status(db, booking):
    """{pending, pending} -> reject -> {pending, failed}"""
    result = workflow.reject_payment(db, booking.id)

    assert result.status == BookingStatus.PENDING
    assert result.payment_status == PaymentStatus.FAILED
    assert result.verified_at is None


@pytest.mark.parametrize(
    "status",
    [BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.CANCELLED],
)
def test_reject_payment_never_changes_status(db, booking_factory, status):
    booking = booking_factory(reference=f"PX-R-{status.value}", status=status)

    result = workflow.reject_payment(db, booking.id)

    assert result.status == status
    assert result.payment_status == PaymentStatus.FAILED


def test_rejecting_confirmed_booking_leaves_it_confirmed(db, booking_factory):
    booking = booking_factory(
        reference="PX-CONF",
        status=BookingStatus.CONFIRMED,
        payment_status=PaymentStatus.PAID,
    )

    result = workflow.reject_payment(db, booking.id)

    assert result.status == BookingStatus.CONFIRMED
    assert result.payment_status == PaymentStatus.FAILED


def test_mark_paid_twice_only_refreshes_verified_at(db, booking):
    first = datetime(2025, 3, 2, 9, 0)
    second = datetime(2025, 3, 2, 10, 30)

    once = workflow.mark_paid(db, booking.id, now=first)
    snapshot = (once.status, once.payment_status, once.admin_notes)

    twice = workflow.mark_paid(db, booking.id, now=second)

    assert (twice.status, twice.payment_status, twice.admin_notes) == snapshot
    assert twice.payment_status == PaymentStatus.PAID
    assert twice.status == BookingStatus.PENDING
    assert twice.verified_at == second


def test_mark_failed_leaves_status(db, booking_factory):
    booking = booking_factory(reference="PX-MF", status=BookingStatus.CONFIRMED)

    result = workflow.mark_failed(db, booking.id)

    assert result.status == BookingStatus.CONFIRMED
    assert result.payment_status == PaymentStatus.FAILED


def test_cancelling_cancelled_booking_is_a_no_op(db, booking_factory):
    booking = booking_factory(
        reference="PX-CXL",
        status=BookingStatus.CANCELLED,
        payment_status=PaymentStatus.FAILED,
    )

    result = workflow.cancel_booking(db, booking.id)

    assert result.status == BookingStatus.CANCELLED
    assert result.payment_status == PaymentStatus.FAILED


def test_cancel_then_confirm_is_refused(db, booking):
    workflow.cancel_booking(db, booking.id)

    with pytest.raises(workflow.BookingTransitionError) as exc_info:
        workflow.confirm_booking(db, booking.id)

    assert "cancelled" in str(exc_info.value)
    db.refresh(booking)
    assert booking.status == BookingStatus.CANCELLED


def test_approve_payment_refused_for_cancelled_booking(db, booking_factory):
    booking = booking_factory(reference="PX-APC", status=BookingStatus.CANCELLED)

    with pytest.raises(workflow.BookingTransitionError):
        workflow.approve_payment(db, booking.id)

    db.refresh(booking)
    assert booking.status == BookingStatus.CANCELLED
    assert booking.payment_status == PaymentStatus.PENDING
    assert booking.verified_at is None


def test_completed_booking_cannot_be_cancelled(db, booking_factory):
    booking = booking_factory(reference="PX-DONE", status=BookingStatus.COMPLETED)

    with pytest.raises(workflow.BookingTransitionError):
        workflow.cancel_booking(db, booking.id)


def test_confirm_booking_ignores_payment_status(db, booking_factory):
    booking = booking_factory(reference="PX-UNPAID", payment_status=PaymentStatus.UNPAID)

    result = workflow.confirm_booking(db, booking.id)

    assert result.status == BookingStatus.CONFIRMED
    assert result.payment_status == PaymentStatus.UNPAID


def test_reset_and_refund_payment(db, booking_factory):
    booking = booking_factory(reference="PX-RST", payment_status=PaymentStatus.FAILED)

    assert workflow.reset_payment(db, booking.id).payment_status == PaymentStatus.PENDING
    assert workflow.refund_payment(db, booking.id).payment_status == PaymentStatus.REFUNDED


def test_failed_payment_is_not_reset_automatically(db, booking):
    workflow.reject_payment(db, booking.id)
    workflow.confirm_booking(db, booking.id)

    db.refresh(booking)
    assert booking.payment_status == PaymentStatus.FAILED


def test_transition_on_missing_booking(db):
    with pytest.raises(workflow.BookingNotFoundError):
        workflow.mark_paid(db, 9999)


def test_transition_stamps_updated_at(db, booking):
    before = booking.updated_at

    result = workflow.mark_failed(db, booking.id)

    assert result.updated_at >= before


def test_store_failure_is_surfaced_and_rolled_back(db, booking, monkeypatch):
    def broken(*args, **kwargs):
        raise SQLAlchemyError("connection to server was lost")

    monkeypatch.setattr(booking_crud, "apply_booking_changes", broken)

    with pytest.raises(workflow.BookingUpdateError) as exc_info:
        workflow.approve_payment(db, booking.id)

    assert "connection to server was lost" in str(exc_info.value)
    db.refresh(booking)
    assert booking.status == BookingStatus.PENDING
    assert booking.payment_status == PaymentStatus.PENDING
