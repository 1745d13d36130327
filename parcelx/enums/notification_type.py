from enum import Enum


class NotificationType(str, Enum):
    BOOKING_CONFIRMED = "booking_confirmed"
    PAYMENT_APPROVED = "payment_approved"
    BOOKING_CANCELLED = "booking_cancelled"
    PAYMENT_REJECTED = "payment_rejected"
