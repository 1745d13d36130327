from pydantic import BaseModel, EmailStr, Field
from datetime import date, datetime, time
from typing import List, Optional

from parcelx.enums.booking_status import (
    BookingStatus,
    PaymentStatus,
    TripType,
    CabinClass,
    PassengerType,
)
from parcelx.enums.notification_type import NotificationType


class PassengerResponse(BaseModel):
    id: int
    title: Optional[str] = None
    first_name: str
    last_name: str
    passenger_type: PassengerType = PassengerType.ADULT
    date_of_birth: Optional[date] = None
    nationality: Optional[str] = None
    passport_number: Optional[str] = None
    passport_expiry: Optional[date] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class BookingBase(BaseModel):
    booking_reference: str
    eticket_number: Optional[str] = None
    user_id: Optional[int] = None
    outbound_flight_id: Optional[int] = None
    return_flight_id: Optional[int] = None
    trip_type: TripType = TripType.ONE_WAY
    cabin_class: CabinClass = CabinClass.ECONOMY
    departure_date: Optional[date] = None
    return_date: Optional[date] = None
    total_passengers: int = 1
    total_price: float = 0.0
    taxes_fees: float = 0.0
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID


class BookingUpdate(BaseModel):
    """Fields an admin may edit by hand, outside the payment workflow"""

    admin_notes: Optional[str] = None
    eticket_number: Optional[str] = None


class BookingResponse(BookingBase):
    id: int
    payment_crypto_name: Optional[str] = None
    payment_crypto_symbol: Optional[str] = None
    payment_network_type: Optional[str] = None
    payment_amount_crypto: Optional[str] = None
    payment_proof_url: Optional[str] = None
    payment_submitted_at: Optional[datetime] = None
    verified_at: Optional[datetime] = None
    admin_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BookingFlightAirport(BaseModel):
    code: str
    name: str
    city: str
    country: str

    class Config:
        from_attributes = True


class BookingFlightAirline(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True


class BookingFlight(BaseModel):
    id: int
    flight_number: str
    departure_time: time
    arrival_time: time
    duration_minutes: int
    aircraft_type: Optional[str] = None
    airline: Optional[BookingFlightAirline] = None
    departure_airport: Optional[BookingFlightAirport] = None
    arrival_airport: Optional[BookingFlightAirport] = None

    class Config:
        from_attributes = True


class BookingCustomer(BaseModel):
    id: int
    email: Optional[str] = None
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    country: Optional[str] = None

    class Config:
        from_attributes = True


class BookingDetailResponse(BookingResponse):
    user: Optional[BookingCustomer] = None
    outbound_flight: Optional[BookingFlight] = None
    return_flight: Optional[BookingFlight] = None
    passengers: List[PassengerResponse] = []


class BookingListResponse(BaseModel):
    items: List[BookingResponse]
    total: int
    page: int
    page_size: int


class BookingEmailRequest(BaseModel):
    type: NotificationType
    # Defaults to the booking contact_email
    to: Optional[EmailStr] = None


class BookingEmailResponse(BaseModel):
    success: bool
    message: str = Field(default="")


class EmailSnapshotAirline(BaseModel):
    name: Optional[str] = None


class EmailSnapshotAirport(BaseModel):
    city: Optional[str] = None
    code: Optional[str] = None


class EmailSnapshotFlight(BaseModel):
    flight_number: Optional[str] = None
    departure_time: Optional[str] = None  # "HH:MM"
    arrival_time: Optional[str] = None
    airline: Optional[EmailSnapshotAirline] = None
    departure_airport: Optional[EmailSnapshotAirport] = None
    arrival_airport: Optional[EmailSnapshotAirport] = None


class EmailSnapshotPassenger(BaseModel):
    title: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    passenger_type: Optional[str] = None
    passport_number: Optional[str] = None


class BookingEmailSnapshot(BaseModel):
    """
    Client-supplied booking data for `POST /send-booking-email`.

    Same shape as the payload built from a stored booking; every field is
    optional and missing values render as template defaults.
    """

    booking_reference: Optional[str] = None
    eticket_number: Optional[str] = None
    departure_date: Optional[str] = None  # ISO date
    return_date: Optional[str] = None
    cabin_class: Optional[str] = None
    total_passengers: Optional[int] = Field(None, ge=0)
    total_price: Optional[float] = None
    taxes_fees: Optional[float] = None
    payment_crypto_name: Optional[str] = None
    payment_network_type: Optional[str] = None
    contact_email: Optional[str] = None
    passengers: List[EmailSnapshotPassenger] = []
    flight: Optional[EmailSnapshotFlight] = None
