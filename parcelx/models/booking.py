from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    Date,
    DateTime,
    Text,
    ForeignKey,
    Enum,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base, enum_values
from parcelx.enums.booking_status import (
    BookingStatus,
    PaymentStatus,
    TripType,
    CabinClass,
)


class FlightBooking(Base):
    __tablename__ = "flight_bookings"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    booking_reference = Column(String(20), unique=True, index=True, nullable=False)
    eticket_number = Column(String(30), nullable=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=True)
    outbound_flight_id = Column(Integer, ForeignKey("flights.id"), nullable=True)
    return_flight_id = Column(Integer, ForeignKey("flights.id"), nullable=True)

    trip_type = Column(
        Enum(TripType, native_enum=False, values_callable=enum_values, length=20),
        default=TripType.ONE_WAY,
    )
    cabin_class = Column(
        Enum(CabinClass, native_enum=False, values_callable=enum_values, length=20),
        default=CabinClass.ECONOMY,
    )
    departure_date = Column(Date, nullable=True)
    return_date = Column(Date, nullable=True)
    total_passengers = Column(Integer, default=1)
    total_price = Column(Float, default=0.0)
    taxes_fees = Column(Float, default=0.0)

    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)

    status = Column(
        Enum(BookingStatus, native_enum=False, values_callable=enum_values, length=20),
        default=BookingStatus.PENDING,
        nullable=False,
        index=True,
    )
    payment_status = Column(
        Enum(PaymentStatus, native_enum=False, values_callable=enum_values, length=20),
        default=PaymentStatus.UNPAID,
        nullable=False,
        index=True,
    )

    # Crypto payment submitted by the customer at checkout
    payment_crypto_name = Column(String, nullable=True)
    payment_crypto_symbol = Column(String, nullable=True)
    payment_network_type = Column(String, nullable=True)
    payment_amount_crypto = Column(String, nullable=True)
    payment_proof_url = Column(String, nullable=True)
    payment_submitted_at = Column(DateTime, nullable=True)
    verified_at = Column(DateTime, nullable=True)

    admin_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = relationship("parcelx.models.profile.Profile", back_populates="bookings")
    outbound_flight = relationship(
        "parcelx.models.flight.Flight", foreign_keys=[outbound_flight_id]
    )
    return_flight = relationship(
        "parcelx.models.flight.Flight", foreign_keys=[return_flight_id]
    )
    passengers = relationship(
        "parcelx.models.passenger.FlightPassenger",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="FlightPassenger.created_at",
    )
