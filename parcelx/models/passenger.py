from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base, enum_values
from parcelx.enums.booking_status import PassengerType


class FlightPassenger(Base):
    __tablename__ = "flight_passengers"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(
        Integer, ForeignKey("flight_bookings.id"), nullable=False, index=True
    )
    title = Column(String(10), nullable=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    passenger_type = Column(
        Enum(PassengerType, native_enum=False, values_callable=enum_values, length=10),
        default=PassengerType.ADULT,
    )
    date_of_birth = Column(Date, nullable=True)
    nationality = Column(String, nullable=True)
    passport_number = Column(String, nullable=True)
    passport_expiry = Column(Date, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    booking = relationship(
        "parcelx.models.booking.FlightBooking", back_populates="passengers"
    )
