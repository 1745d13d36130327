from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base


class Profile(Base):
    __tablename__ = "profiles"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=True)
    full_name = Column(String, index=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    country = Column(String, nullable=True)
    contact_address = Column(String, nullable=True)
    country_code = Column(String(6), nullable=True)
    phone_number = Column(String, nullable=True)
    receive_updates = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    shipments = relationship(
        "parcelx.models.shipment.Shipment", back_populates="user"
    )
    bookings = relationship(
        "parcelx.models.booking.FlightBooking", back_populates="user"
    )

    @property
    def display_name(self):
        if self.full_name:
            return self.full_name
        if self.first_name:
            return f"{self.first_name} {self.last_name or ''}".strip()
        return self.email or "Unknown"
