from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    Time,
    Boolean,
    DateTime,
    ForeignKey,
    JSON,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base


class Flight(Base):
    __tablename__ = "flights"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    flight_number = Column(String(20), nullable=False, index=True)
    airline_id = Column(Integer, ForeignKey("airlines.id"), nullable=False)
    departure_airport_id = Column(Integer, ForeignKey("airports.id"), nullable=False)
    arrival_airport_id = Column(Integer, ForeignKey("airports.id"), nullable=False)
    departure_time = Column(Time, nullable=False)
    arrival_time = Column(Time, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    aircraft_type = Column(String, nullable=True)

    base_price_economy = Column(Float, default=100)
    base_price_premium = Column(Float, default=250)
    base_price_business = Column(Float, default=800)
    base_price_first = Column(Float, default=2500)

    stops = Column(Integer, default=0)
    stop_airports = Column(JSON, default=list)
    days_of_week = Column(JSON, default=lambda: [1, 2, 3, 4, 5, 6, 7])  # 1 = Monday
    amenities = Column(JSON, default=list)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    airline = relationship("parcelx.models.airline.Airline", back_populates="flights")
    departure_airport = relationship(
        "parcelx.models.airport.Airport", foreign_keys=[departure_airport_id]
    )
    arrival_airport = relationship(
        "parcelx.models.airport.Airport", foreign_keys=[arrival_airport_id]
    )
