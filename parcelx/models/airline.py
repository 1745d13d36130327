from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base


class Airline(Base):
    __tablename__ = "airlines"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(3), nullable=False, index=True)
    name = Column(String, nullable=False)
    country = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    flights = relationship("parcelx.models.flight.Flight", back_populates="airline")
