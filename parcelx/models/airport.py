from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime
from datetime import datetime

from parcelx.database import Base


class Airport(Base):
    __tablename__ = "airports"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(4), nullable=False, index=True)
    name = Column(String, nullable=False)
    city = Column(String, nullable=False)
    country = Column(String, nullable=False)
    country_code = Column(String(3), nullable=True)
    timezone = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
