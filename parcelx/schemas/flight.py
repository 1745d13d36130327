from pydantic import BaseModel, Field, field_validator
from datetime import datetime, time
from typing import List, Optional


def _normalize_days(days):
    """ISO weekdays, 1 = Monday ... 7 = Sunday"""
    if any(day < 1 or day > 7 for day in days):
        raise ValueError("days_of_week must contain values between 1 and 7")
    return sorted(set(days))


class FlightBase(BaseModel):
    flight_number: str = Field(..., min_length=1)
    airline_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: time = time(8, 0)
    arrival_time: time = time(10, 0)
    duration_minutes: int = Field(120, ge=1)
    aircraft_type: Optional[str] = None
    base_price_economy: float = Field(100, ge=0)
    base_price_premium: float = Field(250, ge=0)
    base_price_business: float = Field(800, ge=0)
    base_price_first: float = Field(2500, ge=0)
    stops: int = Field(0, ge=0)
    stop_airports: List[int] = []
    days_of_week: List[int] = [1, 2, 3, 4, 5, 6, 7]
    amenities: List[str] = []
    is_active: bool = True

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, value):
        return _normalize_days(value)


class FlightCreate(FlightBase):
    pass


class FlightUpdate(BaseModel):
    flight_number: Optional[str] = Field(None, min_length=1)
    airline_id: Optional[int] = None
    departure_airport_id: Optional[int] = None
    arrival_airport_id: Optional[int] = None
    departure_time: Optional[time] = None
    arrival_time: Optional[time] = None
    duration_minutes: Optional[int] = Field(None, ge=1)
    aircraft_type: Optional[str] = None
    base_price_economy: Optional[float] = Field(None, ge=0)
    base_price_premium: Optional[float] = Field(None, ge=0)
    base_price_business: Optional[float] = Field(None, ge=0)
    base_price_first: Optional[float] = Field(None, ge=0)
    stops: Optional[int] = Field(None, ge=0)
    stop_airports: Optional[List[int]] = None
    days_of_week: Optional[List[int]] = None
    amenities: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, value):
        if value is None:
            return value
        return _normalize_days(value)


class FlightInDB(FlightBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FlightResponse(FlightInDB):
    pass


class FlightListResponse(BaseModel):
    items: List[FlightResponse]
    total: int
    page: int
    page_size: int
