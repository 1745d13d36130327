from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class AirportBase(BaseModel):
    code: str = Field(..., min_length=3, max_length=4)
    name: str = Field(..., min_length=1)
    city: str
    country: str
    country_code: Optional[str] = None
    timezone: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    is_active: bool = True


class AirportCreate(AirportBase):
    pass


class AirportUpdate(BaseModel):
    code: Optional[str] = Field(None, min_length=3, max_length=4)
    name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    timezone: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    is_active: Optional[bool] = None


class AirportResponse(AirportBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
