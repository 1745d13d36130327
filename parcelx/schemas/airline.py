from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class AirlineBase(BaseModel):
    code: str = Field(..., min_length=2, max_length=3)
    name: str = Field(..., min_length=1)
    country: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: bool = True


class AirlineCreate(AirlineBase):
    pass


class AirlineUpdate(BaseModel):
    code: Optional[str] = Field(None, min_length=2, max_length=3)
    name: Optional[str] = None
    country: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: Optional[bool] = None


class AirlineResponse(AirlineBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
