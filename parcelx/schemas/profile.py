from pydantic import BaseModel, EmailStr
from datetime import datetime
from typing import List, Optional


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    country: Optional[str] = None
    contact_address: Optional[str] = None
    country_code: Optional[str] = None
    phone_number: Optional[str] = None
    receive_updates: Optional[bool] = None


class ProfileResponse(BaseModel):
    id: int
    email: Optional[str] = None
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None
    country: Optional[str] = None
    contact_address: Optional[str] = None
    country_code: Optional[str] = None
    phone_number: Optional[str] = None
    receive_updates: bool = False
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProfileListResponse(BaseModel):
    items: List[ProfileResponse]
    total: int
    page: int
    page_size: int
