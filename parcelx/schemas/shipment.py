from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import List, Optional

from parcelx.enums.shipment_options import (
    ShipmentStatus,
    PackageType,
    ShippingMethod,
    ServiceLevel,
    InsuranceType,
)


class ShipmentBase(BaseModel):
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    status: ShipmentStatus = ShipmentStatus.PENDING
    user_id: Optional[int] = None
    estimated_delivery: Optional[datetime] = None

    sender_name: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_email: Optional[EmailStr] = None
    sender_address: Optional[str] = None
    sender_city: Optional[str] = None
    sender_state: Optional[str] = None
    sender_postal_code: Optional[str] = None
    sender_country: Optional[str] = None

    receiver_name: Optional[str] = None
    receiver_phone: Optional[str] = None
    receiver_email: Optional[EmailStr] = None
    receiver_address: Optional[str] = None
    receiver_city: Optional[str] = None
    receiver_state: Optional[str] = None
    receiver_postal_code: Optional[str] = None
    receiver_country: Optional[str] = None

    weight: Optional[float] = Field(None, ge=0)
    dimensions: Optional[str] = None
    package_type: Optional[PackageType] = PackageType.STANDARD
    shipping_method: Optional[ShippingMethod] = ShippingMethod.STANDARD
    service_level: Optional[ServiceLevel] = ServiceLevel.STANDARD
    notes: Optional[str] = None
    special_instructions: Optional[str] = None
    declared_value: Optional[float] = Field(None, ge=0)
    is_fragile: bool = False
    requires_signature: bool = False

    item_name: Optional[str] = None
    item_quantity: int = Field(1, ge=1)
    item_category: Optional[str] = None
    contents_description: Optional[str] = None
    customs_value: Optional[float] = Field(None, ge=0)
    customs_currency: str = "USD"
    hs_code: Optional[str] = None
    country_of_origin: Optional[str] = None
    is_gift: bool = False
    insurance_value: Optional[float] = Field(None, ge=0)
    insurance_type: Optional[InsuranceType] = InsuranceType.NONE


class ShipmentCreate(ShipmentBase):
    # Generated server-side when omitted (PKX-<base36 timestamp>)
    tracking_number: Optional[str] = None


class ShipmentUpdate(BaseModel):
    tracking_number: Optional[str] = Field(None, min_length=1)
    origin: Optional[str] = Field(None, min_length=1)
    destination: Optional[str] = Field(None, min_length=1)
    status: Optional[ShipmentStatus] = None
    user_id: Optional[int] = None
    estimated_delivery: Optional[datetime] = None

    sender_name: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_email: Optional[EmailStr] = None
    receiver_name: Optional[str] = None
    receiver_phone: Optional[str] = None
    receiver_email: Optional[EmailStr] = None

    weight: Optional[float] = Field(None, ge=0)
    dimensions: Optional[str] = None
    package_type: Optional[PackageType] = None
    shipping_method: Optional[ShippingMethod] = None
    notes: Optional[str] = None
    declared_value: Optional[float] = Field(None, ge=0)


class ShipmentStatusUpdate(BaseModel):
    status: ShipmentStatus


class ShipmentInDB(ShipmentBase):
    id: int
    tracking_number: str
    # Stored rows may predate e-mail validation
    sender_email: Optional[str] = None
    receiver_email: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ShipmentResponse(ShipmentInDB):
    pass


class ShipmentListResponse(BaseModel):
    items: List[ShipmentResponse]
    total: int
    page: int
    page_size: int


class TrackingUpdateCreate(BaseModel):
    location: str = Field(..., min_length=1)
    status: ShipmentStatus = ShipmentStatus.IN_TRANSIT
    description: Optional[str] = None
    occurrence_time: Optional[datetime] = None


class TrackingUpdateResponse(BaseModel):
    id: int
    shipment_id: int
    location: str
    status: ShipmentStatus
    description: Optional[str] = None
    occurrence_time: datetime

    class Config:
        from_attributes = True


class ShipmentImageResponse(BaseModel):
    id: int
    shipment_id: int
    image_url: str
    caption: Optional[str] = None
    uploaded_at: datetime

    class Config:
        from_attributes = True


class ImageUploadResponse(BaseModel):
    uploaded: int
    total: int
    images: List[ShipmentImageResponse]
