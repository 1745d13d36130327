from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    Boolean,
    DateTime,
    Text,
    ForeignKey,
    Enum,
)
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base, enum_values
from parcelx.enums.shipment_options import (
    ShipmentStatus,
    PackageType,
    ShippingMethod,
    ServiceLevel,
    InsuranceType,
)


class Shipment(Base):
    __tablename__ = "shipments"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    tracking_number = Column(String(40), unique=True, index=True, nullable=False)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=True)
    status = Column(
        Enum(ShipmentStatus, native_enum=False, values_callable=enum_values, length=30),
        default=ShipmentStatus.PENDING,
        nullable=False,
        index=True,
    )
    origin = Column(String, nullable=False)
    destination = Column(String, nullable=False)
    estimated_delivery = Column(DateTime, nullable=True)

    # Sender
    sender_name = Column(String, nullable=True)
    sender_phone = Column(String, nullable=True)
    sender_email = Column(String, nullable=True)
    sender_address = Column(String, nullable=True)
    sender_city = Column(String, nullable=True)
    sender_state = Column(String, nullable=True)
    sender_postal_code = Column(String, nullable=True)
    sender_country = Column(String, nullable=True)

    # Receiver
    receiver_name = Column(String, nullable=True)
    receiver_phone = Column(String, nullable=True)
    receiver_email = Column(String, nullable=True)
    receiver_address = Column(String, nullable=True)
    receiver_city = Column(String, nullable=True)
    receiver_state = Column(String, nullable=True)
    receiver_postal_code = Column(String, nullable=True)
    receiver_country = Column(String, nullable=True)

    # Package
    weight = Column(Float, nullable=True)
    dimensions = Column(String, nullable=True)
    package_type = Column(
        Enum(PackageType, native_enum=False, values_callable=enum_values, length=20),
        default=PackageType.STANDARD,
        nullable=True,
    )
    shipping_method = Column(
        Enum(ShippingMethod, native_enum=False, values_callable=enum_values, length=20),
        default=ShippingMethod.STANDARD,
        nullable=True,
    )
    service_level = Column(
        Enum(ServiceLevel, native_enum=False, values_callable=enum_values, length=20),
        default=ServiceLevel.STANDARD,
        nullable=True,
    )
    notes = Column(Text, nullable=True)
    special_instructions = Column(Text, nullable=True)
    declared_value = Column(Float, nullable=True)
    is_fragile = Column(Boolean, default=False)
    requires_signature = Column(Boolean, default=False)

    # Contents / customs
    item_name = Column(String, nullable=True)
    item_quantity = Column(Integer, default=1)
    item_category = Column(String, nullable=True)
    contents_description = Column(Text, nullable=True)
    customs_value = Column(Float, nullable=True)
    customs_currency = Column(String(3), default="USD")
    hs_code = Column(String, nullable=True)
    country_of_origin = Column(String, nullable=True)
    is_gift = Column(Boolean, default=False)
    insurance_value = Column(Float, nullable=True)
    insurance_type = Column(
        Enum(InsuranceType, native_enum=False, values_callable=enum_values, length=20),
        default=InsuranceType.NONE,
        nullable=True,
    )

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = relationship("parcelx.models.profile.Profile", back_populates="shipments")
    tracking_updates = relationship(
        "parcelx.models.tracking_update.TrackingUpdate",
        back_populates="shipment",
        cascade="all, delete-orphan",
    )
    images = relationship(
        "parcelx.models.shipment_image.ShipmentImage",
        back_populates="shipment",
        cascade="all, delete-orphan",
    )
