from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base, enum_values
from parcelx.enums.shipment_options import ShipmentStatus


class TrackingUpdate(Base):
    """Shipment history entry. Rows are only ever appended."""

    __tablename__ = "tracking_updates"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    shipment_id = Column(
        Integer, ForeignKey("shipments.id"), nullable=False, index=True
    )
    location = Column(String, nullable=False)
    status = Column(
        Enum(ShipmentStatus, native_enum=False, values_callable=enum_values, length=30),
        nullable=False,
    )
    description = Column(Text, nullable=True)
    occurrence_time = Column(DateTime, default=datetime.utcnow, nullable=False)

    shipment = relationship(
        "parcelx.models.shipment.Shipment", back_populates="tracking_updates"
    )
