from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base


class ShipmentImage(Base):
    __tablename__ = "shipment_images"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    shipment_id = Column(
        Integer, ForeignKey("shipments.id"), nullable=False, index=True
    )
    image_url = Column(String, nullable=False)
    storage_path = Column(String, nullable=True)  # key inside the bucket
    caption = Column(String, nullable=True)
    uploaded_at = Column(DateTime, default=datetime.utcnow)

    shipment = relationship(
        "parcelx.models.shipment.Shipment", back_populates="images"
    )
