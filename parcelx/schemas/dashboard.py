from pydantic import BaseModel
from typing import Dict, List

from parcelx.schemas.shipment import ShipmentResponse


class DashboardStats(BaseModel):
    shipments_by_status: Dict[str, int]
    total_shipments: int
    total_users: int
    recent_shipments: List[ShipmentResponse]
