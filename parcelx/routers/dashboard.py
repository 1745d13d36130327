from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from parcelx.database import get_db
from parcelx.crud.profile import count_profiles
from parcelx.crud.shipment import count_shipments_by_status, get_recent_shipments
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.dashboard import DashboardStats
from parcelx.services.auth import get_current_admin

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def read_dashboard_stats(
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    by_status = count_shipments_by_status(db)
    return {
        "shipments_by_status": by_status,
        "total_shipments": sum(by_status.values()),
        "total_users": count_profiles(db),
        "recent_shipments": get_recent_shipments(db),
    }
