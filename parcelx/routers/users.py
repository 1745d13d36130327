from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.database import get_db
from parcelx.crud import profile as crud
from parcelx.crud.shipment import get_user_shipments
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.profile import ProfileListResponse, ProfileResponse, ProfileUpdate
from parcelx.schemas.shipment import ShipmentResponse
from parcelx.services.auth import get_current_admin
from parcelx.utils.query_utils import DEFAULT_PAGE_SIZE, page_meta

router = APIRouter()


@router.get("/", response_model=ProfileListResponse)
def read_users(
    search: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    items, total = crud.get_profiles(db, search=search, page=page, page_size=page_size)
    return {"items": items, "total": total, **page_meta(page, page_size)}


@router.get("/{user_id}", response_model=ProfileResponse)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_profile = crud.get_profile(db, profile_id=user_id)
    if db_profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return db_profile


@router.put("/{user_id}", response_model=ProfileResponse)
def update_user(
    user_id: int,
    profile: ProfileUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    if profile.email:
        existing = crud.get_profile_by_email(db, profile.email)
        if existing and existing.id != user_id:
            raise HTTPException(status_code=400, detail="Email already registered")

    db_profile = crud.update_profile(db, profile_id=user_id, profile=profile)
    if db_profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return db_profile


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    success = crud.delete_profile(db, profile_id=user_id)
    if not success:
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "User deleted successfully"}


@router.get("/{user_id}/shipments", response_model=List[ShipmentResponse])
def read_user_shipments(
    user_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    """Latest 10 shipments of one customer."""
    if crud.get_profile(db, profile_id=user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")
    return get_user_shipments(db, user_id=user_id)
