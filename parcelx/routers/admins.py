from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
import logging

from parcelx.database import get_db
from parcelx.crud import admin as crud
from parcelx.crud.profile import get_profile
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.admin import AdminCreate, AdminSchema, AdminsResponse, AdminStatusUpdate
from parcelx.services.auth import get_current_admin, get_password_hash, require_super_admin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=AdminsResponse)
def read_admins(
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return {"admins": crud.get_admins(db, search=search)}


@router.post("/", response_model=AdminSchema, status_code=201)
def create_admin(
    admin: AdminCreate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(require_super_admin),
):
    """
    Grant admin access to an existing customer profile (`user_id`) or to a
    bare e-mail address.
    """
    email = admin.email
    full_name = admin.full_name
    if admin.user_id is not None:
        profile = get_profile(db, admin.user_id)
        if profile is None:
            raise HTTPException(status_code=404, detail="User not found")
        if not profile.email:
            raise HTTPException(status_code=400, detail="User has no email address")
        if crud.get_admin_by_user_id(db, admin.user_id):
            raise HTTPException(status_code=400, detail="User is already an admin")
        email = profile.email
        full_name = full_name or profile.display_name

    if crud.get_admin_by_email(db, email):
        raise HTTPException(status_code=400, detail="User is already an admin")

    db_admin = crud.create_admin(
        db,
        email=email,
        full_name=full_name,
        role=admin.role,
        user_id=admin.user_id,
        hashed_password=get_password_hash(admin.password) if admin.password else None,
    )
    logger.info(f"Admin {email} ({admin.role.value}) added by {current_admin.email}")
    return db_admin


@router.patch("/{admin_id}/status", response_model=AdminSchema)
def update_admin_status(
    admin_id: int,
    update: AdminStatusUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(require_super_admin),
):
    if admin_id == current_admin.id and not update.is_active:
        raise HTTPException(status_code=400, detail="You cannot deactivate yourself")

    db_admin = crud.set_admin_active(db, admin_id=admin_id, is_active=update.is_active)
    if db_admin is None:
        raise HTTPException(status_code=404, detail="Admin not found")
    return db_admin


@router.delete("/{admin_id}")
def delete_admin(
    admin_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(require_super_admin),
):
    if admin_id == current_admin.id:
        raise HTTPException(status_code=400, detail="You cannot remove yourself")

    success = crud.delete_admin(db, admin_id=admin_id)
    if not success:
        raise HTTPException(status_code=404, detail="Admin not found")
    return {"message": "Admin removed successfully"}
