from datetime import datetime, timedelta
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from parcelx.database import get_db
from parcelx.schemas.admin import AdminChangePassword, AdminSchema, Token
from parcelx.services.auth import (
    authenticate_admin,
    create_access_token,
    get_password_hash,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    get_current_admin,
)
from parcelx.models.admin_profile import AdminProfile

router = APIRouter()


@router.post("/token", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)
):
    admin = authenticate_admin(db, form_data.username, form_data.password)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    admin.last_login = datetime.utcnow()
    db.commit()

    access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": admin.email}, expires_delta=access_token_expires
    )
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=AdminSchema)
def read_admin_me(current_admin: AdminProfile = Depends(get_current_admin)):
    return current_admin


@router.post("/change-password", response_model=dict)
def change_password(
    password_data: AdminChangePassword,
    current_admin: AdminProfile = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """
    Change the admin's own password.
    The current password must be supplied again.
    """
    admin = authenticate_admin(db, current_admin.email, password_data.current_password)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Current password is incorrect",
            headers={"WWW-Authenticate": "Bearer"},
        )

    admin.hashed_password = get_password_hash(password_data.new_password)
    db.commit()

    return {"message": "Password updated successfully"}
