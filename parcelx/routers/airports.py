from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.database import get_db
from parcelx.crud import airport as crud
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.airport import AirportCreate, AirportResponse, AirportUpdate
from parcelx.services.auth import get_current_admin

router = APIRouter()


@router.get("/", response_model=List[AirportResponse])
def read_airports(
    search: Optional[str] = None,
    active_only: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return crud.get_airports(db, search=search, active_only=active_only)


@router.post("/", response_model=AirportResponse, status_code=201)
def create_airport(
    airport: AirportCreate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return crud.create_airport(db, airport=airport)


@router.put("/{airport_id}", response_model=AirportResponse)
def update_airport(
    airport_id: int,
    airport: AirportUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_airport = crud.update_airport(db, airport_id=airport_id, airport=airport)
    if db_airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return db_airport


@router.post("/{airport_id}/toggle", response_model=AirportResponse)
def toggle_airport(
    airport_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_airport = crud.toggle_airport(db, airport_id=airport_id)
    if db_airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return db_airport


@router.delete("/{airport_id}")
def delete_airport(
    airport_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    success = crud.delete_airport(db, airport_id=airport_id)
    if not success:
        raise HTTPException(status_code=404, detail="Airport not found")
    return {"message": "Airport deleted successfully"}
