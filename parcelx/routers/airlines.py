from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.database import get_db
from parcelx.crud import airline as crud
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.airline import AirlineCreate, AirlineResponse, AirlineUpdate
from parcelx.services.auth import get_current_admin

router = APIRouter()


@router.get("/", response_model=List[AirlineResponse])
def read_airlines(
    search: Optional[str] = None,
    active_only: bool = False,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return crud.get_airlines(db, search=search, active_only=active_only)


@router.post("/", response_model=AirlineResponse, status_code=201)
def create_airline(
    airline: AirlineCreate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    return crud.create_airline(db, airline=airline)


@router.put("/{airline_id}", response_model=AirlineResponse)
def update_airline(
    airline_id: int,
    airline: AirlineUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_airline = crud.update_airline(db, airline_id=airline_id, airline=airline)
    if db_airline is None:
        raise HTTPException(status_code=404, detail="Airline not found")
    return db_airline


@router.post("/{airline_id}/toggle", response_model=AirlineResponse)
def toggle_airline(
    airline_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_airline = crud.toggle_airline(db, airline_id=airline_id)
    if db_airline is None:
        raise HTTPException(status_code=404, detail="Airline not found")
    return db_airline


@router.delete("/{airline_id}")
def delete_airline(
    airline_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    success = crud.delete_airline(db, airline_id=airline_id)
    if not success:
        raise HTTPException(status_code=404, detail="Airline not found")
    return {"message": "Airline deleted successfully"}
