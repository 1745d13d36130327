from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional

from parcelx.database import get_db
from parcelx.crud import flight as crud
from parcelx.crud.airline import get_airline
from parcelx.crud.airport import get_airport
from parcelx.models.admin_profile import AdminProfile
from parcelx.schemas.flight import (
    FlightCreate,
    FlightListResponse,
    FlightResponse,
    FlightUpdate,
)
from parcelx.services.auth import get_current_admin
from parcelx.utils.query_utils import DEFAULT_PAGE_SIZE, page_meta

router = APIRouter()


def _check_references(db: Session, airline_id=None, airport_ids=()):
    if airline_id is not None and get_airline(db, airline_id) is None:
        raise HTTPException(status_code=400, detail="Airline does not exist")
    for airport_id in airport_ids:
        if airport_id is not None and get_airport(db, airport_id) is None:
            raise HTTPException(
                status_code=400, detail=f"Airport {airport_id} does not exist"
            )


@router.get("/", response_model=FlightListResponse)
def read_flights(
    search: Optional[str] = None,
    airline_id: Optional[int] = None,
    is_active: Optional[bool] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    items, total = crud.get_flights(
        db,
        search=search,
        airline_id=airline_id,
        is_active=is_active,
        page=page,
        page_size=page_size,
    )
    return {"items": items, "total": total, **page_meta(page, page_size)}


@router.get("/{flight_id}", response_model=FlightResponse)
def read_flight(
    flight_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_flight = crud.get_flight(db, flight_id=flight_id)
    if db_flight is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    return db_flight


@router.post("/", response_model=FlightResponse, status_code=201)
def create_flight(
    flight: FlightCreate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    _check_references(
        db,
        airline_id=flight.airline_id,
        airport_ids=(flight.departure_airport_id, flight.arrival_airport_id),
    )
    return crud.create_flight(db, flight=flight)


@router.put("/{flight_id}", response_model=FlightResponse)
def update_flight(
    flight_id: int,
    flight: FlightUpdate,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    _check_references(
        db,
        airline_id=flight.airline_id,
        airport_ids=(flight.departure_airport_id, flight.arrival_airport_id),
    )
    db_flight = crud.update_flight(db, flight_id=flight_id, flight=flight)
    if db_flight is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    return db_flight


@router.post("/{flight_id}/toggle", response_model=FlightResponse)
def toggle_flight(
    flight_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    db_flight = crud.toggle_flight(db, flight_id=flight_id)
    if db_flight is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    return db_flight


@router.post("/{flight_id}/duplicate", response_model=FlightResponse, status_code=201)
def duplicate_flight(
    flight_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    """Copy a flight as an inactive draft with a -COPY flight number."""
    db_flight = crud.duplicate_flight(db, flight_id=flight_id)
    if db_flight is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    return db_flight


@router.delete("/{flight_id}")
def delete_flight(
    flight_id: int,
    db: Session = Depends(get_db),
    current_admin: AdminProfile = Depends(get_current_admin),
):
    success = crud.delete_flight(db, flight_id=flight_id)
    if not success:
        raise HTTPException(status_code=404, detail="Flight not found")
    return {"message": "Flight deleted successfully"}
