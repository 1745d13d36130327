from sqlalchemy.orm import Session
from typing import List, Optional, Tuple

from parcelx.models.flight import Flight
from parcelx.schemas.flight import FlightCreate, FlightUpdate
from parcelx.utils.query_utils import apply_search, paginate, DEFAULT_PAGE_SIZE


def get_flight(db: Session, flight_id: int) -> Optional[Flight]:
    return db.query(Flight).filter(Flight.id == flight_id).first()


def get_flights(
    db: Session,
    search: Optional[str] = None,
    airline_id: Optional[int] = None,
    is_active: Optional[bool] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Tuple[List[Flight], int]:
    query = apply_search(db.query(Flight), search, [Flight.flight_number])

    if airline_id:
        query = query.filter(Flight.airline_id == airline_id)
    if is_active is not None:
        query = query.filter(Flight.is_active == is_active)

    query = query.order_by(Flight.flight_number, Flight.id)
    return paginate(query, page, page_size)


def create_flight(db: Session, flight: FlightCreate) -> Flight:
    db_flight = Flight(**flight.model_dump())
    db.add(db_flight)
    db.commit()
    db.refresh(db_flight)
    return db_flight


def update_flight(db: Session, flight_id: int, flight: FlightUpdate) -> Optional[Flight]:
    db_flight = get_flight(db, flight_id)
    if not db_flight:
        return None

    update_data = flight.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_flight, field, value)

    db.commit()
    db.refresh(db_flight)
    return db_flight


def toggle_flight(db: Session, flight_id: int) -> Optional[Flight]:
    db_flight = get_flight(db, flight_id)
    if not db_flight:
        return None

    db_flight.is_active = not db_flight.is_active
    db.commit()
    db.refresh(db_flight)
    return db_flight


def duplicate_flight(db: Session, flight_id: int) -> Optional[Flight]:
    """
    Copy a flight as a new, inactive schedule entry so it can be edited
    before going live.
    """
    source = get_flight(db, flight_id)
    if not source:
        return None

    copy = Flight(
        flight_number=f"{source.flight_number}-COPY",
        airline_id=source.airline_id,
        departure_airport_id=source.departure_airport_id,
        arrival_airport_id=source.arrival_airport_id,
        departure_time=source.departure_time,
        arrival_time=source.arrival_time,
        duration_minutes=source.duration_minutes,
        aircraft_type=source.aircraft_type,
        base_price_economy=source.base_price_economy,
        base_price_premium=source.base_price_premium,
        base_price_business=source.base_price_business,
        base_price_first=source.base_price_first,
        stops=source.stops,
        stop_airports=list(source.stop_airports or []),
        days_of_week=list(source.days_of_week or []),
        amenities=list(source.amenities or []),
        is_active=False,
    )
    db.add(copy)
    db.commit()
    db.refresh(copy)
    return copy


def delete_flight(db: Session, flight_id: int) -> bool:
    db_flight = get_flight(db, flight_id)
    if not db_flight:
        return False

    db.delete(db_flight)
    db.commit()
    return True
