from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.models.airline import Airline
from parcelx.schemas.airline import AirlineCreate, AirlineUpdate
from parcelx.utils.query_utils import apply_search


def get_airline(db: Session, airline_id: int) -> Optional[Airline]:
    return db.query(Airline).filter(Airline.id == airline_id).first()


def get_airlines(
    db: Session, search: Optional[str] = None, active_only: bool = False
) -> List[Airline]:
    query = apply_search(db.query(Airline), search, [Airline.code, Airline.name])
    if active_only:
        query = query.filter(Airline.is_active == True)
        return query.order_by(Airline.name).all()
    return query.order_by(Airline.code).all()


def create_airline(db: Session, airline: AirlineCreate) -> Airline:
    data = airline.model_dump()
    data["code"] = data["code"].upper()
    db_airline = Airline(**data)
    db.add(db_airline)
    db.commit()
    db.refresh(db_airline)
    return db_airline


def update_airline(
    db: Session, airline_id: int, airline: AirlineUpdate
) -> Optional[Airline]:
    db_airline = get_airline(db, airline_id)
    if not db_airline:
        return None

    update_data = airline.model_dump(exclude_unset=True)
    if update_data.get("code"):
        update_data["code"] = update_data["code"].upper()
    for field, value in update_data.items():
        setattr(db_airline, field, value)

    db.commit()
    db.refresh(db_airline)
    return db_airline


def toggle_airline(db: Session, airline_id: int) -> Optional[Airline]:
    db_airline = get_airline(db, airline_id)
    if not db_airline:
        return None

    db_airline.is_active = not db_airline.is_active
    db.commit()
    db.refresh(db_airline)
    return db_airline


def delete_airline(db: Session, airline_id: int) -> bool:
    db_airline = get_airline(db, airline_id)
    if not db_airline:
        return False

    db.delete(db_airline)
    db.commit()
    return True
