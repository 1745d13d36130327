from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.models.airport import Airport
from parcelx.schemas.airport import AirportCreate, AirportUpdate
from parcelx.utils.query_utils import apply_search


def get_airport(db: Session, airport_id: int) -> Optional[Airport]:
    return db.query(Airport).filter(Airport.id == airport_id).first()


def get_airports(
    db: Session, search: Optional[str] = None, active_only: bool = False
) -> List[Airport]:
    query = apply_search(
        db.query(Airport), search, [Airport.code, Airport.name, Airport.city]
    )
    if active_only:
        query = query.filter(Airport.is_active == True)
    return query.order_by(Airport.code).all()


def create_airport(db: Session, airport: AirportCreate) -> Airport:
    data = airport.model_dump()
    data["code"] = data["code"].upper()
    db_airport = Airport(**data)
    db.add(db_airport)
    db.commit()
    db.refresh(db_airport)
    return db_airport


def update_airport(
    db: Session, airport_id: int, airport: AirportUpdate
) -> Optional[Airport]:
    db_airport = get_airport(db, airport_id)
    if not db_airport:
        return None

    update_data = airport.model_dump(exclude_unset=True)
    if update_data.get("code"):
        update_data["code"] = update_data["code"].upper()
    for field, value in update_data.items():
        setattr(db_airport, field, value)

    db.commit()
    db.refresh(db_airport)
    return db_airport


def toggle_airport(db: Session, airport_id: int) -> Optional[Airport]:
    db_airport = get_airport(db, airport_id)
    if not db_airport:
        return None

    db_airport.is_active = not db_airport.is_active
    db.commit()
    db.refresh(db_airport)
    return db_airport


def delete_airport(db: Session, airport_id: int) -> bool:
    db_airport = get_airport(db, airport_id)
    if not db_airport:
        return False

    db.delete(db_airport)
    db.commit()
    return True
