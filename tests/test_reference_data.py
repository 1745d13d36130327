"""
Tests for flights, airlines, airports and crypto wallets
"""
import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from parcelx.enums.network_type import NetworkType
from parcelx.routers import airlines, airports, crypto_wallets, flights
from parcelx.schemas.airline import AirlineCreate, AirlineUpdate
from parcelx.schemas.airport import AirportCreate
from parcelx.schemas.crypto_wallet import CryptoWalletCreate
from parcelx.schemas.flight import FlightCreate, FlightUpdate


def test_duplicate_flight_is_inactive_copy(db, flight, staff_admin):
    flight.amenities = ["wifi", "meals"]
    db.commit()

    copy = flights.duplicate_flight(flight_id=flight.id, db=db, current_admin=staff_admin)

    assert copy.id != flight.id
    assert copy.flight_number == "SK101-COPY"
    assert copy.is_active is False
    assert copy.airline_id == flight.airline_id
    assert copy.departure_time == flight.departure_time
    assert copy.amenities == ["wifi", "meals"]
    db.refresh(flight)
    assert flight.is_active is True


def test_toggle_flight(db, flight, staff_admin):
    toggled = flights.toggle_flight(flight_id=flight.id, db=db, current_admin=staff_admin)
    assert toggled.is_active is False

    toggled = flights.toggle_flight(flight_id=flight.id, db=db, current_admin=staff_admin)
    assert toggled.is_active is True


def test_create_flight_with_unknown_airline(db, flight, staff_admin):
    with pytest.raises(HTTPException) as exc_info:
        flights.create_flight(
            flight=FlightCreate(
                flight_number="ZZ1",
                airline_id=999,
                departure_airport_id=flight.departure_airport_id,
                arrival_airport_id=flight.arrival_airport_id,
            ),
            db=db,
            current_admin=staff_admin,
        )

    assert exc_info.value.status_code == 400


def test_update_flight_with_unknown_airport(db, flight, staff_admin):
    with pytest.raises(HTTPException) as exc_info:
        flights.update_flight(
            flight_id=flight.id,
            flight=FlightUpdate(arrival_airport_id=999),
            db=db,
            current_admin=staff_admin,
        )

    assert exc_info.value.status_code == 400
    assert "999" in exc_info.value.detail


def test_days_of_week_are_validated():
    with pytest.raises(ValidationError):
        FlightCreate(
            flight_number="SK200",
            airline_id=1,
            departure_airport_id=1,
            arrival_airport_id=2,
            days_of_week=[0, 3],
        )
    with pytest.raises(ValidationError):
        FlightUpdate(days_of_week=[8])

    update = FlightUpdate(days_of_week=[5, 1, 5])
    assert update.days_of_week == [1, 5]
    assert FlightUpdate().days_of_week is None


def test_list_flights_search(db, flight, staff_admin):
    result = flights.read_flights(
        search="sk1",
        airline_id=None,
        is_active=None,
        page=1,
        page_size=10,
        db=db,
        current_admin=staff_admin,
    )

    assert result["total"] == 1
    assert result["items"][0].flight_number == "SK101"


def test_airline_code_is_upper_cased(db, staff_admin):
    created = airlines.create_airline(
        airline=AirlineCreate(code="kq", name="Kenya Airways"),
        db=db,
        current_admin=staff_admin,
    )
    assert created.code == "KQ"

    updated = airlines.update_airline(
        airline_id=created.id,
        airline=AirlineUpdate(code="kqa"),
        db=db,
        current_admin=staff_admin,
    )
    assert updated.code == "KQA"


def test_airlines_active_only(db, flight, staff_admin):
    inactive = airlines.create_airline(
        airline=AirlineCreate(code="OLD", name="Retired Air", is_active=False),
        db=db,
        current_admin=staff_admin,
    )

    everyone = airlines.read_airlines(
        search=None, active_only=False, db=db, current_admin=staff_admin
    )
    active = airlines.read_airlines(
        search=None, active_only=True, db=db, current_admin=staff_admin
    )

    assert inactive.id in [a.id for a in everyone]
    assert [a.code for a in active] == ["SKY"]


def test_airport_code_is_upper_cased(db, staff_admin):
    created = airports.create_airport(
        airport=AirportCreate(code="mba", name="Moi Intl", city="Mombasa", country="Kenya"),
        db=db,
        current_admin=staff_admin,
    )

    assert created.code == "MBA"


def test_delete_unknown_airport(db, staff_admin):
    with pytest.raises(HTTPException) as exc_info:
        airports.delete_airport(airport_id=999, db=db, current_admin=staff_admin)

    assert exc_info.value.status_code == 404


def _wallet(symbol, network, order, **kwargs):
    return CryptoWalletCreate(
        crypto_name=kwargs.pop("name", symbol),
        crypto_symbol=symbol,
        network_type=network,
        wallet_address=f"addr-{symbol}-{network.value}",
        display_order=order,
        **kwargs,
    )


def test_wallets_follow_display_order(db, staff_admin):
    for wallet in (
        _wallet("btc", NetworkType.BTC, 2),
        _wallet("usdt", NetworkType.TRC20, 0, name="Tether"),
        _wallet("eth", NetworkType.ERC20, 1, is_active=False),
    ):
        crypto_wallets.create_wallet(wallet=wallet, db=db, current_admin=staff_admin)

    listed = crypto_wallets.read_wallets(
        search=None, active_only=False, db=db, current_admin=staff_admin
    )
    assert [w.crypto_symbol for w in listed] == ["USDT", "ETH", "BTC"]

    active = crypto_wallets.read_wallets(
        search=None, active_only=True, db=db, current_admin=staff_admin
    )
    assert [w.crypto_symbol for w in active] == ["USDT", "BTC"]

    found = crypto_wallets.read_wallets(
        search="tether", active_only=False, db=db, current_admin=staff_admin
    )
    assert [w.network_type for w in found] == ["TRC20"]


def test_toggle_unknown_wallet(db, staff_admin):
    with pytest.raises(HTTPException) as exc_info:
        crypto_wallets.toggle_wallet(wallet_id=42, db=db, current_admin=staff_admin)

    assert exc_info.value.status_code == 404
