"""
Shared pytest configuration
"""
import pytest
from datetime import date, datetime, time
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from parcelx.database import Base

# Load every model so relationships resolve
from parcelx.models.profile import Profile
from parcelx.models.admin_profile import AdminProfile
from parcelx.models.airline import Airline
from parcelx.models.airport import Airport
from parcelx.models.flight import Flight
from parcelx.models.booking import FlightBooking
from parcelx.models.passenger import FlightPassenger
from parcelx.models.crypto_wallet import CryptoWallet
from parcelx.models.shipment import Shipment
from parcelx.models.tracking_update import TrackingUpdate
from parcelx.models.shipment_image import ShipmentImage
from parcelx.enums.booking_status import (
    BookingStatus,
    CabinClass,
    PassengerType,
    PaymentStatus,
)
from parcelx.enums.admin_role import AdminRole
from parcelx.services import email as email_module
from parcelx.services.storage import StorageError


# In-memory database for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Create the test schema and drop it afterwards"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def super_admin(db):
    admin = AdminProfile(
        email="root@parcelx.test",
        full_name="Root Admin",
        role=AdminRole.SUPER_ADMIN,
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def staff_admin(db):
    admin = AdminProfile(
        email="staff@parcelx.test",
        full_name="Staff Admin",
        role=AdminRole.ADMIN,
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def customer(db):
    profile = Profile(
        email="jane@example.com",
        full_name="Jane Traveller",
        first_name="Jane",
        last_name="Traveller",
        phone_number="+15550001",
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


@pytest.fixture
def flight(db):
    airline = Airline(code="SKY", name="Skyline Air", country="Kenya")
    origin = Airport(code="NBO", name="Jomo Kenyatta", city="Nairobi", country="Kenya")
    target = Airport(code="DXB", name="Dubai Intl", city="Dubai", country="UAE")
    db.add_all([airline, origin, target])
    db.flush()

    flight = Flight(
        flight_number="SK101",
        airline_id=airline.id,
        departure_airport_id=origin.id,
        arrival_airport_id=target.id,
        departure_time=time(9, 30),
        arrival_time=time(15, 45),
        duration_minutes=375,
        aircraft_type="A320",
    )
    db.add(flight)
    db.commit()
    db.refresh(flight)
    return flight


def make_booking(db, reference="PX-0001", status=BookingStatus.PENDING,
                 payment_status=PaymentStatus.PENDING, **kwargs):
    booking = FlightBooking(
        booking_reference=reference,
        status=status,
        payment_status=payment_status,
        total_passengers=kwargs.pop("total_passengers", 1),
        total_price=kwargs.pop("total_price", 450.0),
        taxes_fees=kwargs.pop("taxes_fees", 50.0),
        **kwargs,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


@pytest.fixture
def booking(db, customer, flight):
    """A submitted-but-unverified booking: {pending, pending}"""
    db_booking = make_booking(
        db,
        reference="PX-7Q2K",
        user_id=customer.id,
        outbound_flight_id=flight.id,
        cabin_class=CabinClass.BUSINESS,
        departure_date=date(2025, 3, 14),
        total_passengers=2,
        total_price=1250.0,
        taxes_fees=150.0,
        contact_email="jane@example.com",
        payment_crypto_name="Tether",
        payment_crypto_symbol="USDT",
        payment_network_type="TRC20",
        payment_submitted_at=datetime(2025, 3, 1, 12, 0),
    )
    db.add_all(
        [
            FlightPassenger(
                booking_id=db_booking.id,
                title="Ms",
                first_name="Jane",
                last_name="Traveller",
                passenger_type=PassengerType.ADULT,
                passport_number="A1234567",
                created_at=datetime(2025, 3, 1, 12, 0, 0),
            ),
            FlightPassenger(
                booking_id=db_booking.id,
                first_name="Tom",
                last_name="Traveller",
                passenger_type=PassengerType.CHILD,
                created_at=datetime(2025, 3, 1, 12, 0, 1),
            ),
        ]
    )
    db.commit()
    db.refresh(db_booking)
    return db_booking


@pytest.fixture
def shipment(db, customer):
    db_shipment = Shipment(
        tracking_number="PKX-TEST01",
        user_id=customer.id,
        origin="Nairobi",
        destination="Mombasa",
        sender_name="Jane Traveller",
        receiver_name="Ali Hassan",
    )
    db.add(db_shipment)
    db.commit()
    db.refresh(db_shipment)
    return db_shipment


class FakeStorage:
    """Records uploads; fails on the Nth upload call when asked to"""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.calls = 0
        self.objects = {}
        self.removed = []

    def upload(self, path, content, content_type):
        self.calls += 1
        if self.fail_on == self.calls:
            raise StorageError(f"Upload failed for {path}: quota exceeded")
        self.objects[path] = content
        return self.get_public_url(path)

    def get_public_url(self, path):
        return f"https://storage.test/storage/v1/object/public/shipment-images/{path}"

    def path_from_public_url(self, url):
        return url.split("/shipment-images/", 1)[1]

    def remove(self, paths):
        self.removed.extend(paths)


@pytest.fixture
def fake_storage():
    return FakeStorage()


class FakeSMTP:
    sent = []
    fail = False

    def __init__(self, host, port):
        self.host = host
        self.port = port

    def starttls(self):
        pass

    def login(self, user, password):
        pass

    def send_message(self, msg):
        if FakeSMTP.fail:
            raise email_module.smtplib.SMTPException("relay access denied")
        FakeSMTP.sent.append(msg)

    def quit(self):
        pass


@pytest.fixture
def fake_smtp(monkeypatch):
    """Configured email_service whose SMTP connection is replaced by FakeSMTP"""
    FakeSMTP.sent = []
    FakeSMTP.fail = False
    monkeypatch.setattr(email_module.smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(email_module.email_service, "smtp_host", "smtp.test")
    monkeypatch.setattr(email_module.email_service, "smtp_port", 587)
    monkeypatch.setattr(email_module.email_service, "smtp_user", "flights@parcelx.test")
    monkeypatch.setattr(email_module.email_service, "smtp_pass", "secret")
    monkeypatch.setattr(email_module.email_service, "flights_from", "flights@parcelx.test")
    return FakeSMTP


@pytest.fixture
def booking_factory(db):
    def _factory(**kwargs):
        return make_booking(db, **kwargs)

    return _factory
