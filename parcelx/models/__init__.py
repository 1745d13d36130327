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

# This makes the models directory a Python package and ensures all models are loaded
