"""Create initial tables

Revision ID: 5c1e8a2f4b90
Revises:
Create Date: 2025-11-03 10:12:45.118204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5c1e8a2f4b90"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("full_name", sa.String(), nullable=True),
        sa.Column("first_name", sa.String(), nullable=True),
        sa.Column("last_name", sa.String(), nullable=True),
        sa.Column("avatar_url", sa.String(), nullable=True),
        sa.Column("country", sa.String(), nullable=True),
        sa.Column("contact_address", sa.String(), nullable=True),
        sa.Column("country_code", sa.String(length=6), nullable=True),
        sa.Column("phone_number", sa.String(), nullable=True),
        sa.Column("receive_updates", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_profiles_id"), "profiles", ["id"], unique=False)
    op.create_index(op.f("ix_profiles_email"), "profiles", ["email"], unique=True)
    op.create_index(op.f("ix_profiles_full_name"), "profiles", ["full_name"], unique=False)

    op.create_table(
        "admin_profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("full_name", sa.String(), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("hashed_password", sa.String(), nullable=True),
        sa.Column("last_login", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(op.f("ix_admin_profiles_id"), "admin_profiles", ["id"], unique=False)
    op.create_index(
        op.f("ix_admin_profiles_email"), "admin_profiles", ["email"], unique=True
    )

    op.create_table(
        "airlines",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("code", sa.String(length=3), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("country", sa.String(), nullable=True),
        sa.Column("logo_url", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_airlines_id"), "airlines", ["id"], unique=False)
    op.create_index(op.f("ix_airlines_code"), "airlines", ["code"], unique=False)

    op.create_table(
        "airports",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("code", sa.String(length=4), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("city", sa.String(), nullable=False),
        sa.Column("country", sa.String(), nullable=False),
        sa.Column("country_code", sa.String(length=3), nullable=True),
        sa.Column("timezone", sa.String(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_airports_id"), "airports", ["id"], unique=False)
    op.create_index(op.f("ix_airports_code"), "airports", ["code"], unique=False)

    op.create_table(
        "flights",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("flight_number", sa.String(length=20), nullable=False),
        sa.Column("airline_id", sa.Integer(), nullable=False),
        sa.Column("departure_airport_id", sa.Integer(), nullable=False),
        sa.Column("arrival_airport_id", sa.Integer(), nullable=False),
        sa.Column("departure_time", sa.Time(), nullable=False),
        sa.Column("arrival_time", sa.Time(), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("aircraft_type", sa.String(), nullable=True),
        sa.Column("base_price_economy", sa.Float(), nullable=True),
        sa.Column("base_price_premium", sa.Float(), nullable=True),
        sa.Column("base_price_business", sa.Float(), nullable=True),
        sa.Column("base_price_first", sa.Float(), nullable=True),
        sa.Column("stops", sa.Integer(), nullable=True),
        sa.Column("stop_airports", sa.JSON(), nullable=True),
        sa.Column("days_of_week", sa.JSON(), nullable=True),
        sa.Column("amenities", sa.JSON(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["airline_id"], ["airlines.id"]),
        sa.ForeignKeyConstraint(["departure_airport_id"], ["airports.id"]),
        sa.ForeignKeyConstraint(["arrival_airport_id"], ["airports.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flights_id"), "flights", ["id"], unique=False)
    op.create_index(
        op.f("ix_flights_flight_number"), "flights", ["flight_number"], unique=False
    )

    op.create_table(
        "flight_bookings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("booking_reference", sa.String(length=20), nullable=False),
        sa.Column("eticket_number", sa.String(length=30), nullable=True),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("outbound_flight_id", sa.Integer(), nullable=True),
        sa.Column("return_flight_id", sa.Integer(), nullable=True),
        sa.Column("trip_type", sa.String(length=20), nullable=True),
        sa.Column("cabin_class", sa.String(length=20), nullable=True),
        sa.Column("departure_date", sa.Date(), nullable=True),
        sa.Column("return_date", sa.Date(), nullable=True),
        sa.Column("total_passengers", sa.Integer(), nullable=True),
        sa.Column("total_price", sa.Float(), nullable=True),
        sa.Column("taxes_fees", sa.Float(), nullable=True),
        sa.Column("contact_email", sa.String(), nullable=True),
        sa.Column("contact_phone", sa.String(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("payment_status", sa.String(length=20), nullable=False),
        sa.Column("payment_crypto_name", sa.String(), nullable=True),
        sa.Column("payment_crypto_symbol", sa.String(), nullable=True),
        sa.Column("payment_network_type", sa.String(), nullable=True),
        sa.Column("payment_amount_crypto", sa.String(), nullable=True),
        sa.Column("payment_proof_url", sa.String(), nullable=True),
        sa.Column("payment_submitted_at", sa.DateTime(), nullable=True),
        sa.Column("verified_at", sa.DateTime(), nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"]),
        sa.ForeignKeyConstraint(["outbound_flight_id"], ["flights.id"]),
        sa.ForeignKeyConstraint(["return_flight_id"], ["flights.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flight_bookings_id"), "flight_bookings", ["id"], unique=False)
    op.create_index(
        op.f("ix_flight_bookings_booking_reference"),
        "flight_bookings",
        ["booking_reference"],
        unique=True,
    )
    op.create_index(
        op.f("ix_flight_bookings_status"), "flight_bookings", ["status"], unique=False
    )
    op.create_index(
        op.f("ix_flight_bookings_payment_status"),
        "flight_bookings",
        ["payment_status"],
        unique=False,
    )

    op.create_table(
        "flight_passengers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("booking_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=10), nullable=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("passenger_type", sa.String(length=10), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("nationality", sa.String(), nullable=True),
        sa.Column("passport_number", sa.String(), nullable=True),
        sa.Column("passport_expiry", sa.Date(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["booking_id"], ["flight_bookings.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_flight_passengers_id"), "flight_passengers", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_flight_passengers_booking_id"),
        "flight_passengers",
        ["booking_id"],
        unique=False,
    )

    op.create_table(
        "crypto_wallets",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("crypto_name", sa.String(), nullable=False),
        sa.Column("crypto_symbol", sa.String(length=10), nullable=False),
        sa.Column("network_type", sa.String(length=20), nullable=False),
        sa.Column("wallet_address", sa.String(), nullable=False),
        sa.Column("icon_url", sa.String(), nullable=True),
        sa.Column("min_confirmations", sa.Integer(), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_crypto_wallets_id"), "crypto_wallets", ["id"], unique=False)

    op.create_table(
        "shipments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tracking_number", sa.String(length=40), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("origin", sa.String(), nullable=False),
        sa.Column("destination", sa.String(), nullable=False),
        sa.Column("estimated_delivery", sa.DateTime(), nullable=True),
        sa.Column("sender_name", sa.String(), nullable=True),
        sa.Column("sender_phone", sa.String(), nullable=True),
        sa.Column("sender_email", sa.String(), nullable=True),
        sa.Column("sender_address", sa.String(), nullable=True),
        sa.Column("sender_city", sa.String(), nullable=True),
        sa.Column("sender_state", sa.String(), nullable=True),
        sa.Column("sender_postal_code", sa.String(), nullable=True),
        sa.Column("sender_country", sa.String(), nullable=True),
        sa.Column("receiver_name", sa.String(), nullable=True),
        sa.Column("receiver_phone", sa.String(), nullable=True),
        sa.Column("receiver_email", sa.String(), nullable=True),
        sa.Column("receiver_address", sa.String(), nullable=True),
        sa.Column("receiver_city", sa.String(), nullable=True),
        sa.Column("receiver_state", sa.String(), nullable=True),
        sa.Column("receiver_postal_code", sa.String(), nullable=True),
        sa.Column("receiver_country", sa.String(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("dimensions", sa.String(), nullable=True),
        sa.Column("package_type", sa.String(length=20), nullable=True),
        sa.Column("shipping_method", sa.String(length=20), nullable=True),
        sa.Column("service_level", sa.String(length=20), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("special_instructions", sa.Text(), nullable=True),
        sa.Column("declared_value", sa.Float(), nullable=True),
        sa.Column("is_fragile", sa.Boolean(), nullable=True),
        sa.Column("requires_signature", sa.Boolean(), nullable=True),
        sa.Column("item_name", sa.String(), nullable=True),
        sa.Column("item_quantity", sa.Integer(), nullable=True),
        sa.Column("item_category", sa.String(), nullable=True),
        sa.Column("contents_description", sa.Text(), nullable=True),
        sa.Column("customs_value", sa.Float(), nullable=True),
        sa.Column("customs_currency", sa.String(length=3), nullable=True),
        sa.Column("hs_code", sa.String(), nullable=True),
        sa.Column("country_of_origin", sa.String(), nullable=True),
        sa.Column("is_gift", sa.Boolean(), nullable=True),
        sa.Column("insurance_value", sa.Float(), nullable=True),
        sa.Column("insurance_type", sa.String(length=20), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_shipments_id"), "shipments", ["id"], unique=False)
    op.create_index(
        op.f("ix_shipments_tracking_number"), "shipments", ["tracking_number"], unique=True
    )
    op.create_index(op.f("ix_shipments_status"), "shipments", ["status"], unique=False)

    op.create_table(
        "tracking_updates",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("shipment_id", sa.Integer(), nullable=False),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("occurrence_time", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["shipment_id"], ["shipments.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tracking_updates_id"), "tracking_updates", ["id"], unique=False)
    op.create_index(
        op.f("ix_tracking_updates_shipment_id"),
        "tracking_updates",
        ["shipment_id"],
        unique=False,
    )

    op.create_table(
        "shipment_images",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("shipment_id", sa.Integer(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("storage_path", sa.String(), nullable=True),
        sa.Column("caption", sa.String(), nullable=True),
        sa.Column("uploaded_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["shipment_id"], ["shipments.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_shipment_images_id"), "shipment_images", ["id"], unique=False)
    op.create_index(
        op.f("ix_shipment_images_shipment_id"),
        "shipment_images",
        ["shipment_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("shipment_images")
    op.drop_table("tracking_updates")
    op.drop_table("shipments")
    op.drop_table("crypto_wallets")
    op.drop_table("flight_passengers")
    op.drop_table("flight_bookings")
    op.drop_table("flights")
    op.drop_table("airports")
    op.drop_table("airlines")
    op.drop_table("admin_profiles")
    op.drop_table("profiles")
