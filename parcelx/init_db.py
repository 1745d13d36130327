from sqlalchemy.orm import Session
from parcelx.crud.admin import count_admins, create_admin
from parcelx.enums.admin_role import AdminRole
from parcelx.services.auth import get_password_hash
import logging
import os

logger = logging.getLogger(__name__)


def create_initial_admin(db: Session):
    """
    Seed a super admin from INITIAL_ADMIN_EMAIL / INITIAL_ADMIN_PASSWORD
    when the admin table is empty.
    """
    if count_admins(db) > 0:
        logger.info("Admins already exist, skipping initial admin.")
        return None

    email = os.getenv("INITIAL_ADMIN_EMAIL")
    password = os.getenv("INITIAL_ADMIN_PASSWORD")
    if not email or not password:
        logger.warning(
            "No admins found and INITIAL_ADMIN_EMAIL/INITIAL_ADMIN_PASSWORD not set"
        )
        return None

    admin = create_admin(
        db,
        email=email,
        full_name="Super Admin",
        role=AdminRole.SUPER_ADMIN,
        hashed_password=get_password_hash(password),
    )
    logger.info(f"Initial super admin created: {email}")
    return admin
