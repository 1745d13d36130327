from sqlalchemy.orm import Session
from typing import List, Optional

from parcelx.models.admin_profile import AdminProfile
from parcelx.enums.admin_role import AdminRole
from parcelx.utils.query_utils import apply_search


def get_admin(db: Session, admin_id: int) -> Optional[AdminProfile]:
    return db.query(AdminProfile).filter(AdminProfile.id == admin_id).first()


def get_admin_by_email(db: Session, email: str) -> Optional[AdminProfile]:
    return db.query(AdminProfile).filter(AdminProfile.email == email).first()


def get_admin_by_user_id(db: Session, user_id: int) -> Optional[AdminProfile]:
    return db.query(AdminProfile).filter(AdminProfile.user_id == user_id).first()


def get_admins(db: Session, search: Optional[str] = None) -> List[AdminProfile]:
    query = apply_search(
        db.query(AdminProfile), search, [AdminProfile.email, AdminProfile.full_name]
    )
    return query.order_by(AdminProfile.created_at.desc(), AdminProfile.id.desc()).all()


def count_admins(db: Session) -> int:
    return db.query(AdminProfile).count()


def create_admin(
    db: Session,
    email: str,
    full_name: Optional[str] = None,
    role: AdminRole = AdminRole.ADMIN,
    user_id: Optional[int] = None,
    hashed_password: Optional[str] = None,
) -> AdminProfile:
    db_admin = AdminProfile(
        user_id=user_id,
        email=email,
        full_name=full_name,
        role=role,
        hashed_password=hashed_password,
        is_active=True,
    )
    db.add(db_admin)
    db.commit()
    db.refresh(db_admin)
    return db_admin


def set_admin_active(db: Session, admin_id: int, is_active: bool) -> Optional[AdminProfile]:
    db_admin = get_admin(db, admin_id)
    if not db_admin:
        return None

    db_admin.is_active = is_active
    db.commit()
    db.refresh(db_admin)
    return db_admin


def delete_admin(db: Session, admin_id: int) -> bool:
    db_admin = get_admin(db, admin_id)
    if not db_admin:
        return False

    db.delete(db_admin)
    db.commit()
    return True
