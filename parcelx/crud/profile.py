from sqlalchemy.orm import Session
from typing import List, Optional, Tuple

from parcelx.models.profile import Profile
from parcelx.schemas.profile import ProfileUpdate
from parcelx.utils.query_utils import apply_search, paginate, DEFAULT_PAGE_SIZE


def get_profile(db: Session, profile_id: int) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def get_profile_by_email(db: Session, email: str) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.email == email).first()


def get_profiles(
    db: Session,
    search: Optional[str] = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Tuple[List[Profile], int]:
    query = apply_search(
        db.query(Profile),
        search,
        [Profile.email, Profile.full_name, Profile.first_name, Profile.last_name],
    )
    query = query.order_by(Profile.created_at.desc(), Profile.id.desc())
    return paginate(query, page, page_size)


def count_profiles(db: Session) -> int:
    return db.query(Profile).count()


def update_profile(
    db: Session, profile_id: int, profile: ProfileUpdate
) -> Optional[Profile]:
    db_profile = get_profile(db, profile_id)
    if not db_profile:
        return None

    update_data = profile.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_profile, field, value)

    db.commit()
    db.refresh(db_profile)
    return db_profile


def delete_profile(db: Session, profile_id: int) -> bool:
    db_profile = get_profile(db, profile_id)
    if not db_profile:
        return False

    db.delete(db_profile)
    db.commit()
    return True
