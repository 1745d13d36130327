from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from datetime import datetime

from parcelx.database import Base, enum_values
from parcelx.enums.admin_role import AdminRole


class AdminProfile(Base):
    __tablename__ = "admin_profiles"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), unique=True, nullable=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=True)
    role = Column(
        Enum(AdminRole, native_enum=False, values_callable=enum_values, length=20),
        default=AdminRole.ADMIN,
        nullable=False,
    )
    is_active = Column(Boolean, default=True)
    hashed_password = Column(String, nullable=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("parcelx.models.profile.Profile")

    @property
    def is_super_admin(self):
        return self.role == AdminRole.SUPER_ADMIN
