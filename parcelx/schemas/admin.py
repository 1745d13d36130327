from pydantic import BaseModel, EmailStr, Field, model_validator
from datetime import datetime
from typing import List, Optional

from parcelx.enums.admin_role import AdminRole


class AdminCreate(BaseModel):
    # Either an existing profile or a bare e-mail address
    user_id: Optional[int] = None
    email: Optional[EmailStr] = None
    full_name: Optional[str] = None
    role: AdminRole = AdminRole.ADMIN
    password: Optional[str] = Field(None, min_length=8)

    @model_validator(mode="after")
    def require_user_or_email(self):
        if self.user_id is None and self.email is None:
            raise ValueError("Please select a user")
        return self


class AdminStatusUpdate(BaseModel):
    is_active: bool


class AdminSchema(BaseModel):
    id: int
    user_id: Optional[int] = None
    email: str
    full_name: Optional[str] = None
    role: AdminRole
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AdminsResponse(BaseModel):
    admins: List[AdminSchema]


class AdminChangePassword(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8)

    class Config:
        json_schema_extra = {
            "example": {
                "current_password": "old_password123",
                "new_password": "new_secure_password456",
            }
        }


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
