# ============================================================================
# FILE: openmusic/schemas/user.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from openmusic.schemas.common import check_password_length

class UserCreate(BaseModel):
    """Schema for user registration"""
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    fullname: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_length(value)

class UserResponse(BaseModel):
    """Public view of a user (never exposes the password hash)"""
    id: str
    username: str
    fullname: str

    class Config:
        from_attributes = True
