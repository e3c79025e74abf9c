# ============================================================================
# FILE: openmusic/schemas/authentication.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from openmusic.schemas.common import check_password_length

class LoginPayload(BaseModel):
    """Schema for POST /authentications"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_length(value)

class RefreshTokenPayload(BaseModel):
    """Schema for PUT and DELETE /authentications"""
    refresh_token: str = Field(..., alias="refreshToken", min_length=1)

    class Config:
        populate_by_name = True
