# ============================================================================
# FILE: openmusic/schemas/export.py
# ============================================================================
from pydantic import BaseModel, EmailStr, Field

class ExportPlaylistPayload(BaseModel):
    """Schema for requesting a playlist export by email"""
    target_email: EmailStr = Field(..., alias="targetEmail")

    class Config:
        populate_by_name = True
