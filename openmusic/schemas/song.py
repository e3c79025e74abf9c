# ============================================================================
# FILE: openmusic/schemas/song.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from openmusic.schemas.common import check_year

class SongPayload(BaseModel):
    """Schema for creating or replacing a song"""
    title: str = Field(..., min_length=1)
    year: int
    genre: str = Field(..., min_length=1)
    performer: str = Field(..., min_length=1)
    duration: Optional[int] = Field(None, ge=0)  # seconds
    album_id: Optional[str] = Field(None, alias="albumId")

    class Config:
        populate_by_name = True

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: int) -> int:
        return check_year(value)
