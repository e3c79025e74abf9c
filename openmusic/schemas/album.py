# ============================================================================
# FILE: openmusic/schemas/album.py
# ============================================================================
from pydantic import BaseModel, Field, field_validator
from openmusic.schemas.common import check_year

# Content types accepted for album covers
IMAGE_CONTENT_TYPES = {
    "image/apng",
    "image/avif",
    "image/gif",
    "image/jpeg",
    "image/png",
    "image/svg+xml",
    "image/webp",
}

class AlbumPayload(BaseModel):
    """Schema for creating or replacing an album"""
    name: str = Field(..., min_length=1)
    year: int

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: int) -> int:
        return check_year(value)
