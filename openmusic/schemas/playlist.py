# ============================================================================
# FILE: openmusic/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, Field

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: str = Field(..., min_length=1)

class PlaylistSongPayload(BaseModel):
    """Schema for adding a song to, or removing it from, a playlist"""
    song_id: str = Field(..., alias="songId", min_length=1)

    class Config:
        populate_by_name = True
