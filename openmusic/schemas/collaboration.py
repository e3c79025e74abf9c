# ============================================================================
# FILE: openmusic/schemas/collaboration.py
# ============================================================================
from pydantic import BaseModel, Field

class CollaborationPayload(BaseModel):
    playlist_id: str = Field(..., alias="playlistId", min_length=1)
    user_id: str = Field(..., alias="userId", min_length=1)

    class Config:
        populate_by_name = True
