# ============================================================================
# FILE: openmusic/api/router.py
# ============================================================================
from fastapi import APIRouter
from openmusic.api.endpoints import (
    albums,
    authentications,
    collaborations,
    exports,
    playlists,
    songs,
    users,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(albums.router, prefix="/albums", tags=["albums"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(authentications.router, prefix="/authentications", tags=["authentications"])
api_router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
api_router.include_router(collaborations.router, prefix="/collaborations", tags=["collaborations"])
api_router.include_router(exports.router, prefix="/export", tags=["exports"])
