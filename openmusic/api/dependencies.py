# ============================================================================
# FILE: openmusic/api/dependencies.py
# ============================================================================
from typing import Generator, Optional
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from openmusic.context import AppContext
from openmusic.core.cache import CacheService
from openmusic.core.exceptions import AuthenticationError
from openmusic.core.security import TokenManager
from openmusic.services.activity_service import ActivityService
from openmusic.services.album_like_service import AlbumLikeService
from openmusic.services.album_service import AlbumService
from openmusic.services.authentication_service import AuthenticationService
from openmusic.services.collaboration_service import CollaborationService
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.playlist_song_service import PlaylistSongService
from openmusic.services.song_service import SongService
from openmusic.services.user_service import UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/authentications", auto_error=False)

def get_context(request: Request) -> AppContext:
    return request.app.state.context

def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    """One session per request, always closed"""
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_cache(context: AppContext = Depends(get_context)) -> CacheService:
    return context.cache

def get_token_manager(context: AppContext = Depends(get_context)) -> TokenManager:
    return context.token_manager

def require_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    token_manager: TokenManager = Depends(get_token_manager)
) -> str:
    """
    Resolve the caller's user id from the bearer access token
    Raises 401 when the token is missing, expired or forged
    """
    if not token:
        raise AuthenticationError("Missing authentication")

    payload = token_manager.decode_access_token(token)
    user_id = payload.get("id")
    if not user_id:
        raise AuthenticationError("Invalid access token")
    return user_id

# ----------------------------------------------------------------------------
# Service factories (constructed per request around the request's session)
# ----------------------------------------------------------------------------

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)

def get_authentication_service(db: Session = Depends(get_db)) -> AuthenticationService:
    return AuthenticationService(db)

def get_song_service(
    db: Session = Depends(get_db),
    cache: CacheService = Depends(get_cache)
) -> SongService:
    return SongService(db, cache)

def get_album_service(
    db: Session = Depends(get_db),
    cache: CacheService = Depends(get_cache)
) -> AlbumService:
    return AlbumService(db, cache)

def get_album_like_service(
    db: Session = Depends(get_db),
    cache: CacheService = Depends(get_cache)
) -> AlbumLikeService:
    return AlbumLikeService(db, cache)

def get_collaboration_service(
    db: Session = Depends(get_db),
    cache: CacheService = Depends(get_cache),
    user_service: UserService = Depends(get_user_service)
) -> CollaborationService:
    return CollaborationService(db, user_service, cache)

def get_playlist_service(
    db: Session = Depends(get_db),
    cache: CacheService = Depends(get_cache),
    collaboration_service: CollaborationService = Depends(get_collaboration_service)
) -> PlaylistService:
    return PlaylistService(db, cache, collaboration_service)

def get_playlist_song_service(
    db: Session = Depends(get_db),
    cache: CacheService = Depends(get_cache),
    song_service: SongService = Depends(get_song_service),
    playlist_service: PlaylistService = Depends(get_playlist_service)
) -> PlaylistSongService:
    return PlaylistSongService(db, cache, song_service, playlist_service)

def get_activity_service(
    db: Session = Depends(get_db),
    cache: CacheService = Depends(get_cache)
) -> ActivityService:
    return ActivityService(db, cache)
