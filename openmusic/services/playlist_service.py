# ============================================================================
# FILE: openmusic/services/playlist_service.py
# ============================================================================
from typing import Dict, List, Tuple
from sqlalchemy import or_, select
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.playlist import Collaboration, Playlist
from openmusic.db.models.user import User
from openmusic.services.collaboration_service import CollaborationService
from openmusic.core.cache import (
    CacheService,
    playlist_activities_key,
    playlist_songs_key,
    playlists_key,
)
from openmusic.core.exceptions import AuthorizationError, NotFoundError
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """Service layer for playlist operations and playlist access control"""

    def __init__(self, db: Session, cache: CacheService, collaboration_service: CollaborationService):
        self.db = db
        self.cache = cache
        self.collaboration_service = collaboration_service

    def add_playlist(self, name: str, owner: str) -> str:
        """Create a playlist; the owner is registered as its first collaborator"""
        playlist = Playlist(id=generate_id("playlist"), name=name, owner=owner)
        try:
            self.db.add(playlist)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise

        # also clears playlists:{owner}
        self.collaboration_service.add_collaboration(playlist.id, owner)
        logger.info(f"Playlist created: {playlist.id} for user {owner}")
        return playlist.id

    def get_playlists(self, user_id: str) -> Tuple[List[Dict], bool]:
        """
        Get playlists the user owns or collaborates on

        Returns:
            (playlists, from_cache)
        """
        key = playlists_key(user_id)
        cached = self.cache.get(key)
        if cached.hit:
            return cached.value, True

        shared = select(Collaboration.playlist_id).where(Collaboration.user_id == user_id)
        rows = (
            self.db.query(Playlist.id, Playlist.name, User.username)
            .join(User, User.id == Playlist.owner)
            .filter(or_(Playlist.owner == user_id, Playlist.id.in_(shared)))
            .order_by(Playlist.created_at)
            .all()
        )
        playlists = [{"id": r.id, "name": r.name, "username": r.username} for r in rows]

        self.cache.set(key, playlists)
        return playlists, False

    def get_playlist_by_id(self, playlist_id: str) -> Dict:
        row = (
            self.db.query(Playlist.id, Playlist.name, User.username)
            .join(User, User.id == Playlist.owner)
            .filter(Playlist.id == playlist_id)
            .first()
        )
        if not row:
            raise NotFoundError("Playlist not found")
        return {"id": row.id, "name": row.name, "username": row.username}

    def delete_playlist_by_id(self, playlist_id: str) -> None:
        """Delete a playlist with its songs, collaborations and activities"""
        playlist = self.db.query(Playlist).filter(Playlist.id == playlist_id).first()
        if not playlist:
            raise NotFoundError("Failed to delete playlist. Id not found")

        owner = playlist.owner
        self.db.delete(playlist)
        self.db.commit()

        self.cache.delete(
            playlists_key(owner),
            playlist_songs_key(playlist_id),
            playlist_activities_key(playlist_id),
        )
        logger.info(f"Playlist deleted: {playlist_id}")

    def verify_playlist_owner(self, playlist_id: str, user_id: str) -> None:
        owner = self.db.query(Playlist.owner).filter(Playlist.id == playlist_id).scalar()
        if owner is None:
            raise NotFoundError("Playlist not found")
        if owner != user_id:
            raise AuthorizationError("You are not entitled to access this resource")

    def verify_playlist_access(self, playlist_id: str, user_id: str) -> None:
        """
        Allow the owner or any registered collaborator

        The ownership check runs first since it needs a single query; only a
        non-owner falls through to the collaboration lookup. A missing
        playlist is reported as NotFoundError whoever asks.
        """
        try:
            self.verify_playlist_owner(playlist_id, user_id)
        except AuthorizationError:
            self.collaboration_service.verify_collaborator(playlist_id, user_id)
