# ============================================================================
# FILE: openmusic/services/album_service.py
# ============================================================================
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.album import Album
from openmusic.db.models.song import Song
from openmusic.schemas.album import AlbumPayload
from openmusic.services.song_service import playlist_cache_keys_for_songs
from openmusic.core.cache import CacheService, album_likes_key
from openmusic.core.exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)

def album_to_model(album: Album) -> Dict:
    return {
        "id": album.id,
        "name": album.name,
        "year": album.year,
        "coverUrl": album.cover,
    }

class AlbumService:
    """Service layer for album operations"""

    def __init__(self, db: Session, cache: CacheService):
        self.db = db
        self.cache = cache

    def add_album(self, payload: AlbumPayload) -> str:
        album = Album(id=generate_id("album"), name=payload.name, year=payload.year)
        try:
            self.db.add(album)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating album: {e}")
            raise
        logger.info(f"Album created: {album.id}")
        return album.id

    def get_albums(self) -> List[Dict]:
        return [album_to_model(album) for album in self.db.query(Album).all()]

    def _get_album(self, album_id: str) -> Album:
        album = self.db.query(Album).filter(Album.id == album_id).first()
        if not album:
            raise NotFoundError("Album not found")
        return album

    def get_album_by_id(self, album_id: str) -> Dict:
        """Get an album together with the songs that belong to it"""
        album = self._get_album(album_id)
        songs = (
            self.db.query(Song.id, Song.title, Song.performer)
            .filter(Song.album_id == album_id)
            .all()
        )
        return {
            **album_to_model(album),
            "songs": [{"id": s.id, "title": s.title, "performer": s.performer} for s in songs],
        }

    def verify_album_exists(self, album_id: str) -> None:
        self._get_album(album_id)

    def edit_album_by_id(self, album_id: str, payload: AlbumPayload) -> None:
        album = self.db.query(Album).filter(Album.id == album_id).first()
        if not album:
            raise NotFoundError("Failed to update album. Id not found")

        album.name = payload.name
        album.year = payload.year
        self.db.commit()
        logger.info(f"Album updated: {album_id}")

    def delete_album_by_id(self, album_id: str) -> None:
        album = self.db.query(Album).filter(Album.id == album_id).first()
        if not album:
            raise NotFoundError("Failed to delete album. Id not found")

        # songs of the album go with it
        stale_keys = playlist_cache_keys_for_songs(self.db, [song.id for song in album.songs])
        self.db.delete(album)
        self.db.commit()
        self.cache.delete(album_likes_key(album_id), *stale_keys)
        logger.info(f"Album deleted: {album_id}")

    def add_cover_url(self, album_id: str, cover_url: str) -> Optional[str]:
        """
        Point the album at a new cover

        Returns:
            The replaced cover URL, if the album had one
        """
        album = self._get_album(album_id)
        previous = album.cover
        album.cover = cover_url
        self.db.commit()
        logger.info(f"Cover set for album {album_id}")
        return previous
