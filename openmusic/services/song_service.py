# ============================================================================
# FILE: openmusic/services/song_service.py
# ============================================================================
from typing import Dict, Iterable, List, Optional
from sqlalchemy import select, union
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.album import Album
from openmusic.db.models.playlist import PlaylistSong, PlaylistSongActivity
from openmusic.db.models.song import Song
from openmusic.schemas.song import SongPayload
from openmusic.core.cache import CacheService, playlist_activities_key, playlist_songs_key
from openmusic.core.exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)

def song_to_model(song: Song) -> Dict:
    return {
        "id": song.id,
        "title": song.title,
        "year": song.year,
        "genre": song.genre,
        "performer": song.performer,
        "duration": song.duration,
        "albumId": song.album_id,
    }

def song_to_summary(song) -> Dict:
    return {"id": song.id, "title": song.title, "performer": song.performer}

def playlist_cache_keys_for_songs(db: Session, song_ids: Iterable[str]) -> List[str]:
    """Cache keys of every playlist whose song list or activity log mentions the songs"""
    song_ids = list(song_ids)
    if not song_ids:
        return []
    playlist_ids = db.execute(
        union(
            select(PlaylistSong.playlist_id).where(PlaylistSong.song_id.in_(song_ids)),
            select(PlaylistSongActivity.playlist_id).where(PlaylistSongActivity.song_id.in_(song_ids)),
        )
    ).scalars().all()
    keys = []
    for playlist_id in playlist_ids:
        keys.append(playlist_songs_key(playlist_id))
        keys.append(playlist_activities_key(playlist_id))
    return keys

class SongService:
    """Service layer for song operations"""

    def __init__(self, db: Session, cache: CacheService):
        self.db = db
        self.cache = cache

    def _verify_album_reference(self, album_id: Optional[str]) -> None:
        if album_id is None:
            return
        if not self.db.query(Album.id).filter(Album.id == album_id).first():
            raise NotFoundError("Album not found")

    def add_song(self, payload: SongPayload) -> str:
        self._verify_album_reference(payload.album_id)

        song = Song(
            id=generate_id("song"),
            title=payload.title,
            year=payload.year,
            genre=payload.genre,
            performer=payload.performer,
            duration=payload.duration,
            album_id=payload.album_id,
        )
        try:
            self.db.add(song)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating song: {e}")
            raise
        logger.info(f"Song created: {song.id}")
        return song.id

    def get_songs(self, title: Optional[str] = None, performer: Optional[str] = None) -> List[Dict]:
        """List songs, optionally filtered by case-insensitive title/performer substrings"""
        query = self.db.query(Song.id, Song.title, Song.performer)
        if title:
            query = query.filter(Song.title.icontains(title, autoescape=True))
        if performer:
            query = query.filter(Song.performer.icontains(performer, autoescape=True))
        return [song_to_summary(song) for song in query.all()]

    def get_song_by_id(self, song_id: str) -> Dict:
        song = self.db.query(Song).filter(Song.id == song_id).first()
        if not song:
            raise NotFoundError("Song not found")
        return song_to_model(song)

    def edit_song_by_id(self, song_id: str, payload: SongPayload) -> None:
        song = self.db.query(Song).filter(Song.id == song_id).first()
        if not song:
            raise NotFoundError("Failed to update song. Id not found")
        self._verify_album_reference(payload.album_id)

        song.title = payload.title
        song.year = payload.year
        song.genre = payload.genre
        song.performer = payload.performer
        song.duration = payload.duration
        song.album_id = payload.album_id
        self.db.commit()
        self.cache.delete(*playlist_cache_keys_for_songs(self.db, [song_id]))
        logger.info(f"Song updated: {song_id}")

    def delete_song_by_id(self, song_id: str) -> None:
        song = self.db.query(Song).filter(Song.id == song_id).first()
        if not song:
            raise NotFoundError("Failed to delete song. Id not found")

        stale_keys = playlist_cache_keys_for_songs(self.db, [song_id])
        self.db.delete(song)
        self.db.commit()
        self.cache.delete(*stale_keys)
        logger.info(f"Song deleted: {song_id}")

    def verify_song_exists(self, song_id: str) -> None:
        if not self.db.query(Song.id).filter(Song.id == song_id).first():
            raise NotFoundError("Song not found")
