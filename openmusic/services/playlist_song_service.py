# ============================================================================
# FILE: openmusic/services/playlist_song_service.py
# ============================================================================
from typing import Dict, List, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.playlist import PlaylistSong
from openmusic.db.models.song import Song
from openmusic.services.playlist_service import PlaylistService
from openmusic.services.song_service import SongService, song_to_summary
from openmusic.core.cache import CacheService, playlist_songs_key
from openmusic.core.exceptions import InvariantError, NotFoundError
import logging

logger = logging.getLogger(__name__)

class PlaylistSongService:
    """Service layer for the songs inside a playlist"""

    def __init__(
        self,
        db: Session,
        cache: CacheService,
        song_service: SongService,
        playlist_service: PlaylistService
    ):
        self.db = db
        self.cache = cache
        self.song_service = song_service
        self.playlist_service = playlist_service

    def add_song_to_playlist(self, playlist_id: str, song_id: str) -> str:
        """Add a song to a playlist (the song must exist)"""
        self.song_service.verify_song_exists(song_id)

        existing = self.db.query(PlaylistSong.id).filter(
            PlaylistSong.playlist_id == playlist_id,
            PlaylistSong.song_id == song_id
        ).first()
        if existing:
            raise InvariantError("Song is already in the playlist")

        entry = PlaylistSong(id=generate_id("playlist-songs"), playlist_id=playlist_id, song_id=song_id)
        try:
            self.db.add(entry)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise InvariantError("Failed to add song to playlist")

        self.cache.delete(playlist_songs_key(playlist_id))
        logger.info(f"Song added to playlist {playlist_id}: {song_id}")
        return entry.id

    def get_songs_from_playlist(self, playlist_id: str) -> List[Dict]:
        songs = (
            self.db.query(Song.id, Song.title, Song.performer)
            .join(PlaylistSong, PlaylistSong.song_id == Song.id)
            .filter(PlaylistSong.playlist_id == playlist_id)
            .order_by(PlaylistSong.added_at)
            .all()
        )
        return [song_to_summary(song) for song in songs]

    def get_playlist_with_songs(self, playlist_id: str) -> Tuple[Dict, bool]:
        """
        Playlist details with its songs, served cache-aside

        Returns:
            (playlist, from_cache)
        """
        key = playlist_songs_key(playlist_id)
        cached = self.cache.get(key)
        if cached.hit:
            return cached.value, True

        playlist = self.playlist_service.get_playlist_by_id(playlist_id)
        playlist["songs"] = self.get_songs_from_playlist(playlist_id)

        self.cache.set(key, playlist)
        return playlist, False

    def delete_song_from_playlist(self, playlist_id: str, song_id: str) -> None:
        deleted = self.db.query(PlaylistSong).filter(
            PlaylistSong.playlist_id == playlist_id,
            PlaylistSong.song_id == song_id
        ).delete()
        if not deleted:
            raise NotFoundError("Failed to remove song from playlist. Song not found in playlist")

        self.db.commit()
        self.cache.delete(playlist_songs_key(playlist_id))
        logger.info(f"Song removed from playlist {playlist_id}: {song_id}")
