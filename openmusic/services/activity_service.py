# ============================================================================
# FILE: openmusic/services/activity_service.py
# ============================================================================
from typing import Dict, List, Tuple
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.playlist import PlaylistSongActivity
from openmusic.db.models.song import Song
from openmusic.db.models.user import User
from openmusic.core.cache import CacheService, playlist_activities_key
from openmusic.core.exceptions import InvariantError
import logging

logger = logging.getLogger(__name__)

ACTION_ADD = "add"
ACTION_DELETE = "delete"
ACTIONS = (ACTION_ADD, ACTION_DELETE)

class ActivityService:
    """Append-only log of playlist song additions and removals"""

    def __init__(self, db: Session, cache: CacheService):
        self.db = db
        self.cache = cache

    def record(self, playlist_id: str, song_id: str, user_id: str, action: str) -> str:
        """Insert one activity row; there is no de-duplication"""
        if action not in ACTIONS:
            raise InvariantError(f"Unknown playlist activity action: {action}")

        activity = PlaylistSongActivity(
            id=generate_id("ps-activities"),
            playlist_id=playlist_id,
            song_id=song_id,
            user_id=user_id,
            action=action,
        )
        try:
            self.db.add(activity)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error recording {action} activity on {playlist_id}: {e}")
            raise InvariantError("Failed to record playlist activity")

        self.cache.delete(playlist_activities_key(playlist_id))
        return activity.id

    def get_activities(self, playlist_id: str) -> Tuple[List[Dict], bool]:
        """
        Activities of a playlist with the acting username and the song title

        Returns:
            (activities, from_cache)
        """
        key = playlist_activities_key(playlist_id)
        cached = self.cache.get(key)
        if cached.hit:
            return cached.value, True

        rows = (
            self.db.query(
                User.username,
                Song.title,
                PlaylistSongActivity.action,
                PlaylistSongActivity.time,
            )
            .select_from(PlaylistSongActivity)
            .outerjoin(User, User.id == PlaylistSongActivity.user_id)
            .outerjoin(Song, Song.id == PlaylistSongActivity.song_id)
            .filter(PlaylistSongActivity.playlist_id == playlist_id)
            .order_by(PlaylistSongActivity.time)
            .all()
        )
        activities = [
            {
                "username": r.username,
                "title": r.title,
                "action": r.action,
                "time": r.time.isoformat(),
            }
            for r in rows
        ]

        self.cache.set(key, activities)
        return activities, False
