# ============================================================================
# FILE: openmusic/services/album_like_service.py
# ============================================================================
from typing import Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from openmusic.db.base import generate_id
from openmusic.db.models.album import AlbumLike
from openmusic.core.cache import CacheService, album_likes_key
from openmusic.core.exceptions import InvariantError, NotFoundError
import logging

logger = logging.getLogger(__name__)

class AlbumLikeService:
    """Service layer for album likes; like counts are cached"""

    def __init__(self, db: Session, cache: CacheService):
        self.db = db
        self.cache = cache

    def add_like(self, user_id: str, album_id: str) -> str:
        self.verify_not_liked(user_id, album_id)

        like = AlbumLike(id=generate_id("like"), user_id=user_id, album_id=album_id)
        try:
            self.db.add(like)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Error liking album {album_id}: {e}")
            raise InvariantError("Failed to like album")

        self.cache.delete(album_likes_key(album_id))
        logger.info(f"Album {album_id} liked by {user_id}")
        return like.id

    def verify_not_liked(self, user_id: str, album_id: str) -> None:
        existing = self.db.query(AlbumLike.id).filter(
            AlbumLike.user_id == user_id,
            AlbumLike.album_id == album_id
        ).first()
        if existing:
            raise InvariantError("Failed to like album. Album is already liked")

    def delete_like(self, user_id: str, album_id: str) -> None:
        deleted = self.db.query(AlbumLike).filter(
            AlbumLike.user_id == user_id,
            AlbumLike.album_id == album_id
        ).delete()
        if not deleted:
            raise NotFoundError("Failed to unlike album. Like not found")

        self.db.commit()
        self.cache.delete(album_likes_key(album_id))
        logger.info(f"Album {album_id} unliked by {user_id}")

    def get_likes_count(self, album_id: str) -> Tuple[int, bool]:
        """
        Count likes for an album

        Returns:
            (likes, from_cache)
        """
        key = album_likes_key(album_id)
        cached = self.cache.get(key)
        if cached.hit:
            return cached.value, True

        likes = self.db.query(AlbumLike).filter(AlbumLike.album_id == album_id).count()
        self.cache.set(key, likes)
        return likes, False
