# ============================================================================
# FILE: openmusic/core/cache.py
# ============================================================================
import json
from dataclasses import dataclass
from typing import Any, Optional
import redis
import logging

logger = logging.getLogger(__name__)

# Header marking a response that was served from the cache
CACHE_HEADER = "X-Data-Source"
CACHE_HEADER_VALUE = "cache"


def playlists_key(user_id: str) -> str:
    return f"playlists:{user_id}"

def playlist_songs_key(playlist_id: str) -> str:
    return f"playlist-songs:{playlist_id}"

def playlist_activities_key(playlist_id: str) -> str:
    return f"playlist-activities:{playlist_id}"

def album_likes_key(album_id: str) -> str:
    return f"album-likes:{album_id}"


@dataclass(frozen=True)
class CacheResult:
    """Outcome of a cache read: a hit carrying the decoded value, or a miss"""
    hit: bool
    value: Any = None

MISS = CacheResult(hit=False)


class CacheService:
    """Redis cache helper class

    Presence in the cache is advisory. Any fault on read (connection error,
    timeout, malformed value) is reported as a miss, and faults on write or
    delete are logged and swallowed so the request can proceed.
    """

    def __init__(self, redis_client: Optional[redis.Redis], expire: int = 1800):
        self.redis_client = redis_client
        self.expire = expire

    def get(self, key: str) -> CacheResult:
        """Get a cache value"""
        if self.redis_client is None:
            return MISS

        try:
            raw = self.redis_client.get(key)
        except redis.RedisError as e:
            logger.warning(f"Cache get error for {key}: {e}")
            return MISS

        if raw is None:
            logger.debug(f"Cache miss: {key}")
            return MISS

        try:
            value = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Discarding malformed cache value for {key}: {e}")
            return MISS

        logger.debug(f"Cache hit: {key}")
        return CacheResult(hit=True, value=value)

    def set(self, key: str, value: Any, expire: Optional[int] = None) -> bool:
        """Set a cache value with expiration (defaults to the configured lifetime)"""
        if self.redis_client is None:
            return False

        try:
            serialized = json.dumps(value)
            self.redis_client.setex(key, expire or self.expire, serialized)
            return True
        except (redis.RedisError, TypeError, ValueError) as e:
            logger.error(f"Cache set error for {key}: {e}")
            return False

    def delete(self, *keys: str) -> bool:
        """Delete one or more cache keys (best effort)"""
        if self.redis_client is None or not keys:
            return False

        try:
            self.redis_client.delete(*keys)
            return True
        except redis.RedisError as e:
            logger.error(f"Cache delete error for {', '.join(keys)}: {e}")
            return False
