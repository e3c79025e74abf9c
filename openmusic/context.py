# ============================================================================
# FILE: openmusic/context.py
# Process-wide handles: database engine, Redis, cache, queue producer, storage
# ============================================================================
from typing import Optional
import redis
from sqlalchemy.engine import Engine
from openmusic.config import Settings
from openmusic.core.cache import CacheService
from openmusic.core.producer import ProducerService
from openmusic.core.security import TokenManager
from openmusic.core.storage import StorageService
from openmusic.db.base import Base
from openmusic.db.session import create_db_engine, create_session_factory
# imported for their side effect of registering the mappers on Base
from openmusic.db.models import album, playlist, song, user  # noqa: F401
import logging

logger = logging.getLogger(__name__)

class AppContext:
    """Owns every shared client for the lifetime of the process"""

    def __init__(
        self,
        settings: Settings,
        engine: Optional[Engine] = None,
        redis_client: Optional[redis.Redis] = None,
    ):
        self.settings = settings
        self.engine = engine or create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)
        self.session_factory = create_session_factory(self.engine)
        self.redis_client = redis_client or redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        self.cache = CacheService(self.redis_client, expire=settings.CACHE_EXPIRE_SECONDS)
        self.producer = ProducerService(self.redis_client)
        self.storage = StorageService(settings.UPLOAD_DIR)
        self.token_manager = TokenManager(settings)

    def startup(self) -> None:
        """Create tables, prepare the upload folder and check Redis"""
        Base.metadata.create_all(bind=self.engine)
        self.storage.ensure_folder()
        try:
            self.redis_client.ping()
            logger.info("Redis connection established")
        except redis.RedisError as e:
            # reads fall back to the database while Redis is unreachable
            logger.warning(f"Redis connection failed: {e}. Serving without cache.")

    def shutdown(self) -> None:
        try:
            self.redis_client.close()
        except redis.RedisError as e:
            logger.warning(f"Error closing Redis connection: {e}")
        self.engine.dispose()
