# ============================================================================
# FILE: openmusic/core/producer.py
# Publishes jobs for out-of-process consumers (playlist export)
# ============================================================================
import json
from typing import Any, Dict
import redis
import logging

logger = logging.getLogger(__name__)

class ProducerService:
    """Pushes JSON messages onto a Redis list used as a work queue"""

    def __init__(self, redis_client: redis.Redis):
        self.redis_client = redis_client

    def send_message(self, queue: str, message: Dict[str, Any]) -> None:
        body = json.dumps(message)
        self.redis_client.rpush(queue, body)
        logger.info(f"Message queued on {queue}")
