"""
Redis cache client for the Automation Advisor.

Read-through cache for recommendation results. Values are stored as JSON
with a TTL given in milliseconds. The cache is never a source of truth:
every failure is logged and reported as a miss (or False on writes).
"""

import json
import logging
from typing import Any, Optional

from automation_advisor.config.settings import get_settings

logger = logging.getLogger(__name__)


class CacheClient:
    """
    Redis-backed key-value cache with TTL.

    Provides ``get``/``set``/``delete`` with JSON-serialized values.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        db: Optional[int] = None,
        password: Optional[str] = None,
    ):
        """
        Initialize cache client.

        Args:
            host: Redis host
            port: Redis port
            db: Redis database number
            password: Redis password
        """
        settings = get_settings()
        self.host = host or settings.redis_host
        self.port = port or settings.redis_port
        self.db = db if db is not None else settings.redis_db
        self.password = password or settings.redis_password
        self._redis = None

    def _get_redis(self):
        """Get or create Redis connection."""
        if self._redis is None:
            import redis
            settings = get_settings()
            self._redis = redis.Redis(
                host=self.host,
                port=self.port,
                db=self.db,
                password=self.password,
                decode_responses=True,
                socket_timeout=settings.redis_socket_timeout,
                socket_connect_timeout=settings.redis_connect_timeout,
            )
            logger.info(f"Connected to Redis at {self.host}:{self.port}")
        return self._redis

    def get(self, key: str) -> Optional[Any]:
        """
        Get a cached value.

        Args:
            key: Cache key

        Returns:
            Decoded value, or None on a miss or error
        """
        try:
            data = self._get_redis().get(key)
            if data is None:
                return None
            return json.loads(data)
        except Exception as e:
            logger.warning(f"Cache get failed for {key}: {e}")
            return None

    def set(self, key: str, value: Any, ttl_ms: int) -> bool:
        """
        Store a value.

        Args:
            key: Cache key
            value: JSON-serializable value
            ttl_ms: Time to live in milliseconds (rounded up to whole seconds)

        Returns:
            True if stored
        """
        ttl_seconds = max(1, -(-ttl_ms // 1000))
        try:
            self._get_redis().setex(key, ttl_seconds, json.dumps(value, default=str))
            return True
        except Exception as e:
            logger.warning(f"Cache set failed for {key}: {e}")
            return False

    def delete(self, key: str) -> bool:
        """
        Delete a cached value.

        Returns:
            True if a value was deleted
        """
        try:
            return self._get_redis().delete(key) > 0
        except Exception as e:
            logger.warning(f"Cache delete failed for {key}: {e}")
            return False

    def close(self):
        """Close Redis connection."""
        if self._redis:
            self._redis.close()
            self._redis = None


# Singleton client instance
_cache_client: Optional[CacheClient] = None


def get_cache_client() -> CacheClient:
    """
    Get the singleton cache client instance.

    Returns:
        CacheClient instance
    """
    global _cache_client
    if _cache_client is None:
        _cache_client = CacheClient()
    return _cache_client


def reset_cache_client():
    """Reset the singleton client (for testing)."""
    global _cache_client
    if _cache_client:
        _cache_client.close()
    _cache_client = None
