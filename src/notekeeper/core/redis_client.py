"""Redis client used by the Redis-backed refresh token ledger."""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..config import Settings, get_settings
from .errors import StorageError

logger = logging.getLogger(__name__)


class RedisClient:
    """Thin async wrapper that turns Redis failures into StorageError."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.redis: Optional[redis.Redis] = None

    def key(self, *parts: str) -> str:
        """Build a namespaced key."""
        return ":".join((self.settings.redis_key_prefix, *parts))

    async def connect(self) -> None:
        """Connect to Redis."""
        try:
            self.redis = redis.from_url(
                self.settings.redis_url,
                max_connections=self.settings.redis_max_connections,
                decode_responses=True,
            )
            # Test connection
            await self.redis.ping()
            logger.info("Connected to Redis successfully")
        except RedisError as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise StorageError() from e

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def _client(self) -> redis.Redis:
        if self.redis is None:
            await self.connect()
        return self.redis

    async def ping(self) -> bool:
        """Check the server answers."""
        client = await self._client()
        try:
            return bool(await client.ping())
        except RedisError as e:
            logger.error(f"Redis PING error: {e}")
            raise StorageError() from e

    async def set_if_absent(self, key: str, value: str, expire: Optional[int] = None) -> bool:
        """SET NX with optional expiration; False when the key already exists."""
        client = await self._client()
        try:
            return bool(await client.set(key, value, ex=expire, nx=True))
        except RedisError as e:
            logger.error(f"Redis SET NX error for key {key}: {e}")
            raise StorageError() from e

    async def delete(self, key: str) -> bool:
        """Delete key; False when it did not exist."""
        client = await self._client()
        try:
            return await client.delete(key) > 0
        except RedisError as e:
            logger.error(f"Redis DELETE error for key {key}: {e}")
            raise StorageError() from e

    async def exists(self, key: str) -> bool:
        """Check if key exists in Redis."""
        client = await self._client()
        try:
            return await client.exists(key) > 0
        except RedisError as e:
            logger.error(f"Redis EXISTS error for key {key}: {e}")
            raise StorageError() from e


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
