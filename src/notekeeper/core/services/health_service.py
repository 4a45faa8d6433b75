"""Health service implementation."""

import asyncio
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ...config import Settings, get_settings
from ..errors import StorageError
from ..redis_client import RedisClient
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService

SKIPPED = {"connected": True, "status": "not_configured"}


class HealthService(IHealthService):
    """Reports reachability of the configured backends."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        engine: Optional[AsyncEngine] = None,
        redis_client: Optional[RedisClient] = None,
    ):
        self.settings = settings or get_settings()
        self.engine = engine
        self.redis_client = redis_client

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        db_health = await self.check_database_health()
        redis_health = await self.check_redis_health()

        overall_status = "healthy"
        if not db_health["connected"] or not redis_health["connected"]:
            overall_status = "unhealthy"

        return HealthCheckResponse(
            status=overall_status,
            version=self.settings.app_version,
            checks={"database": db_health, "redis": redis_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        if self.engine is None:
            return dict(SKIPPED)
        loop = asyncio.get_running_loop()
        try:
            start_time = loop.time()
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            response_time = (loop.time() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "response_time_ms": round(response_time, 2),
            }
        except (SQLAlchemyError, OSError) as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": type(e).__name__,
                "response_time_ms": None,
            }

    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        if self.redis_client is None:
            return dict(SKIPPED)
        loop = asyncio.get_running_loop()
        try:
            start_time = loop.time()
            await self.redis_client.ping()
            response_time = (loop.time() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "response_time_ms": round(response_time, 2),
            }
        except StorageError as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": e.message,
                "response_time_ms": None,
            }
