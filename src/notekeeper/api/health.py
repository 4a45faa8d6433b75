"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..core.redis_client import get_redis_client
from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import get_engine

router = APIRouter(prefix="/health", tags=["health"])


def get_health_service(settings: Settings = Depends(get_settings)) -> HealthService:
    engine = get_engine() if settings.storage_backend == "database" else None
    redis_client = get_redis_client() if settings.token_ledger_backend == "redis" else None
    return HealthService(settings, engine=engine, redis_client=redis_client)


@router.get("/", response_model=HealthCheckResponse)
async def health_check(health_service: HealthService = Depends(get_health_service)):
    """Get overall system health status."""
    return await health_service.get_health_status()


@router.get("/database", response_model=Dict[str, Any])
async def database_health(health_service: HealthService = Depends(get_health_service)):
    """Check database connectivity."""
    return await health_service.check_database_health()


@router.get("/redis", response_model=Dict[str, Any])
async def redis_health(health_service: HealthService = Depends(get_health_service)):
    """Check Redis connectivity."""
    return await health_service.check_redis_health()
