# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import (
    auth_router,
    collaborators_router,
    health_router,
    notes_router,
    register_exception_handlers,
)
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .database import create_tables, dispose_engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting NoteKeeper application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "storage_backend": settings.storage_backend,
            "token_ledger_backend": settings.token_ledger_backend,
        },
    )

    if settings.token_ledger_backend == "redis":
        await get_redis_client().connect()
        logger.info("Redis connection established")

    if settings.storage_backend == "database":
        await create_tables()
        logger.info("Database tables created/verified")

    yield

    logger.info("Shutting down NoteKeeper application")
    if settings.token_ledger_backend == "redis":
        await get_redis_client().disconnect()
    if settings.storage_backend == "database":
        await dispose_engine()


app = FastAPI(
    title=settings.app_name,
    description="Multi-user notes with owner-managed collaboration",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(collaborators_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {"message": settings.app_name, "version": settings.app_version}


# Liveness probe, no backend checks
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("notekeeper.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
