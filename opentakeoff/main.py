# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import (
    count_events_router,
    count_router,
    device_router,
    health_router,
    history_router,
    location_router,
    plan_router,
    project_router,
    stamp_router,
)
from .core.config import get_settings
from .infrastructure.db.mongo_connection import close_database, ensure_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates MongoDB indexes on startup and closes the client on shutdown.
    """
    settings = get_settings()
    if settings.mongo_ensure_indexes:
        try:
            await ensure_indexes()
            logger.info("MongoDB indexes ensured")
        except Exception as e:
            # Don't fail app startup if MongoDB is unreachable yet
            logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    try:
        close_database()
    except Exception as e:
        logger.error(f"Error closing MongoDB client: {e}", exc_info=True)

    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging level
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("opentakeoff").setLevel(settings.log_level)

    application = FastAPI(
        title="OpenTakeOff Backend API",
        version="1.0.0",
        description="Construction take-off backend: plans, stamps, locations, counts and history",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Link", "Content-Disposition"],
    )

    # Register API routers
    application.include_router(project_router, prefix="/api/v1")
    application.include_router(plan_router, prefix="/api/v1")
    application.include_router(device_router, prefix="/api/v1")
    application.include_router(location_router, prefix="/api/v1")
    application.include_router(stamp_router, prefix="/api/v1")
    application.include_router(count_router, prefix="/api/v1")
    application.include_router(history_router, prefix="/api/v1")
    application.include_router(health_router, prefix="/api/v1")
    application.include_router(count_events_router)

    return application


# Create application instance
app = create_application()
