# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.v1 import auth_router, review_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .core.messages import get_messages
from .di.container import get_container, reset_container
from .infrastructure.db.mongo_connection import close_database, ensure_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container (and with it the MongoDB client), ensures the
    indexes the stores depend on, and closes the client on shutdown.
    """
    settings = get_settings()
    if settings.uses_default_secret:
        logger.warning("JWT_SECRET is not set; using the built-in default secret. Set it before deploying.")

    get_container()

    # Don't fail app startup if MongoDB is unavailable; requests will return 500 until it is
    try:
        await ensure_indexes()
        logger.info("MongoDB connected successfully")
    except Exception as e:
        logger.error(f"MongoDB connection error: {e}", exc_info=True)

    logger.info(f"Server started on port {settings.port}")

    yield

    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Velora Backend API",
        version="1.0.0",
        description="Authentication and public review board",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(application, settings, get_messages(settings.locale))

    # Register API routers
    application.include_router(auth_router, prefix="/api")
    application.include_router(review_router, prefix="/api/reviews")

    return application


# Create application instance
app = create_application()
