# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

# Local application imports
from .api.v1 import auth_router, room_router, image_router, message_router, RouteCorsMiddleware
from .core.config import get_settings
from .core.exceptions import HealenseError
from .infrastructure.db.mongo_connection import ensure_indexes, close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the MongoDB indexes on startup and releases the shared HTTP
    client and the database connection on shutdown.
    """
    try:
        await ensure_indexes()
        logger.info("MongoDB indexes ensured during application startup")
    except Exception as e:
        # Don't fail app startup if MongoDB is unavailable
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)

    close_database()
    logger.info("Application shutdown complete")


async def healense_error_handler(request: Request, exc: HealenseError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return PlainTextResponse(exc.user_message, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "Invalid request")
    logger.info(f"{request.method} {request.url.path} -> 400: {errors}")
    return PlainTextResponse(f"{field}: {detail}" if field else detail, status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return PlainTextResponse("Internal server error", status_code=500)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - Per-route CORS middleware
    - Plain-text error responses
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title="HEALense Chat API",
        version="1.0.0",
        description="Image-aware chat backend with streamed model replies",
        lifespan=lifespan
    )

    application.add_middleware(RouteCorsMiddleware, allow_origin=settings.cors_allow_origin)

    application.add_exception_handler(HealenseError, healense_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api")
    application.include_router(room_router, prefix="/api")
    application.include_router(image_router, prefix="/api")
    application.include_router(message_router, prefix="/api")

    return application


# Create application instance
app = create_application()
