"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routeparams import __version__
from routeparams.config import settings
from routeparams.api.v1.router import api_router
from routeparams.middleware import RequestLoggingMiddleware, setup_logging
from routeparams.core.exceptions import register_exception_handlers


# Setup logging early
setup_logging()
logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    """
    Validate configuration at startup.
    Exits with error in production if requirements not met.
    """
    errors = settings.validate_production_settings()

    if errors:
        logger.error("=" * 60)
        logger.error("CONFIGURATION ERRORS")
        logger.error("=" * 60)
        for error in errors:
            logger.error(f"  - {error}")
        logger.error("=" * 60)

        if settings.is_production():
            logger.critical("Refusing to start in production with unsafe configuration!")
            sys.exit(1)

    logger.info(f"Environment: {settings.app_env}")
    logger.info(f"Debug Mode: {settings.debug}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    logger.info(f"Starting {settings.app_name}...")

    validate_startup_config()

    logger.info(f"{settings.app_name} started successfully")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="""
Validation and translation of routing request parameters.

## Error Responses

All errors follow a consistent format:
```json
{
  "error": {
    "code": 2003,
    "message": "Human-readable message",
    "request_id": "abc123"
  }
}
```

Parameter errors use numeric codes; request schema errors use `VALIDATION_ERROR`.
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
    openapi_url="/openapi.json" if not settings.is_production() else None,
)

# ============================================================================
# Register Exception Handlers (before middleware)
# ============================================================================
register_exception_handlers(app)

# ============================================================================
# Middleware Stack (order matters - first added = last executed)
# ============================================================================

# 1. Request logging (outermost - captures everything)
app.add_middleware(RequestLoggingMiddleware)

# 2. CORS (innermost for preflight handling)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
    expose_headers=["X-Request-ID"],
    max_age=600,
)


# ============================================================================
# API Routes
# ============================================================================

app.include_router(api_router, prefix="/api/v1")


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Basic health check endpoint.
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "environment": settings.app_env,
    }


@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint with API information.
    """
    response = {
        "name": settings.app_name,
        "version": __version__,
        "health": "/health",
    }

    if not settings.is_production():
        response["docs"] = "/docs"
        response["redoc"] = "/redoc"

    return response
