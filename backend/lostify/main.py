"""Lostify Backend - Main FastAPI Application

Campus lost-and-found service with automatic lost/found matching.

This module creates and configures the main FastAPI application, including:
- All API routers (auth, posts, matching, users, feedback, settings, analytics)
- Middleware (request ID correlation, CORS)
- Exception handlers
- Health and metrics endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .config import get_settings
from .database import get_db_session, init_db

# Observability
from .observability.logging_config import configure_logging
from .observability.middleware import RequestIDMiddleware
from .observability.router import router as observability_router

# Authentication & Authorization
from .auth.router import router as auth_router
from .auth.service import seed_admin_user
from .users.router import router as users_router

# Domain Routers
from .matching.router import router as matching_router
from .posts.router import router as posts_router
from .feedback.router import router as feedback_router
from .preferences.router import router as preferences_router
from .analytics.router import router as analytics_router

settings = get_settings()

# Configure logging
configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler.

    - Startup: create missing tables, seed the configured admin account
    - Shutdown: log only
    """
    logger.info("Lostify API starting up...")
    logger.info(f"Environment: {settings.ENV}")

    init_db()
    with get_db_session() as db:
        seed_admin_user(db, settings)

    yield

    logger.info("Lostify API shutting down...")


_docs_enabled = settings.ENV != "production"

app = FastAPI(
    title="Lostify API",
    description="Campus lost-and-found platform with automatic lost/found matching",
    version=__version__,
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    openapi_url="/openapi.json" if _docs_enabled else None,
    lifespan=lifespan,
)


# =============================================================================
# MIDDLEWARE CONFIGURATION
# =============================================================================

# Request ID Middleware (must be first for proper correlation)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Returns a structured error response with field-level details.
    """
    logger.warning(f"Validation error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(
    request: Request,
    exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database errors.

    Logs the full error but returns a generic message to prevent
    information leakage.
    """
    logger.error(
        f"Database error on {request.method} {request.url.path}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "database_error",
            "message": "A database error occurred. Please try again later.",
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle uncaught exceptions.

    Full details are logged but not exposed to the client.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


# =============================================================================
# ROUTER REGISTRATION
# =============================================================================

# Observability (health, metrics)
app.include_router(observability_router)

# Authentication & Authorization
app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")

# Matching must be registered before posts so /posts/my-matches is not
# captured by /posts/{post_id}
app.include_router(matching_router, prefix="/api")
app.include_router(posts_router, prefix="/api")

app.include_router(feedback_router, prefix="/api")
app.include_router(preferences_router, prefix="/api")
app.include_router(analytics_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root() -> dict[str, Any]:
    """Root endpoint - API information."""
    return {
        "name": "Lostify API",
        "version": __version__,
        "status": "running",
        "docs": "/docs" if _docs_enabled else None,
    }


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(
        "lostify.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=settings.ENV == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
