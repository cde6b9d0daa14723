"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.config import get_settings
from employee_api.middleware.error_handler import (
    generic_exception_handler,
    http_exception_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from employee_api.middleware.security_headers import SecurityHeadersMiddleware
from employee_api.routers import employees

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    from employee_api.database import engine

    logger.info(f"Starting {app.title} ({get_settings().environment})")
    yield
    # Release pooled connections
    await engine.dispose()


def _allowed_origins(cors_origins: list[str], environment: str) -> list[str]:
    """Validate configured CORS origins.

    Raises:
        ValueError: If a wildcard is configured or production has no origins
    """
    allowed_origins = []
    for origin in cors_origins:
        # Wildcards are not allowed together with allow_credentials=True
        if origin == "*":
            raise ValueError(
                "CORS_ORIGINS cannot contain '*' wildcard when allow_credentials=True. "
                "Specify explicit origins."
            )
        # Origin format must be scheme://host[:port]
        if origin.startswith(("http://", "https://")):
            allowed_origins.append(origin)
        else:
            logger.warning(f"Ignoring malformed CORS origin: {origin}")

    if not allowed_origins and environment == "production":
        raise ValueError(
            "CORS_ORIGINS must be set in production. "
            "Example: CORS_ORIGINS=https://app.example.com"
        )

    return allowed_origins


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_settings()

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        description="Employee Directory API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # Sanitized error handlers to prevent information disclosure
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    allowed_origins = _allowed_origins(config.cors_origins_list, config.environment)

    # Middleware runs in REVERSE order of addition: CORS first on requests
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
    )

    app.include_router(employees.router, prefix="/api/v1/employees", tags=["Employees"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
