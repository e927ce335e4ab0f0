"""FastAPI application factory."""

from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..calculator import DynamicPackCalculator
from ..config import AppConfig
from ..repository import InMemoryPackRepository
from ..service import PackService
from .routes import error_response, router, system_router

logger = logging.getLogger(__name__)

API_TITLE = "Pack Calculator API"
API_DESCRIPTION = (
    "API for calculating optimal pack distributions based on configurable pack sizes"
)
API_VERSION = "1.0.0"


def build_service(config: AppConfig) -> PackService:
    """Wire the calculator and repository into a PackService."""
    repository = InMemoryPackRepository(config.default_pack_sizes)
    return PackService(DynamicPackCalculator(), repository)


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI validation errors into one line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def create_app(
    config: Optional[AppConfig] = None,
    service: Optional[PackService] = None,
) -> FastAPI:
    """
    Create the HTTP application.

    Args:
        config: Application configuration (None = defaults)
        service: Service to expose (None = build one from config)

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = AppConfig()
    if service is None:
        service = build_service(config)

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.config = config
    app.state.pack_service = service

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.error(f"Invalid request to {request.url.path}: {message}")
        return error_response(400, "Invalid request", message)

    app.include_router(router)
    app.include_router(system_router)

    logger.info(f"Created {API_TITLE} with pack sizes {service.get_available_pack_sizes()}")
    return app
