"""HTTP endpoints for pack calculations and pack size configuration."""

from typing import Any, Dict
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..models.errors import PackServiceError, PackValidationError
from ..models.pack import (
    ErrorResponse,
    HealthResponse,
    PackRequest,
    PackResponse,
    PackSizesResponse,
    PackSizesUpdate,
    PackSizesUpdateResponse,
)
from ..service import PackService

logger = logging.getLogger(__name__)

SERVICE_NAME = "pack-calculator"

router = APIRouter(prefix="/api", tags=["packs"])
system_router = APIRouter(tags=["system"])


def get_pack_service(request: Request) -> PackService:
    """Dependency returning the service attached to the application."""
    return request.app.state.pack_service


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build a JSON error response."""
    payload = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@router.post(
    "/calculate",
    response_model=PackResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Calculate the optimal pack distribution",
)
def calculate_packs(
    pack_request: PackRequest,
    service: PackService = Depends(get_pack_service),
):
    """Calculate which packs to ship for the requested quantity."""
    try:
        return service.calculate_pack_distribution(pack_request)
    except (PackValidationError, PackServiceError) as e:
        logger.error(f"Calculation failed: {e}")
        return error_response(400, "Calculation failed", str(e))


@router.get(
    "/pack-sizes",
    response_model=PackSizesResponse,
    summary="List configured pack sizes",
)
def get_pack_sizes(service: PackService = Depends(get_pack_service)):
    """Return the configured pack sizes, sorted ascending."""
    return PackSizesResponse(pack_sizes=service.get_available_pack_sizes())


@router.put(
    "/pack-sizes",
    response_model=PackSizesUpdateResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Replace configured pack sizes",
)
def update_pack_sizes(
    update: PackSizesUpdate,
    service: PackService = Depends(get_pack_service),
):
    """Replace the configured pack sizes."""
    try:
        service.update_pack_sizes(update.pack_sizes)
    except PackValidationError as e:
        logger.error(f"Failed to update pack sizes: {e}")
        return error_response(400, "Failed to update pack sizes", str(e))

    return PackSizesUpdateResponse(
        message="Pack sizes updated successfully",
        pack_sizes=update.pack_sizes,
    )


@system_router.get("/health", response_model=HealthResponse, summary="Liveness probe")
def health():
    """Report service health."""
    return HealthResponse(status="healthy", service=SERVICE_NAME)


@system_router.get("/docs/json", summary="OpenAPI document")
def docs_json(request: Request) -> Dict[str, Any]:
    """Return the API documentation as JSON."""
    return request.app.openapi()
