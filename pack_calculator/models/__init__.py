"""Data models for the pack calculator."""

from .pack import (
    PackSize,
    PackRequest,
    PackResponse,
    PackSizesUpdate,
    PackSizesResponse,
    PackSizesUpdateResponse,
    ErrorResponse,
    HealthResponse,
)
from .errors import PackValidationError, PackServiceError, is_validation_error

__all__ = [
    # Pack configuration
    "PackSize",
    # Requests and responses
    "PackRequest",
    "PackResponse",
    "PackSizesUpdate",
    "PackSizesResponse",
    "PackSizesUpdateResponse",
    "ErrorResponse",
    "HealthResponse",
    # Errors
    "PackValidationError",
    "PackServiceError",
    "is_validation_error",
]
