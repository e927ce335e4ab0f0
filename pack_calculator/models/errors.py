"""Exceptions raised by the service layer."""

from typing import Dict, Optional


class PackValidationError(Exception):
    """Custom exception for request validation errors with context."""

    def __init__(self, message: str, context: Optional[Dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with context."""
        msg = self.message
        if self.context:
            details = ", ".join(f"{key}={value}" for key, value in self.context.items())
            msg += f" ({details})"
        return msg


class PackServiceError(Exception):
    """Raised when a pack calculation fails after validation."""
    pass


def is_validation_error(error: BaseException) -> bool:
    """Check if an error is a PackValidationError."""
    return isinstance(error, PackValidationError)
