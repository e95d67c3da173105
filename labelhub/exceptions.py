"""
Domain exceptions for the print service.

Routes map these onto HTTP status codes:
ValidationError -> 400, NotFoundError -> 404, InternalError -> 500.
"""


class LabelHubError(Exception):
    """Base class for service errors."""

    error_code = "LABELHUB_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(LabelHubError):
    """Request data failed validation."""

    error_code = "VALIDATION_ERROR"


class NotFoundError(LabelHubError):
    """Print job is absent or has expired."""

    error_code = "NOT_FOUND"

    def __init__(self, message: str = "Print job not found or expired", details: dict | None = None):
        super().__init__(message, details)


class InternalError(LabelHubError):
    """Collaborator failure. The message never carries internals."""

    error_code = "INTERNAL_ERROR"
