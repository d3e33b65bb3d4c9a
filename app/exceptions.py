"""Domain exceptions raised by the service layer."""
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base app exception. Carries the HTTP mapping used by the error handler."""

    status_code = 400
    error_code = "BAD_REQUEST"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(AppError):
    """A referenced user, content item, template or instance does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, id: Any):
        self.resource = resource
        self.id = id
        super().__init__(f"{resource} with id {id} not found", {"resource": resource, "id": id})


class ValidationError(AppError):
    """Input that is well-formed but violates a business rule."""

    status_code = 422
    error_code = "VALIDATION_ERROR"


class PreconditionFailedError(AppError):
    """The entity is not in a state that allows the requested transition."""

    status_code = 409
    error_code = "PRECONDITION_FAILED"
