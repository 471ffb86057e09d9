"""
Service error taxonomy for the users API.

Validation and not-found errors are client-facing: the handler that detects
them turns them into a typed response. Everything else, including
``InternalError``, is left to the top-level error boundary which answers with a
generic 500.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit

from service.handlers.utils.observability import logger, metrics, tracer
from service.models.output import ErrorOutput, InternalServerErrorOutput


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    status_code: int = 500
    metric_name: str = "ErrorCount"

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "status_code": self.status_code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class ValidationError(BaseServiceError):
    """Raised when a write request is missing a required field."""

    status_code = 400
    metric_name = "ValidationError"

    def __init__(
        self,
        message: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
        )
        self.field_errors = field_errors or []


class ResourceNotFoundError(BaseServiceError):
    """Raised when a requested resource does not exist."""

    status_code = 404
    metric_name = "ResourceNotFound"

    def __init__(self, message: str, error_code: str = "RESOURCE_NOT_FOUND"):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.NOT_FOUND,
        )


class UserNotFoundError(ResourceNotFoundError):
    """Raised when no user record exists for an id."""

    metric_name = "UserNotFound"

    def __init__(self, user_id: str):
        super().__init__(message="User not found", error_code="USER_NOT_FOUND")
        self.user_id = user_id


class RouteNotFoundError(ResourceNotFoundError):
    """Raised when no route matches a method and path."""

    metric_name = "RouteNotFound"

    def __init__(self, method: str, path: str):
        super().__init__(message="Route not found", error_code="ROUTE_NOT_FOUND")
        self.method = method
        self.path = path


class InternalError(BaseServiceError):
    """Raised for failures that must surface as a 500, such as a malformed body."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="INTERNAL_SERVER_ERROR")


# Errors a handler answers itself; anything else reaches the error boundary
CLIENT_ERRORS = (ValidationError, ResourceNotFoundError)


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""
    metrics.add_metric(name=error.metric_name, unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    logger.info(
        "Client error returned",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_category": error.category.value,
            "error_message": error.message,
        }
    )


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Format a client-facing error for the response body."""
    field_errors = error.field_errors if isinstance(error, ValidationError) and error.field_errors else None
    return ErrorOutput(error=error.message, field_errors=field_errors).model_dump(exclude_none=True)


def format_internal_error_response(error: BaseException) -> Dict[str, Any]:
    """Format the generic 500 body produced by the error boundary."""
    return InternalServerErrorOutput(message=str(error)).model_dump()
