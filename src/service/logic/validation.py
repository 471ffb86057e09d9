"""
Request body validation for write operations.

The create-user body is parsed and validated in one step producing either a
typed ``CreateUserRequest`` or a ``ValidationError``. A body that is not valid
JSON is not treated as an empty object: it raises ``InternalError`` so client
mistakes are not masked as empty writes.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from service.handlers.utils.errors import InternalError, ValidationError
from service.models.input import CreateUserRequest

MISSING_FIELDS_MESSAGE = 'Name and email are required'


def _field_errors(error: PydanticValidationError) -> List[Dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in detail["loc"]) or "body",
            "message": detail["msg"],
        }
        for detail in error.errors()
    ]


def parse_create_user_request(body: Optional[str]) -> CreateUserRequest:
    """
    Parse and validate a create-user request body.

    Args:
        body: Raw request body, None or empty when the client sent nothing

    Returns:
        Validated request

    Raises:
        ValidationError: If name or email is missing, empty or not a string
        InternalError: If the body is not valid JSON
    """
    payload: Any = {}
    if body:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise InternalError(f'Invalid JSON in request body: {e}') from e

    try:
        return CreateUserRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            message=MISSING_FIELDS_MESSAGE,
            field_errors=_field_errors(e),
        ) from e
