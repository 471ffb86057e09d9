"""
Business Logic Layer Module.

This module contains the business logic of the users API. It sits between the
handler layer (routing, responses) and the data access layer (DynamoDB):

- Validating create-user request bodies
- Generating user ids and creation timestamps
- Translating missing records into not-found errors
"""

from service.logic.user_service import UserService
from service.logic.validation import parse_create_user_request

__all__ = [
    "UserService",
    "parse_create_user_request",
]
