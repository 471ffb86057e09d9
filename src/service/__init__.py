"""
Users API Service Module.

This package contains the request handling core of the users API, following
the three-layer architecture pattern:

- handlers: Lambda entry point, routing, responses and the error boundary
- logic: Business logic and request validation
- dal: Data access layer for the DynamoDB users table
- models: Data models and schemas

Observability is provided by AWS Lambda Powertools, validation and
configuration by Pydantic models.
"""

__version__ = "1.0.0"
__description__ = "Serverless users API backed by DynamoDB"

# Re-export commonly used classes for convenience
from service.models.user import User
from service.models.input import CreateUserRequest
from service.models.output import BucketDescriptor, ListUsersOutput
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "User",
    "CreateUserRequest",
    "BucketDescriptor",
    "ListUsersOutput",
    "logger",
    "tracer",
    "metrics",
]
