"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including the create-user request body, output response models and the user domain
model.
"""

from .input import CreateUserRequest
from .output import (
    BucketDescriptor,
    ErrorOutput,
    HealthCheckOutput,
    InternalServerErrorOutput,
    ListUsersOutput,
)
from .user import User

__all__ = [
    # Input models
    "CreateUserRequest",

    # Output models
    "BucketDescriptor",
    "ErrorOutput",
    "HealthCheckOutput",
    "InternalServerErrorOutput",
    "ListUsersOutput",

    # Domain models
    "User",
]
