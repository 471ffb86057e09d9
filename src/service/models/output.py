"""
Output models for API responses using Pydantic.

This module defines the response bodies of the users API. Field aliases carry
the camelCase names used on the wire.
"""

from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from service.models.user import User


class HealthCheckOutput(BaseModel):
    """Response model for the health check endpoint."""

    ok: Annotated[bool, Field(
        default=True,
        description='Always true when the function is reachable'
    )] = True

    timestamp: Annotated[str, Field(
        description='ISO timestamp of the check'
    )]

    environment: Annotated[str, Field(
        description='Deployment environment name',
        examples=['dev', 'prod']
    )]

    version: Annotated[str, Field(
        description='Application version',
        examples=['1.0.0']
    )]


class BucketDescriptor(BaseModel):
    """Static identity of the upload bucket, reported as is."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bucket_name: Annotated[str, Field(
        alias='bucketName',
        description='S3 bucket name',
        examples=['uploads-dev-1a2b3c']
    )]

    region: Annotated[str, Field(
        description='AWS region of the bucket',
        examples=['us-east-1']
    )]


class ListUsersOutput(BaseModel):
    """Response model for listing users."""

    users: Annotated[List[User], Field(
        description='Every stored user, in store order'
    )]

    count: Annotated[int, Field(
        ge=0,
        description='Number of users returned'
    )]


class ErrorOutput(BaseModel):
    """Response model for client errors (400, 404)."""

    error: Annotated[str, Field(
        description='Error message',
        examples=['User not found', 'Route not found']
    )]

    field_errors: Annotated[Optional[List[Dict[str, str]]], Field(
        default=None,
        description='Per-field validation failures'
    )] = None


class InternalServerErrorOutput(BaseModel):
    """Response model for the error boundary (500)."""

    error: Annotated[str, Field(
        default='Internal server error',
        description='Generic error message'
    )] = 'Internal server error'

    message: Annotated[str, Field(
        description='Message of the underlying failure'
    )]
