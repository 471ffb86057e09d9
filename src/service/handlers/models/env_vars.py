"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables consumed
by the users API handler. The values are read once per process and never
mutated afterwards.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

from service.handlers.utils.responses import (
    DEFAULT_CORS_ALLOW_HEADERS,
    DEFAULT_CORS_ALLOW_METHODS,
    DEFAULT_CORS_ALLOW_ORIGIN,
    CorsPolicy,
)


class UsersApiEnvVars(BaseModel):
    """Environment variables for the users API handler."""

    # DynamoDB table name for storing users
    TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for user storage',
        min_length=1
    )]

    # S3 bucket reported by the bucket endpoint
    BUCKET_NAME: Annotated[str, Field(
        description='S3 bucket name for uploads',
        min_length=1
    )]

    # AWS region
    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    # Environment name, the API Gateway stage the function is deployed to
    ENVIRONMENT: Annotated[str, Field(
        default='development',
        description='Deployment environment name',
        min_length=1
    )] = 'development'

    # Application version
    APP_VERSION: Annotated[str, Field(
        default='1.0.0',
        description='Application version string'
    )] = '1.0.0'

    # For local testing against DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override'
    )] = None

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # API Gateway settings
    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default=DEFAULT_CORS_ALLOW_ORIGIN,
        description='CORS allowed origins for API responses'
    )] = DEFAULT_CORS_ALLOW_ORIGIN

    CORS_ALLOW_HEADERS: Annotated[str, Field(
        default=DEFAULT_CORS_ALLOW_HEADERS,
        description='CORS allowed headers for API requests'
    )] = DEFAULT_CORS_ALLOW_HEADERS

    CORS_ALLOW_METHODS: Annotated[str, Field(
        default=DEFAULT_CORS_ALLOW_METHODS,
        description='CORS allowed HTTP methods'
    )] = DEFAULT_CORS_ALLOW_METHODS

    @property
    def cors_policy(self) -> CorsPolicy:
        """CORS policy built from the CORS_* variables."""
        return CorsPolicy(
            allow_origin=self.CORS_ALLOW_ORIGIN,
            allow_headers=self.CORS_ALLOW_HEADERS,
            allow_methods=self.CORS_ALLOW_METHODS,
        )


def get_handler_env_vars() -> UsersApiEnvVars:
    """
    Get typed environment variables for the users API handler.

    Returns:
        Validated environment variables model instance

    Raises:
        ValueError: If a required variable is missing or a value is invalid
    """
    return get_environment_variables(model=UsersApiEnvVars)
