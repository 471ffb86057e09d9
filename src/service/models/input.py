"""
Input models for request validation using Pydantic.

This module defines the body model of the create-user operation.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request model for creating a new user."""

    name: Annotated[str, Field(
        min_length=1,
        description='Display name of the user',
        examples=['Alice']
    )]

    email: Annotated[str, Field(
        min_length=1,
        description='Email address of the user',
        examples=['a@x.com']
    )]
