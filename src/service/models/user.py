"""
User domain model for the business logic layer.

This module defines the only persisted entity of the service. A user is
created once with a generated id and creation timestamp and is never updated
afterwards.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class User(BaseModel):
    """Core User domain model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Annotated[str, Field(
        description='Unique identifier for the user',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Display name of the user',
        examples=['Alice']
    )]

    email: Annotated[str, Field(
        min_length=1,
        description='Email address of the user, stored as given',
        examples=['a@x.com']
    )]

    created_at: Annotated[str, Field(
        alias='createdAt',
        description='ISO timestamp when the user was created'
    )]

    @classmethod
    def create(cls, name: str, email: str) -> 'User':
        """
        Create a new user with a generated ID and creation timestamp.

        Args:
            name: Name of the user
            email: Email address of the user

        Returns:
            New User instance with generated fields
        """
        return cls(
            id=str(uuid4()),
            name=name,
            email=email,
            created_at=utc_now_iso(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the user to the item stored in the table.

        Returns:
            Dictionary with exactly the four user attributes
        """
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        """Create a User instance from a stored item."""
        return cls(
            id=data['id'],
            name=data['name'],
            email=data['email'],
            created_at=data['createdAt'],
        )
