"""
Data Access Layer (DAL) for the users API.

This module provides the record store contract and the factory used at process
start to build the DynamoDB implementation. The business layer only depends on
``UsersDalHandler`` so tests can substitute an in-memory fake.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from service.models.user import User


@runtime_checkable
class UsersDalHandler(Protocol):
    """Protocol defining the record store interface."""

    def put_user(self, user: User) -> None:
        """Write a complete user record in a single atomic put."""
        ...

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve a user by its ID."""
        ...

    def list_users(self) -> List[User]:
        """Return every stored user."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for record store implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def put_user(self, user: User) -> None:
        """Write a complete user record in a single atomic put."""
        pass

    @abstractmethod
    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve a user by its ID."""
        pass

    @abstractmethod
    def list_users(self) -> List[User]:
        """Return every stored user."""
        pass


def get_dal_handler(
    table_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
) -> UsersDalHandler:
    """
    Factory function to get the record store handler.

    Args:
        table_name: Name of the DynamoDB table
        region_name: AWS region of the table
        endpoint_url: DynamoDB endpoint URL (for local testing)

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from service.dal.db_handler import DynamoDbHandler

    return DynamoDbHandler(table_name, region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'UsersDalHandler',
    'BaseDalHandler',
    'get_dal_handler'
]
