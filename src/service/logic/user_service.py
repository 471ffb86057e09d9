"""
Business Logic Layer for user management.

This module coordinates between the handlers and the record store. It owns id
and timestamp generation; the store owns durability. Nothing is cached between
calls, every read goes back to the store.
"""

from typing import List

from aws_lambda_powertools.metrics import MetricUnit

from service.dal import UsersDalHandler
from service.handlers.utils.errors import UserNotFoundError
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.input import CreateUserRequest
from service.models.user import User


class UserService:
    """Business logic service for user management."""

    def __init__(self, users_dal: UsersDalHandler):
        """
        Initialize user service.

        Args:
            users_dal: Record store handler for the users table
        """
        self.users_dal = users_dal

    @tracer.capture_method
    def create_user(self, request: CreateUserRequest) -> User:
        """
        Create a new user.

        Args:
            request: Validated create-user request

        Returns:
            The stored user record

        Raises:
            ClientError: If the store write fails, not retried here
        """
        user = User.create(name=request.name, email=request.email)
        self.users_dal.put_user(user)

        metrics.add_metric(name="UserCreated", unit=MetricUnit.Count, value=1)
        logger.info("User created", extra={"user_id": user.id})
        return user

    @tracer.capture_method
    def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Args:
            user_id: Id taken verbatim from the request path

        Returns:
            The stored user record

        Raises:
            UserNotFoundError: If no user exists for the id
        """
        user = self.users_dal.get_user_by_id(user_id)
        if user is None:
            logger.info("User not found", extra={"user_id": user_id})
            raise UserNotFoundError(user_id)
        return user

    @tracer.capture_method
    def list_users(self) -> List[User]:
        """Return every stored user; order is not guaranteed."""
        users = self.users_dal.list_users()
        metrics.add_metric(name="UsersListed", unit=MetricUnit.Count, value=len(users))
        return users
