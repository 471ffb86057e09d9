"""
DynamoDB implementation of the Data Access Layer (DAL).

This module provides the record store used in production. Users live in a
table keyed by ``id``; every item holds exactly the four user attributes.
"""

from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import ClientError

from service.dal import BaseDalHandler
from service.handlers.utils.observability import logger, tracer
from service.models.user import User


class DynamoDbHandler(BaseDalHandler):
    """DynamoDB implementation of the record store."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        super().__init__(table_name)

        resource_config: Dict[str, Any] = {}
        if region_name:
            resource_config['region_name'] = region_name
        if endpoint_url:
            resource_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **resource_config)
        self.table = self.dynamodb.Table(table_name)
        logger.debug('DynamoDB handler initialized', extra={
            'table_name': table_name,
            'region_name': region_name,
            'endpoint_url': endpoint_url,
        })

    @tracer.capture_method
    def put_user(self, user: User) -> None:
        """
        Write a new user to DynamoDB.

        Args:
            user: Complete user record

        Raises:
            ClientError: If DynamoDB operation fails, including an id collision
        """
        try:
            self.table.put_item(
                Item=user.to_dict(),
                ConditionExpression='attribute_not_exists(id)'  # Ensure no duplicates
            )

            logger.info('Successfully created user in database', extra={'user_id': user.id})
            tracer.put_annotation('user_created', user.id)

        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error creating user: {error_code}', extra={
                'error': str(e),
                'user_id': user.id,
            })
            raise

    @tracer.capture_method
    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by its ID from DynamoDB.

        Args:
            user_id: Unique identifier of the user

        Returns:
            User instance if found, None otherwise

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.get_item(Key={'id': user_id})

            item = response.get('Item')
            if not item:
                logger.info('User not found', extra={'user_id': user_id})
                return None

            tracer.put_annotation('user_retrieved', user_id)
            return User.from_dict(item)

        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error retrieving user {user_id}: {error_code}')
            raise

    @tracer.capture_method
    def list_users(self) -> List[User]:
        """
        Scan the whole table.

        Follows ``LastEvaluatedKey`` until the scan is exhausted so every
        stored user is returned. Order is whatever DynamoDB yields.

        Returns:
            List of User instances

        Raises:
            ClientError: If DynamoDB operation fails
        """
        scan_kwargs: Dict[str, Any] = {}
        users: List[User] = []
        pages = 0

        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                pages += 1
                users.extend(User.from_dict(item) for item in response.get('Items', []))

                last_evaluated_key = response.get('LastEvaluatedKey')
                if not last_evaluated_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_evaluated_key

        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error scanning users: {error_code}')
            raise

        logger.info(f'Retrieved {len(users)} users', extra={'scan_pages': pages})
        tracer.put_annotation('users_listed', len(users))
        return users
