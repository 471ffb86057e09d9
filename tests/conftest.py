"""
Pytest configuration and shared fixtures for the users API.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import base64
import json
import os
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import Mock

import boto3
import pytest
from aws_lambda_env_modeler import LAMBDA_ENV_MODELER_DISABLE_CACHE
from moto import mock_aws

from service.handlers import users_handler
from service.handlers.utils.observability import metrics
from service.handlers.users_handler import ApiDependencies
from service.logic.user_service import UserService
from service.models.output import BucketDescriptor
from service.models.user import User

TEST_TABLE_NAME = "test-users-table"
TEST_BUCKET_NAME = "uploads-test-abc123"
TEST_REGION = "us-east-1"


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": TEST_REGION,
        "AWS_REGION": TEST_REGION,
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test",
        "TABLE_NAME": TEST_TABLE_NAME,
        "BUCKET_NAME": TEST_BUCKET_NAME,
        "ENVIRONMENT": "test",
        "APP_VERSION": "test-1.0.0",
        "POWERTOOLS_SERVICE_NAME": "test-users-api",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
        LAMBDA_ENV_MODELER_DISABLE_CACHE: "true",  # Tests change the environment between cases
    })


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached dependencies and buffered metrics between tests."""
    metrics.clear_metrics()
    users_handler.reset_dependencies()
    yield
    metrics.clear_metrics()
    users_handler.reset_dependencies()


class FakeUsersDal:
    """In-memory record store honoring the put/get/scan contract."""

    def __init__(self) -> None:
        self.items: Dict[str, Dict[str, Any]] = {}
        self.put_calls = 0
        self.error: Optional[Exception] = None

    def put_user(self, user: User) -> None:
        if self.error:
            raise self.error
        self.put_calls += 1
        self.items[user.id] = user.to_dict()

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        if self.error:
            raise self.error
        item = self.items.get(user_id)
        return User.from_dict(item) if item else None

    def list_users(self) -> List[User]:
        if self.error:
            raise self.error
        return [User.from_dict(item) for item in self.items.values()]


@pytest.fixture
def fake_dal() -> FakeUsersDal:
    """Empty in-memory record store."""
    return FakeUsersDal()


@pytest.fixture
def dependencies(fake_dal) -> ApiDependencies:
    """Dependencies wired to the in-memory record store."""
    return ApiDependencies(
        user_service=UserService(users_dal=fake_dal),
        bucket=BucketDescriptor(bucket_name=TEST_BUCKET_NAME, region=TEST_REGION),
        environment="test",
        version="test-1.0.0",
    )


@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway HTTP API (payload 2.0) events."""

    def _make_event(
        method: str,
        raw_path: str,
        body: Any = None,
        base64_encoded: bool = False,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        if body is not None and base64_encoded:
            body = base64.b64encode(body.encode()).decode()

        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": raw_path,
            "rawQueryString": "",
            "headers": {
                "content-type": "application/json",
                "user-agent": "test-agent/1.0",
            },
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "testapi123",
                "domainName": "testapi123.execute-api.us-east-1.amazonaws.com",
                "http": {
                    "method": method,
                    "path": raw_path,
                    "protocol": "HTTP/1.1",
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
                "requestId": "test-request-id-123",
                "routeKey": "$default",
                "stage": "dev",
                "time": "01/Jan/2024:12:00:00 +0000",
                "timeEpoch": 1704110400000,
            },
            "body": body,
            "isBase64Encoded": base64_encoded,
        }

    return _make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "api-lambda-test"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:api-lambda-test"
    context.memory_limit_in_mb = 256
    context.aws_request_id = "test-lambda-request-id"
    context.log_group_name = "/aws/lambda/api-lambda-test"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mock DynamoDB users table for testing."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name=TEST_REGION)

        table = dynamodb.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()
        yield table


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build DynamoDB client errors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error", operation_name: str = "PutItem"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation_name,
        )

    return create_error


# Integration test fixtures
@pytest.fixture
def integration_client():
    """HTTP client for the deployed API, skipped when API_BASE_URL is not set."""
    import httpx

    base_url = os.environ.get("API_BASE_URL")
    if not base_url:
        pytest.skip("API_BASE_URL is not set")

    with httpx.Client(base_url=base_url.rstrip("/"), timeout=30.0) as client:
        yield client


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
