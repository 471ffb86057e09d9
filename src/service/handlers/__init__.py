"""
AWS Lambda Handlers Module.

This module contains the handler layer of the users API:

1. Handler Layer (this module): routing, responses, errors
2. Logic Layer: Business logic and validation
3. Data Access Layer: DynamoDB persistence

The handlers use AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, tracer, metrics
from service.handlers.utils.rest_api_resolver import HEALTH_PATH, USERS_PATH, app, normalize_path

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "HEALTH_PATH",
    "USERS_PATH",
    "app",
    "normalize_path",
]
