"""
Users API Lambda Function - Entry point for the users API.

This module serves as the Lambda function entry point that delegates to the
users handler implementing routing, validation and persistence.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from service.handlers.users_handler import lambda_handler as users_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the users API.

    Args:
        event: Lambda event payload (API Gateway HTTP API event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return users_handler(event, context)
