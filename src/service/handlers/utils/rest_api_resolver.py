"""
HTTP API resolver for the users API.

Routes are registered on a Powertools ``APIGatewayHttpResolver``. The resolver
only removes the stage from the path when ``requestContext.stage`` names one, so
events are first rewritten to carry their canonical path: the first segment of
the raw path is always the deployment stage.
"""

import re
from typing import Any, Dict, Mapping

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver

# API path constants
HEALTH_PATH = '/health'
BUCKET_PATH = '/bucket'
USERS_PATH = '/users'
USER_PATH = '/users/<user_id>'
# Anything below a user id still resolves to that user
USER_SUBPATH = '/users/<user_id>/.*'
ANY_PATH = '.+'

_STAGE_PREFIX = re.compile(r'^/[^/]+')

app = APIGatewayHttpResolver()


def normalize_path(raw_path: str) -> str:
    """
    Remove the deployment stage segment from a raw request path.

    Args:
        raw_path: Path as received from API Gateway, e.g. ``/dev/users``

    Returns:
        Canonical route path, ``/`` when nothing is left
    """
    return _STAGE_PREFIX.sub('', raw_path, count=1) or '/'


def canonical_event(event: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy an HTTP API event so the resolver sees its canonical route path.

    Args:
        event: API Gateway HTTP API (payload 2.0) event

    Returns:
        Shallow copy with ``rawPath`` normalized and the stage set to ``$default``
    """
    request_context = dict(event.get('requestContext') or {})
    request_context['stage'] = '$default'

    return {
        **event,
        'rawPath': normalize_path(event.get('rawPath') or '/'),
        'requestContext': request_context,
    }
