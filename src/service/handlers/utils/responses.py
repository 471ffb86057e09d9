"""
Response building utilities for the users API.

Route handlers return Powertools ``Response`` objects built here so the CORS
header set is applied uniformly. The error boundary runs outside the resolver
and converts its response with ``to_proxy_response``.
"""

import json
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response, content_types
from pydantic import BaseModel, ConfigDict

DEFAULT_CORS_ALLOW_ORIGIN = '*'
DEFAULT_CORS_ALLOW_HEADERS = 'Content-Type'
DEFAULT_CORS_ALLOW_METHODS = 'GET, POST, PUT, DELETE, OPTIONS'


class CorsPolicy(BaseModel):
    """CORS header values applied to every response."""

    model_config = ConfigDict(frozen=True)

    allow_origin: str = DEFAULT_CORS_ALLOW_ORIGIN
    allow_headers: str = DEFAULT_CORS_ALLOW_HEADERS
    allow_methods: str = DEFAULT_CORS_ALLOW_METHODS

    def headers(self) -> Dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Headers": self.allow_headers,
            "Access-Control-Allow-Methods": self.allow_methods,
        }


def _serialize_body(body: Any) -> str:
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True)
    return json.dumps(body)


def create_api_response(
    status_code: int,
    body: Any,
    cors: Optional[CorsPolicy] = None,
) -> Response:
    """
    Create a JSON response carrying the CORS headers.

    Args:
        status_code: HTTP status code
        body: Payload to serialize as JSON (dict, list or Pydantic model)
        cors: CORS policy, the default policy is used when omitted

    Returns:
        Powertools response
    """
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=_serialize_body(body),
        headers=(cors or CorsPolicy()).headers(),
    )


def create_preflight_response(cors: Optional[CorsPolicy] = None) -> Response:
    """Create the CORS preflight response: 200, empty body, CORS headers only."""
    return Response(
        status_code=200,
        content_type=None,
        body="",
        headers=(cors or CorsPolicy()).headers(),
    )


def to_proxy_response(response: Response) -> Dict[str, Any]:
    """Convert a response built outside the resolver into the API Gateway envelope."""
    return {
        "statusCode": response.status_code,
        "headers": dict(response.headers),
        "body": response.body,
        "isBase64Encoded": False,
    }
