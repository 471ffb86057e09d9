"""
Users Handler - Lambda function for the users API.

This module implements the handler layer: routes registered on the HTTP API
resolver, the client error and not-found responses, and the single error
boundary that turns unexpected failures into a 500.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import get_dal_handler
from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.errors import (
    CLIENT_ERRORS,
    BaseServiceError,
    RouteNotFoundError,
    format_error_response,
    format_internal_error_response,
    log_error_metrics,
)
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.responses import (
    CorsPolicy,
    create_api_response,
    create_preflight_response,
    to_proxy_response,
)
from service.handlers.utils.rest_api_resolver import (
    ANY_PATH,
    BUCKET_PATH,
    HEALTH_PATH,
    USER_PATH,
    USER_SUBPATH,
    USERS_PATH,
    app,
    canonical_event,
)
from service.logic.user_service import UserService
from service.logic.validation import parse_create_user_request
from service.models.output import BucketDescriptor, HealthCheckOutput, ListUsersOutput
from service.models.user import utc_now_iso


@dataclass(frozen=True)
class ApiDependencies:
    """Process-wide collaborators made available to every route."""

    user_service: UserService
    bucket: BucketDescriptor
    environment: str
    version: str = '1.0.0'
    cors: CorsPolicy = field(default_factory=CorsPolicy)


def build_dependencies() -> ApiDependencies:
    """
    Build the dependency bundle from environment variables.

    Returns:
        Dependencies backed by the DynamoDB record store
    """
    env_vars = get_handler_env_vars()
    logger.setLevel(env_vars.LOG_LEVEL)

    users_dal = get_dal_handler(
        table_name=env_vars.TABLE_NAME,
        region_name=env_vars.AWS_REGION,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )

    return ApiDependencies(
        user_service=UserService(users_dal=users_dal),
        bucket=BucketDescriptor(bucket_name=env_vars.BUCKET_NAME, region=env_vars.AWS_REGION),
        environment=env_vars.ENVIRONMENT,
        version=env_vars.APP_VERSION,
        cors=env_vars.cors_policy,
    )


# Constructed on first use and reused by warm invocations of the same process
_dependencies: Optional[ApiDependencies] = None


def get_dependencies() -> ApiDependencies:
    """Get or create the process-wide dependency bundle."""
    global _dependencies

    if _dependencies is None:
        _dependencies = build_dependencies()

    return _dependencies


def reset_dependencies() -> None:
    """Drop the cached dependency bundle so the next invocation rebuilds it."""
    global _dependencies
    _dependencies = None


def current_dependencies() -> ApiDependencies:
    """Dependencies appended to the resolver context for this invocation."""
    return app.context['deps']


@app.exception_handler(list(CLIENT_ERRORS))
def handle_client_error(e: BaseServiceError) -> Response:
    """Answer validation and not-found errors with their typed response."""
    log_error_metrics(e)
    return create_api_response(
        status_code=e.status_code,
        body=format_error_response(e),
        cors=current_dependencies().cors,
    )


@app.not_found
def route_not_found(e: NotFoundError) -> Response:
    """Answer any method and path no route matches."""
    event = app.current_event
    error = RouteNotFoundError(event.http_method, event.path)
    log_error_metrics(error)

    return create_api_response(
        status_code=error.status_code,
        body=format_error_response(error),
        cors=current_dependencies().cors,
    )


@app.route(ANY_PATH, method='OPTIONS')
def preflight() -> Response:
    """CORS preflight for any path."""
    return create_preflight_response(current_dependencies().cors)


@app.get(HEALTH_PATH)
@tracer.capture_method
def health_check() -> Response:
    """
    Health check endpoint.

    Returns:
        Health status with the active environment name
    """
    deps = current_dependencies()
    response = HealthCheckOutput(
        ok=True,
        timestamp=utc_now_iso(),
        environment=deps.environment,
        version=deps.version,
    )

    return create_api_response(status_code=200, body=response, cors=deps.cors)


@app.get(BUCKET_PATH)
@tracer.capture_method
def get_bucket() -> Response:
    """Report the upload bucket name and region."""
    deps = current_dependencies()
    return create_api_response(status_code=200, body=deps.bucket, cors=deps.cors)


@app.post(USERS_PATH)
@tracer.capture_method
def create_user() -> Response:
    """
    Create a new user.

    Returns:
        The created user record with status 201
    """
    logger.info("Create user request received")
    deps = current_dependencies()

    create_request = parse_create_user_request(app.current_event.decoded_body)
    user = deps.user_service.create_user(create_request)

    tracer.put_annotation("user_id", user.id)

    return create_api_response(status_code=201, body=user, cors=deps.cors)


@app.get(USERS_PATH)
@tracer.capture_method
def list_users() -> Response:
    """
    List every user.

    Returns:
        All users and their count
    """
    logger.info("List users request received")
    deps = current_dependencies()

    users = deps.user_service.list_users()
    response = ListUsersOutput(users=users, count=len(users))

    logger.info("Users listed successfully", extra={"users_count": response.count})

    return create_api_response(status_code=200, body=response, cors=deps.cors)


@app.get(USER_SUBPATH)
@app.get(USER_PATH)
@tracer.capture_method
def get_user(user_id: str) -> Response:
    """
    Get a user by ID.

    Args:
        user_id: Third path segment, passed through unvalidated

    Returns:
        The user record
    """
    logger.info("Get user request received", extra={"user_id": user_id})
    tracer.put_annotation("user_id", user_id)
    deps = current_dependencies()

    user = deps.user_service.get_user(user_id)

    return create_api_response(status_code=200, body=user, cors=deps.cors)


def handle_request(
    event: Dict[str, Any],
    deps: Optional[ApiDependencies] = None,
    context: Optional[LambdaContext] = None,
) -> Dict[str, Any]:
    """
    Handle one invocation behind the error boundary.

    Any failure raised while building dependencies, parsing the event or
    running a route is logged and answered with a 500; nothing escapes.

    Args:
        event: API Gateway HTTP API event
        deps: Collaborators to use, the process-wide bundle when omitted
        context: Lambda context object

    Returns:
        API Gateway response
    """
    cors = deps.cors if deps else None
    try:
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

        deps = deps or get_dependencies()
        cors = deps.cors

        app.append_context(deps=deps)
        return app.resolve(canonical_event(event), context)

    except Exception as e:
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})

        return to_proxy_response(create_api_response(
            status_code=500,
            body=format_internal_error_response(e),
            cors=cors,
        ))

    finally:
        app.clear_context()


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: Lambda event payload (API Gateway HTTP API event)
        context: Lambda context object

    Returns:
        API Gateway response
    """
    return handle_request(event, context=context)
