"""
Powertools logger, tracer and metrics for the users API.

One instance of each is created at import and shared by every layer. The
service name and metrics namespace come from the standard Powertools
variables and fall back to the users API defaults when those are unset.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

DEFAULT_SERVICE_NAME = 'users-api'
DEFAULT_METRICS_NAMESPACE = 'UsersApi'


def resolve_service_name() -> str:
    """Service name for logs, traces and the metrics dimension."""
    return os.environ.get('POWERTOOLS_SERVICE_NAME') or DEFAULT_SERVICE_NAME


def resolve_metrics_namespace() -> str:
    """CloudWatch namespace the metrics are published under."""
    return os.environ.get('POWERTOOLS_METRICS_NAMESPACE') or DEFAULT_METRICS_NAMESPACE


# Level follows LOG_LEVEL / POWERTOOLS_LOG_LEVEL
logger: Logger = Logger(service=resolve_service_name())

# No-op outside Lambda or when POWERTOOLS_TRACE_DISABLED is "true"
tracer: Tracer = Tracer(service=resolve_service_name())

metrics: Metrics = Metrics(namespace=resolve_metrics_namespace(), service=resolve_service_name())
