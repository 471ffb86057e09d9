"""
Unit tests for the shared logger, tracer and metrics configuration.
"""

from service.handlers.utils.observability import (
    DEFAULT_METRICS_NAMESPACE,
    DEFAULT_SERVICE_NAME,
    resolve_metrics_namespace,
    resolve_service_name,
)


class TestServiceName:
    """Test cases for the service name lookup."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("POWERTOOLS_SERVICE_NAME", raising=False)

        assert resolve_service_name() == DEFAULT_SERVICE_NAME == "users-api"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "users-api-canary")

        assert resolve_service_name() == "users-api-canary"

    def test_empty_value_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "")

        assert resolve_service_name() == DEFAULT_SERVICE_NAME


class TestMetricsNamespace:
    """Test cases for the metrics namespace lookup."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("POWERTOOLS_METRICS_NAMESPACE", raising=False)

        assert resolve_metrics_namespace() == DEFAULT_METRICS_NAMESPACE

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("POWERTOOLS_METRICS_NAMESPACE", "UsersApiStaging")

        assert resolve_metrics_namespace() == "UsersApiStaging"
