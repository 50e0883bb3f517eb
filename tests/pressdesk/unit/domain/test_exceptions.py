"""Unit tests for domain exceptions."""

from pressdesk.domain.shared import (
    DomainException,
    ErrorCode,
    MetricsSourceError,
    MetricsSourceUnavailableError,
)


class TestMetricsSourceUnavailableError:
    def test_message_and_attributes(self):
        error = MetricsSourceUnavailableError(
            "live", "connection failed", details={"path": "/x"}
        )

        assert error.message == "Metrics source 'live' is unavailable: connection failed"
        assert str(error) == error.message
        assert error.source == "live"
        assert error.reason == "connection failed"
        assert error.code == ErrorCode.METRICS_SOURCE_UNAVAILABLE
        assert error.details == {"path": "/x"}

    def test_hierarchy(self):
        error = MetricsSourceUnavailableError("live", "x")

        assert isinstance(error, MetricsSourceError)
        assert isinstance(error, DomainException)

    def test_code_override(self):
        error = MetricsSourceUnavailableError(
            "live", "refused", code=ErrorCode.METRICS_SOURCE_REJECTED
        )

        assert error.code == ErrorCode.METRICS_SOURCE_REJECTED


class TestDomainException:
    def test_defaults(self):
        error = DomainException("Something broke")

        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}
        assert repr(error) == (
            "DomainException(message='Something broke', "
            "code='INTERNAL_ERROR', details={})"
        )

    def test_metrics_source_error_default_code(self):
        assert MetricsSourceError("x").code == ErrorCode.METRICS_SOURCE_ERROR
