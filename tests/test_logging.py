"""
Tests for logging context and error envelopes.
"""

import structlog

from labelhub.logger import SERVICE_NAME, add_service_info, bind_job_context
from labelhub.models.common import ErrorResponse


class TestLogging:
    """Tests for structlog context helpers."""

    def test_service_info_added(self):
        event = add_service_info(None, "info", {"event": "Print job created"})

        assert event["service"] == SERVICE_NAME
        assert "version" in event
        assert "environment" in event

    def test_service_info_does_not_override(self):
        event = add_service_info(None, "info", {"event": "x", "service": "other"})

        assert event["service"] == "other"

    def test_job_context_is_scoped(self):
        with bind_job_context("abc123"):
            assert structlog.contextvars.get_contextvars()["job_id"] == "abc123"

        assert "job_id" not in structlog.contextvars.get_contextvars()


class TestErrorResponse:
    """Tests for the error envelope."""

    def test_timestamp_is_timezone_aware(self):
        error = ErrorResponse(error_code="NOT_FOUND", message="Print job not found or expired")

        assert error.timestamp.tzinfo is not None
        assert error.timestamp.utcoffset().total_seconds() == 0
        assert "request_id" not in error.model_dump()
