"""Tests for sensitive data filtering in logs."""

from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from sa_ats.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    SensitiveDataFilter,
    clear_request_id,
    redact,
    set_request_id,
)


@pytest.fixture
def log_stream():
    """Logger wired to an in-memory stream through the production filters."""
    logger = logging.getLogger("test_redaction")
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(RequestIdFilter())
    handler.addFilter(SensitiveDataFilter())
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    yield logger, stream

    logger.handlers.clear()
    clear_request_id()


def test_sensitive_filter_redacts_cv_and_job_text(log_stream):
    """Ensure CV and job description text never reach the output."""
    logger, stream = log_stream

    logger.info(
        "analysis_event",
        extra={
            "cv_text": "Thandi Nkosi, Software Engineer, thandi@example.co.za",
            "job_description": "Looking for senior developer in Cape Town",
            "char_count": 100,
        },
    )

    output = stream.getvalue()

    assert "Thandi" not in output
    assert "thandi@example.co.za" not in output
    assert "Cape Town" not in output
    assert "[REDACTED]" in output
    assert json.loads(output)["char_count"] == 100


def test_sensitive_filter_redacts_request_body_fields(log_stream):
    """Body field names of both analysis endpoints are covered."""
    logger, stream = log_stream

    logger.info(
        "body_event",
        extra={
            "body": {
                "text": "cv body",
                "resumeContent": "legacy cv body",
                "jobDescription": "legacy advert",
            },
        },
    )

    payload = json.loads(stream.getvalue())

    assert payload["body"] == {
        "text": "[REDACTED]",
        "resumeContent": "[REDACTED]",
        "jobDescription": "[REDACTED]",
    }


def test_sensitive_filter_allows_safe_fields(log_stream):
    """Verify safe fields pass through unmodified."""
    logger, stream = log_stream

    logger.info(
        "safe_event",
        extra={
            "request_id": "req-123",
            "route": "/v1/ats/analyze-cv-text",
            "status": 200,
            "duration_ms": 150.5,
        },
    )

    output = stream.getvalue()

    assert "req-123" in output
    assert "/v1/ats/analyze-cv-text" in output
    assert "200" in output
    assert "[REDACTED]" not in output


def test_sensitive_filter_redacts_nested_dicts(log_stream):
    """Ensure nested sensitive fields are redacted."""
    logger, stream = log_stream

    logger.info(
        "nested_event",
        extra={
            "headers": {
                "authorization": "Bearer secret-token",
                "user-agent": "pytest",
            },
            "safe_data": {
                "count": 5,
                "type": "test",
            },
        },
    )

    output = stream.getvalue()

    assert "secret-token" not in output
    assert "[REDACTED]" in output
    assert "pytest" in output


def test_request_id_from_context_is_attached(log_stream):
    logger, stream = log_stream
    set_request_id("ctx-42")

    logger.info("with_context")

    assert json.loads(stream.getvalue())["request_id"] == "ctx-42"


def test_redact_handles_lists_and_scalars():
    value = [{"cv_text": "x", "score": 80}, ("a", {"token": "t"})]

    assert redact(value) == [{"cv_text": "[REDACTED]", "score": 80}, ("a", {"token": "[REDACTED]"})]
    assert redact("plain") == "plain"
