"""Tests for structured API exceptions."""

import pytest
from httpx import Response

from yext_api.errors.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    YextError,
)
from yext_api.errors.models import ErrorDetail, ErrorType


@pytest.mark.unit
def test_api_error_instantiation():
    """Test ApiError can be instantiated with all attributes."""
    response = Response(status_code=500)

    error = ApiError(
        message="Test error",
        status_code=500,
        response=response,
        method="POST",
        url="https://api.yext.com/v2/accounts/me/entities",
    )

    assert str(error) == "Test error"
    assert error.status_code == 500
    assert error.response is response
    assert error.method == "POST"
    assert error.url == "https://api.yext.com/v2/accounts/me/entities"


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    assert issubclass(ApiError, YextError)
    assert issubclass(ConfigurationError, YextError)
    assert issubclass(ConfigurationError, ValueError)

    assert issubclass(ClientError, ApiError)
    assert issubclass(BadRequestError, ClientError)
    assert issubclass(UnauthorizedError, ClientError)
    assert issubclass(ForbiddenError, ClientError)
    assert issubclass(NotFoundError, ClientError)
    assert issubclass(ConflictError, ClientError)
    assert issubclass(RateLimitError, ClientError)

    assert issubclass(ServerError, ApiError)


@pytest.mark.unit
def test_rate_limit_error_without_retry_after():
    """Test RateLimitError without retry_after value."""
    error = RateLimitError(message="Too many requests")

    assert str(error) == "Too many requests"
    assert error.retry_after is None


@pytest.mark.unit
def test_errors_parsed_from_envelope():
    """Test ApiError.errors decodes meta.errors from the response body."""
    response = Response(
        status_code=400,
        json={
            "meta": {
                "uuid": "abc-123",
                "errors": [
                    {"code": 2000, "type": "FATAL_ERROR", "message": "Invalid field"},
                    {"code": 2001, "type": "WARNING", "message": "Deprecated"},
                ],
            },
            "response": {},
        },
    )
    error = BadRequestError("HTTP 400", status_code=400, response=response)

    assert error.uuid == "abc-123"
    assert error.errors == [
        ErrorDetail(code=2000, type=ErrorType.FATAL_ERROR, message="Invalid field"),
        ErrorDetail(code=2001, type=ErrorType.WARNING, message="Deprecated"),
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        Response(status_code=502, text="Bad Gateway"),
        Response(status_code=500, json=["not", "an", "envelope"]),
        Response(status_code=500, json={"meta": "nope"}),
        Response(status_code=500, json={"meta": {"errors": "nope"}}),
        None,
    ],
)
def test_errors_empty_for_non_envelope_bodies(response):
    """Test ApiError.errors and uuid tolerate bodies that are not envelopes."""
    error = ApiError("boom", response=response)

    assert error.errors == []
    assert error.uuid is None
