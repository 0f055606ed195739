"""Error taxonomy for the Yext API client."""

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
from yext_api.errors.handler import raise_for_status, redact_url
from yext_api.errors.models import ErrorDetail, ErrorType

__all__ = [
    "ApiError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "ErrorDetail",
    "ErrorType",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnauthorizedError",
    "YextError",
    "raise_for_status",
    "redact_url",
]
