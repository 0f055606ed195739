"""Structured exceptions for Yext API errors."""

from typing import TYPE_CHECKING, Any

from yext_api.errors.models import ErrorDetail

if TYPE_CHECKING:
    import httpx


class YextError(Exception):
    """Base exception for everything raised by this package."""

    pass


class ConfigurationError(YextError, ValueError):
    """Raised when a Config cannot be turned into a Client."""

    pass


class ApiError(YextError):
    """Base exception for non-2xx responses from the Yext API.

    The raw response is kept on ``response`` and is never consumed here;
    ``errors`` and ``uuid`` decode the body lazily for callers who want it.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        method: str | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.method = method
        self.url = url

    def _meta(self) -> dict[str, Any]:
        if self.response is None:
            return {}
        try:
            data = self.response.json()
        except (ValueError, UnicodeDecodeError):
            return {}
        if not isinstance(data, dict) or not isinstance(data.get("meta"), dict):
            return {}
        return data["meta"]

    @property
    def errors(self) -> list[ErrorDetail]:
        """Error entries from the response envelope, or [] if there is none."""
        entries = self._meta().get("errors")
        if not isinstance(entries, list):
            return []
        return [ErrorDetail.from_dict(entry) for entry in entries if isinstance(entry, dict)]

    @property
    def uuid(self) -> str | None:
        """Correlation id from the response envelope, if present."""
        value = self._meta().get("uuid")
        return value if isinstance(value, str) else None


class ClientError(ApiError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(ApiError):
    """5xx server errors."""

    pass

