"""Error handling utilities for HTTP responses."""

import httpx

from yext_api.errors.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

_EXCEPTION_MAP: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def redact_url(url: httpx.URL | str) -> str:
    """Return ``url`` as a string with the api_key query value replaced."""
    url = httpx.URL(url)
    if "api_key" not in url.params:
        return str(url)
    params = [(key, "REDACTED" if key == "api_key" else value) for key, value in url.params.multi_items()]
    return str(url.copy_with(params=params))


def raise_for_status(
    response: httpx.Response,
    *,
    method: str | None = None,
    url: httpx.URL | str | None = None,
) -> None:
    """Raise the matching ApiError subclass for a non-2xx response.

    The response body is left untouched; callers can decode it through
    ``ApiError.errors`` or ``ApiError.response``.

    Args:
        response: HTTP response object
        method: HTTP method of the request, recorded on the exception
        url: Request URL, recorded on the exception with the api_key masked

    Raises:
        ApiError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code

    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = ApiError

    safe_url = redact_url(url) if url is not None else None
    message = f"HTTP {status_code}"
    if method and safe_url:
        message += f" from {method} {safe_url}"

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                # HTTP-date form is not interpreted
                retry_after = None
        raise RateLimitError(
            message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
            method=method,
            url=safe_url,
        )

    raise exc_class(
        message,
        status_code=status_code,
        response=response,
        method=method,
        url=safe_url,
    )
