"""Factories for fake Yext API responses."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import httpx

from yext_api.envelope import ApiResponse, ErrorEntry

DEFAULT_UUID = "00000000-0000-0000-0000-000000000000"


def create_envelope(
    response: Any = None,
    *,
    uuid: str = DEFAULT_UUID,
    errors: Iterable[ErrorEntry] | None = None,
) -> ApiResponse:
    """Wrap ``response`` in a standard response envelope."""
    return {
        "meta": {"uuid": uuid, "errors": list(errors or [])},
        "response": response if response is not None else {},
    }


def create_mock_response(response: Any = None, *, status_code: int = 200, uuid: str = DEFAULT_UUID) -> httpx.Response:
    """Build a successful httpx.Response whose body is an envelope around ``response``."""
    return httpx.Response(status_code, json=create_envelope(response, uuid=uuid))


def create_error_response(
    status_code: int,
    *,
    errors: Iterable[ErrorEntry] | None = None,
    headers: Mapping[str, str] | None = None,
    uuid: str = DEFAULT_UUID,
) -> httpx.Response:
    """Build an error httpx.Response with an envelope listing ``errors``.

    When ``errors`` is omitted a single FATAL_ERROR entry is used.
    """
    if errors is None:
        errors = [{"code": status_code, "type": "FATAL_ERROR", "message": f"HTTP {status_code}"}]
    return httpx.Response(status_code, headers=headers, json=create_envelope(uuid=uuid, errors=errors))


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handles in ``requests``.

    Example:
        ```python
        transport = RecordingTransport(lambda request: create_mock_response({"name": "Store"}))
        async with httpx.AsyncClient(transport=transport) as http:
            api = KnowledgeGraphApi(Config(api_key="test"), http_client=http)
            await api.get_entity("loc1")
        assert transport.requests[0].url.path == "/v2/accounts/me/entities/loc1"
        ```
    """

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]
