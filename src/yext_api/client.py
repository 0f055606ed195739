"""Low-level client for making calls to Yext APIs.

Every call is a single HTTP round trip: no retries, and httpx's default
timeout and redirect behavior. Unless the caller supplies its own
``httpx.AsyncClient``, each call uses a short-lived one, so nothing is
pooled between calls.

Example:
    ```python
    from yext_api import Client, Config

    client = Client(Config(api_key="..."))
    envelope = await client.call("GET", "entities", {"entityTypes": ["location", "faq"]})
    ```
"""

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal, cast

import httpx

from yext_api.config import DEFAULT_V_PARAM, Config, base_url
from yext_api.envelope import ApiResponse
from yext_api.errors.handler import raise_for_status

logger = logging.getLogger(__name__)

HttpMethod = Literal["DELETE", "GET", "POST", "PUT"]

HTTP_METHODS: frozenset[str] = frozenset(["DELETE", "GET", "POST", "PUT"])

QueryParams = Mapping[str, str | Sequence[str]]

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class Client:
    """Client for making calls to Yext APIs.

    Instances hold no mutable state and can be shared by concurrent tasks.

    Args:
        config: Settings for the account to call.
        http_client: httpx client to send requests with. It is used as-is
            and never closed here. When omitted, each call opens and closes
            its own ``httpx.AsyncClient``.

    Raises:
        ConfigurationError: If ``config.env`` is not a known environment.
    """

    def __init__(self, config: Config, *, http_client: httpx.AsyncClient | None = None):
        self._url_base = base_url(config)
        self._api_key = config.api_key
        self._v_param = config.v_param or DEFAULT_V_PARAM
        self._http_client = http_client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url_base={self._url_base!r}, v_param={self._v_param!r})"

    @property
    def url_base(self) -> str:
        return self._url_base

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def v_param(self) -> str:
        return self._v_param

    def build_url(self, endpoint_path: str, query_params: QueryParams | None = None) -> httpx.URL:
        """Build the full request URL, including api_key and v.

        ``endpoint_path`` is appended verbatim after ``/v2/accounts/{accountId}/``.
        A sequence value in ``query_params`` adds one entry per element under
        the same key.
        """
        params: list[tuple[str, str]] = [("api_key", self._api_key), ("v", self._v_param)]
        for key, value in (query_params or {}).items():
            if isinstance(value, str):
                params.append((key, value))
            else:
                params.extend((key, item) for item in value)

        url = httpx.URL(self._url_base + endpoint_path)
        return url.copy_with(params=list(url.params.multi_items()) + params)

    async def call(
        self,
        http_method: HttpMethod,
        endpoint_path: str,
        query_params: QueryParams | None = None,
        body: Any = None,
    ) -> ApiResponse:
        """Make a call to the Yext API.

        Args:
            http_method: One of DELETE, GET, POST or PUT.
            endpoint_path: Appended after ``/v2/accounts/{accountId}/``.
            query_params: Extra query parameters.
            body: Sent as the UTF-8 JSON request body when not None.

        Returns:
            The decoded response body, unvalidated.

        Raises:
            ApiError: When the response status is not 2xx.
            ValueError: When a 2xx response body is not JSON, or the method
                is not supported.
        """
        if http_method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {http_method!r}")

        url = self.build_url(endpoint_path, query_params)

        headers = {}
        content = None
        if body is not None:
            content = json.dumps(body, ensure_ascii=False).encode("utf-8")
            headers["Content-Type"] = JSON_CONTENT_TYPE

        logger.debug(f"Yext API request: {http_method} {endpoint_path}")
        if self._http_client is not None:
            response = await self._http_client.request(http_method, url, content=content, headers=headers)
        else:
            async with httpx.AsyncClient() as http:
                response = await http.request(http_method, url, content=content, headers=headers)
        logger.debug(f"Yext API response: {http_method} {endpoint_path} -> {response.status_code}")

        raise_for_status(response, method=http_method, url=url)

        return cast(ApiResponse, response.json())
