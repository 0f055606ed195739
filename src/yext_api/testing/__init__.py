"""Testing utilities for code built on yext_api.

Example:
    ```python
    from yext_api.testing import RecordingTransport, create_error_response


    async def test_missing_entity_is_none():
        transport = RecordingTransport(lambda request: create_error_response(404))
        async with httpx.AsyncClient(transport=transport) as http:
            api = KnowledgeGraphApi(Config(api_key="test"), http_client=http)
            assert await api.get_entity("missing") is None
    ```
"""

from yext_api.testing.factories import (
    DEFAULT_UUID,
    RecordingTransport,
    create_envelope,
    create_error_response,
    create_mock_response,
)

__all__ = [
    "DEFAULT_UUID",
    "RecordingTransport",
    "create_envelope",
    "create_error_response",
    "create_mock_response",
]
