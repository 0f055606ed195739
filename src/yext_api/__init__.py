"""Typed async Python client for the Yext API.

Example:
    ```python
    from yext_api import Config, KnowledgeGraphApi

    api = KnowledgeGraphApi(Config(api_key="...", env="SANDBOX"))
    entity = await api.get_entity("loc1")
    ```
"""

__version__ = "0.1.0"

from yext_api.errors import (  # noqa: E402
    ApiError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ErrorDetail,
    ErrorType,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    YextError,
)
from yext_api.config import DEFAULT_V_PARAM, Config, Environment  # noqa: E402
from yext_api.client import Client  # noqa: E402
from yext_api.entities import Entity, EntityMeta, Location  # noqa: E402
from yext_api.envelope import ApiResponse  # noqa: E402
from yext_api.fields import AddressValue, FieldValue  # noqa: E402
from yext_api.knowledge_graph import KnowledgeGraphApi  # noqa: E402

__all__ = [
    "DEFAULT_V_PARAM",
    "AddressValue",
    "ApiError",
    "ApiResponse",
    "BadRequestError",
    "Client",
    "ClientError",
    "Config",
    "ConfigurationError",
    "ConflictError",
    "Entity",
    "EntityMeta",
    "Environment",
    "ErrorDetail",
    "ErrorType",
    "FieldValue",
    "ForbiddenError",
    "KnowledgeGraphApi",
    "Location",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnauthorizedError",
    "YextError",
    "__version__",
]
