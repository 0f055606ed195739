"""Shape of well-formed Yext API response bodies.

Most responses, including many error responses, are JSON in this shape, but
nothing is validated against it: the client casts whatever JSON a 2xx
response carried.

See: https://hitchhikers.yext.com/docs/policiesandconventions/?target=response-format
"""

from typing import Any, Literal, TypedDict


class ErrorEntry(TypedDict):
    code: int
    type: Literal["FATAL_ERROR", "NON_FATAL_ERROR", "WARNING"]
    message: str


class ResponseMeta(TypedDict):
    uuid: str
    errors: list[ErrorEntry]


class ApiResponse(TypedDict):
    meta: ResponseMeta
    response: Any
