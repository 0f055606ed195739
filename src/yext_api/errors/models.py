"""Models for the error entries carried in Yext response envelopes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    """Severity of an entry in ``meta.errors``."""

    FATAL_ERROR = "FATAL_ERROR"
    NON_FATAL_ERROR = "NON_FATAL_ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class ErrorDetail:
    """One entry of an envelope's ``meta.errors`` list.

    See: https://hitchhikers.yext.com/docs/policiesandconventions/?target=response-format
    """

    code: int | None = None
    type: ErrorType | str | None = None  # unrecognized severities are kept as plain strings
    message: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ErrorDetail":
        """Build an ErrorDetail from a decoded ``meta.errors`` entry."""
        raw_type = data.get("type")
        try:
            error_type = ErrorType(raw_type) if raw_type is not None else None
        except ValueError:
            error_type = raw_type

        return cls(
            code=data.get("code"),
            type=error_type,
            message=data.get("message"),
        )

    @property
    def is_fatal(self) -> bool:
        return self.type == ErrorType.FATAL_ERROR

    def __str__(self) -> str:
        severity = self.type.value if isinstance(self.type, ErrorType) else self.type
        return f"[{severity or 'UNKNOWN'} {self.code}] {self.message or ''}".rstrip()
