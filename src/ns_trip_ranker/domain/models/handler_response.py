"""Handler response domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HandlerResponse:
    """Status code and JSON-serializable body produced by a handler."""

    status_code: int
    body: Any

    @classmethod
    def error(cls, status_code: int, message: str, **extra: Any) -> "HandlerResponse":
        return cls(status_code=status_code, body={"error": message, **extra})
