"""Errors raised at the engine boundary.

Only input problems surface as exceptions. Every computation past the
boundary is total over validated inputs, so there is no error type for
mid-calculation failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pydantic


@dataclass(frozen=True)
class FieldError:
    """Single rejected input field.

    Attributes:
        field: Dotted path of the offending field (e.g., "years").
        message: Human-readable reason the value was rejected.
    """

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Return the {field, message} pair used in error payloads."""
        return {"field": self.field, "message": self.message}


class ValidationError(Exception):
    """Raised when a request payload fails input validation.

    Carries every rejected field so callers can correct the request in one
    round trip.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors) or "<none>"
        super().__init__(f"Invalid input: {fields}")

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> ValidationError:
        """Build from a pydantic ValidationError, one entry per failing location."""
        errors = [
            FieldError(
                field=".".join(str(part) for part in error["loc"]) or "__root__",
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        return cls(errors)

    def to_payload(self) -> dict[str, Any]:
        """Return the error body a transport layer can send unchanged."""
        return {
            "error": "Invalid input",
            "details": [error.to_dict() for error in self.errors],
        }
