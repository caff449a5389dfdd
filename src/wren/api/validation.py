"""Payload validation for ``POST /api/data``."""

from dataclasses import dataclass
from typing import Any

MAX_MESSAGE_LENGTH = 200


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a payload.

    Falsy when invalid, so callers can write ``if not result:``.
    """

    ok: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.ok


def validate_data_payload(body: Any) -> ValidationResult:
    """Require ``{"message": str}`` with a trimmed length of 1..200."""
    if not isinstance(body, dict):
        return ValidationResult(ok=False, error="Body must be a JSON object")

    message = body.get("message")
    if not isinstance(message, str):
        return ValidationResult(ok=False, error="'message' must be a string")

    trimmed = message.strip()
    if not trimmed:
        return ValidationResult(ok=False, error="'message' cannot be empty")
    if len(trimmed) > MAX_MESSAGE_LENGTH:
        return ValidationResult(
            ok=False,
            error=f"'message' must be at most {MAX_MESSAGE_LENGTH} characters",
        )

    return ValidationResult(ok=True)
