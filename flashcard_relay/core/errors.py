from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RelayError(Exception):
    status_code: int
    message: str
    details: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_envelope(self) -> dict[str, Any]:
        envelope: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            envelope["details"] = self.details
        return envelope


@dataclass
class RequestValidationFailure(RelayError):
    """Missing or malformed request fields."""

    fields: tuple[str, ...] = ()


@dataclass
class UpstreamError(RelayError):
    """The completion service could not be reached or rejected the call."""

    code: str | None = None


@dataclass
class NormalizationError(RelayError):
    """Model output did not contain the structured value a task expects."""


@dataclass
class TaskFailedError(RelayError):
    """Upstream or normalization failure reported under a task's message."""

    task: str | None = None


def validation_failure_from_errors(
    errors: list[dict[str, Any]],
) -> RequestValidationFailure:
    fields: list[str] = []
    reasons: list[str] = []

    for error in errors:
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = _field_name(error.get("loc", ()))
        if field not in fields:
            fields.append(field)
        reasons.append(f"{field}: {error.get('msg', 'Invalid value')}")

    if not fields:
        return RequestValidationFailure(status_code=400, message="Invalid request body")

    return RequestValidationFailure(
        status_code=400,
        message="Missing or invalid fields: " + ", ".join(fields),
        details="; ".join(reasons),
        fields=tuple(fields),
    )


def _field_name(loc: Any) -> str:
    parts = [str(part) for part in loc if part != "body"]
    if not parts:
        return "body"
    return ".".join(parts)
