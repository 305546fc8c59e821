"""User payload validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from usuarios_api.schemas.user import UserPayload


@dataclass(frozen=True)
class ValidationSuccess:
    value: UserPayload


@dataclass(frozen=True)
class ValidationFailure:
    message: str


ValidationResult = ValidationSuccess | ValidationFailure


def _describe(error: dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())) or "value"
    error_type = error.get("type")
    if error_type == "missing":
        return f'"{field}" is required'
    if error_type == "string_type":
        return f'"{field}" must be a string'
    if error_type == "string_too_short":
        if error.get("input") == "":
            return f'"{field}" is not allowed to be empty'
        min_length = error.get("ctx", {}).get("min_length")
        return f'"{field}" length must be at least {min_length} characters long'
    return f'"{field}" {error.get("msg", "is invalid")}'


def validate_user(payload: dict[str, Any]) -> ValidationResult:
    """Validate a user payload, reporting only the first violation."""
    candidate = {"nombre": payload["nombre"]} if "nombre" in payload else {}
    try:
        value = UserPayload.model_validate(candidate)
    except ValidationError as exc:
        return ValidationFailure(message=_describe(exc.errors()[0]))
    return ValidationSuccess(value=value)
