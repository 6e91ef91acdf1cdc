"""Domain errors — input that breaks a rule of the credential pipeline."""

from __future__ import annotations

from typing import Any

from mp_credentials.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a pipeline rule is violated by caller input."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidSaltLengthError(ValidationError):
    """A salt was requested with a negative or non-integer length."""

    default_code = "invalid_salt_length"

    def __init__(self, length: object) -> None:
        super().__init__(
            f"Salt length must be a non-negative integer, got {length!r}",
            errors=[{"field": "length", "value": repr(length)}],
        )
        self.length = length


__all__ = ["DomainError", "InvalidSaltLengthError", "ValidationError"]
