"""Domain errors — invalid input to value objects and request documents."""

from __future__ import annotations

from typing import Any

from ssm_filters.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

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


class InvalidArgumentError(ValidationError):
    """A required argument is missing or unusable at construction time."""

    default_code = "invalid_argument"

    @classmethod
    def missing_field(cls, field: str) -> "InvalidArgumentError":
        """Build the error raised when the wire field *field* was not provided."""
        return cls(
            f'Missing required field "{field}".',
            field=field,
            errors=[{"field": field, "reason": "missing"}],
        )


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
