"""Kernel – framework-agnostic building blocks."""

from ssm_filters.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
