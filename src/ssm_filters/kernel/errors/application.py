"""Application errors — failures outside the domain model."""

from __future__ import annotations

from ssm_filters.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised for application-layer failures such as bad configuration."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
