"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidArgumentError
    └── ApplicationError     (application.py)
"""

from ssm_filters.kernel.errors.application import ApplicationError
from ssm_filters.kernel.errors.base import BaseError
from ssm_filters.kernel.errors.domain import (
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
