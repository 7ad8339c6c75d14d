"""ValueObject base class."""

from __future__ import annotations

import dataclasses
from typing import Any, Self


@dataclasses.dataclass(frozen=True, slots=True)
class ValueObject:
    """Base class for value objects.

    Subclasses should be ``@dataclass(frozen=True, slots=True)``.  Equality and
    hashing are based on field values; ``__post_init__`` runs ``_validate`` so
    an instance never exists in an invalid state.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add construction-time checks."""

    def copy_with(self, **changes: Any) -> Self:
        """Return a new, re-validated instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


__all__ = ["ValueObject"]
