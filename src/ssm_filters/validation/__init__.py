"""Validation – advisory checks mirroring documented service rules."""
from ssm_filters.validation.compatibility import (
    MAX_VALUE_LENGTH,
    MAX_VALUES_PER_FILTER,
    FilterCompatibilityChecker,
)

__all__ = ["MAX_VALUES_PER_FILTER", "MAX_VALUE_LENGTH", "FilterCompatibilityChecker"]
