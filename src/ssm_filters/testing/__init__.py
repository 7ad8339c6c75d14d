"""Testing helpers – Hypothesis strategies for filter value objects."""
from ssm_filters.testing.strategies import (
    parameter_string_filter_input_strategy,
    parameter_string_filter_strategy,
)

__all__ = ["parameter_string_filter_input_strategy", "parameter_string_filter_strategy"]
