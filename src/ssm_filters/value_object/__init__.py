"""Value objects – filter clauses and their documented vocabulary."""
from ssm_filters.value_object.filter_vocabulary import (
    TAG_PREFIX,
    ParameterFilterKey,
    ParameterFilterOption,
    ParameterQueryOperation,
    is_tag_key,
)
from ssm_filters.value_object.parameter_string_filter import (
    ParameterStringFilter,
    ParameterStringFilterInput,
)

__all__ = [
    "TAG_PREFIX",
    "ParameterFilterKey",
    "ParameterFilterOption",
    "ParameterQueryOperation",
    "ParameterStringFilter",
    "ParameterStringFilterInput",
    "is_tag_key",
]
