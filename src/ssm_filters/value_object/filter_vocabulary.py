"""Documented filter vocabulary for Parameter Store listing operations.

These names are for callers' convenience and for the advisory
:class:`~ssm_filters.validation.FilterCompatibilityChecker`.
:class:`~ssm_filters.value_object.ParameterStringFilter` accepts any string.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Final

__all__ = [
    "TAG_PREFIX",
    "ParameterFilterKey",
    "ParameterFilterOption",
    "ParameterQueryOperation",
    "is_tag_key",
]

TAG_PREFIX: Final = "tag:"


class ParameterFilterKey(StrEnum):
    NAME = "Name"
    TYPE = "Type"
    KEY_ID = "KeyId"
    PATH = "Path"
    LABEL = "Label"
    TIER = "Tier"
    DATA_TYPE = "DataType"

    @staticmethod
    def tag(tag_key: str) -> str:
        """Return the filter key matching parameters tagged with *tag_key*."""
        return f"{TAG_PREFIX}{tag_key}"


class ParameterFilterOption(StrEnum):
    EQUALS = "Equals"
    BEGINS_WITH = "BeginsWith"
    CONTAINS = "Contains"
    RECURSIVE = "Recursive"
    ONE_LEVEL = "OneLevel"


class ParameterQueryOperation(StrEnum):
    """Service operations that accept ``ParameterFilters``."""

    DESCRIBE_PARAMETERS = "DescribeParameters"
    GET_PARAMETERS_BY_PATH = "GetParametersByPath"


def is_tag_key(key: str) -> bool:
    return key.startswith(TAG_PREFIX) and len(key) > len(TAG_PREFIX)
