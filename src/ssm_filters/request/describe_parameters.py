"""DescribeParameters request document."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from ssm_filters.request.base import ParameterQueryRequest, normalise_filters
from ssm_filters.value_object import ParameterQueryOperation, ParameterStringFilter

__all__ = ["DescribeParametersRequest"]


@dataclasses.dataclass(frozen=True, slots=True)
class DescribeParametersRequest(ParameterQueryRequest):
    """Lists parameter metadata matching ``parameter_filters``.

    Every field is optional; unset fields are left out of the body.
    """

    operation: ClassVar[ParameterQueryOperation] = ParameterQueryOperation.DESCRIBE_PARAMETERS

    parameter_filters: tuple[ParameterStringFilter, ...] | None = None
    max_results: int | None = None
    next_token: str | None = None
    shared: bool | None = None

    def _validate(self) -> None:
        object.__setattr__(self, "parameter_filters", normalise_filters(self.parameter_filters))

    @classmethod
    def from_input(cls, input: Mapping[str, Any]) -> Self:
        return cls(
            parameter_filters=input.get("ParameterFilters"),
            max_results=input.get("MaxResults"),
            next_token=input.get("NextToken"),
            shared=input.get("Shared"),
        )

    @classmethod
    def create(cls, input: Self | Mapping[str, Any]) -> Self:
        if isinstance(input, cls):
            return input
        return cls.from_input(input)

    def _payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.parameter_filters is not None:
            payload["ParameterFilters"] = self._filters_body(self.parameter_filters)
        if self.max_results is not None:
            payload["MaxResults"] = self.max_results
        if self.next_token is not None:
            payload["NextToken"] = self.next_token
        if self.shared is not None:
            payload["Shared"] = self.shared
        return payload
