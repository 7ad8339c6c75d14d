"""GetParametersByPath request document."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from ssm_filters.config.settings import QuerySettings
from ssm_filters.kernel.errors import InvalidArgumentError
from ssm_filters.request.base import ParameterQueryRequest, normalise_filters
from ssm_filters.value_object import ParameterQueryOperation, ParameterStringFilter

__all__ = ["GetParametersByPathRequest"]


@dataclasses.dataclass(frozen=True, slots=True)
class GetParametersByPathRequest(ParameterQueryRequest):
    """Retrieves parameters under ``path`` in the parameter hierarchy.

    ``path`` is required; the remaining fields are emitted only when set.
    """

    operation: ClassVar[ParameterQueryOperation] = ParameterQueryOperation.GET_PARAMETERS_BY_PATH

    path: str
    recursive: bool | None = None
    parameter_filters: tuple[ParameterStringFilter, ...] | None = None
    with_decryption: bool | None = None
    max_results: int | None = None
    next_token: str | None = None

    def _validate(self) -> None:
        if self.path is None or self.path == "":
            raise InvalidArgumentError.missing_field("Path")
        object.__setattr__(self, "parameter_filters", normalise_filters(self.parameter_filters))

    @classmethod
    def from_input(cls, input: Mapping[str, Any]) -> Self:
        path = input.get("Path")
        if path is None:
            raise InvalidArgumentError.missing_field("Path")
        return cls(
            path=path,
            recursive=input.get("Recursive"),
            parameter_filters=input.get("ParameterFilters"),
            with_decryption=input.get("WithDecryption"),
            max_results=input.get("MaxResults"),
            next_token=input.get("NextToken"),
        )

    @classmethod
    def create(cls, input: Self | Mapping[str, Any]) -> Self:
        if isinstance(input, cls):
            return input
        return cls.from_input(input)

    def _defaults(self, settings: QuerySettings) -> dict[str, Any]:
        changes = ParameterQueryRequest._defaults(self, settings)
        if self.with_decryption is None and settings.with_decryption:
            changes["with_decryption"] = True
        return changes

    def _payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"Path": self.path}
        if self.recursive is not None:
            payload["Recursive"] = self.recursive
        if self.parameter_filters is not None:
            payload["ParameterFilters"] = self._filters_body(self.parameter_filters)
        if self.with_decryption is not None:
            payload["WithDecryption"] = self.with_decryption
        if self.max_results is not None:
            payload["MaxResults"] = self.max_results
        if self.next_token is not None:
            payload["NextToken"] = self.next_token
        return payload
