"""ParameterStringFilter – one filter clause of a parameter listing query.

Used by the ``DescribeParameters`` and ``GetParametersByPath`` operations.
Not every key/option combination is valid for both operations; the service
enforces that, not this object (see
:mod:`ssm_filters.validation.compatibility` for an advisory check).
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Self

from ssm_filters.kernel.ddd.value_object import ValueObject
from ssm_filters.kernel.errors.domain import InvalidArgumentError

__all__ = ["ParameterStringFilter", "ParameterStringFilterInput"]

# Wire-style input: {"Key": str, "Option"?: str | None, "Values"?: Sequence[str] | None}
type ParameterStringFilterInput = Mapping[str, Any]


@dataclasses.dataclass(frozen=True, slots=True)
class ParameterStringFilter(ValueObject):
    """Immutable ``Key``/``Option``/``Values`` filter clause.

    ``option`` and ``values`` keep ``None`` (never supplied) apart from an
    empty value: ``values=()`` is serialised as ``"Values": []`` while
    ``values=None`` omits the field entirely.

    Example::

        f = ParameterStringFilter.from_input(
            {"Key": "tag:env", "Option": "Equals", "Values": ["prod"]}
        )
        f.request_body()
        # {"Key": "tag:env", "Option": "Equals", "Values": ["prod"]}
    """

    key: str
    option: str | None = None
    values: tuple[str, ...] | None = None

    def _validate(self) -> None:
        if self.key is None or self.key == "":
            raise InvalidArgumentError.missing_field("Key")
        if self.values is not None and not isinstance(self.values, tuple):
            # values is always a tuple after construction.
            object.__setattr__(self, "values", tuple(self.values))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_input(cls, input: ParameterStringFilterInput) -> Self:
        """Build a filter from a wire-style mapping.

        Raises:
            InvalidArgumentError: ``Key`` is absent, ``None`` or empty.
        """
        key = input.get("Key")
        if key is None:
            raise InvalidArgumentError.missing_field("Key")
        values: Iterable[str] | None = input.get("Values")
        return cls(
            key=key,
            option=input.get("Option"),
            values=None if values is None else tuple(values),
        )

    @classmethod
    def create(cls, input: Self | ParameterStringFilterInput) -> Self:
        """Return *input* unchanged if it is already a filter, else build one."""
        if isinstance(input, cls):
            return input
        return cls.from_input(input)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_key(self) -> str:
        return self.key

    def get_option(self) -> str | None:
        return self.option

    def get_values(self) -> list[str]:
        """Return the match values; ``[]`` when none were supplied."""
        return list(self.values) if self.values is not None else []

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def request_body(self) -> dict[str, Any]:
        """Return the wire payload fragment for this clause."""
        payload: dict[str, Any] = {"Key": self.key}
        if self.option is not None:
            payload["Option"] = self.option
        if self.values is not None:
            payload["Values"] = list(self.values)
        return payload

    @classmethod
    def _from_model_input(cls, value: Any) -> Self:
        """Validator for pydantic fields; failures surface as ``ValueError``."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise ValueError(
                f"expected a mapping or {cls.__name__}, got {type(value).__name__}"
            )
        try:
            return cls.from_input(value)
        except InvalidArgumentError as exc:
            raise ValueError(exc.message) from exc

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._from_model_input,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda f: f.request_body(),
            ),
        )
