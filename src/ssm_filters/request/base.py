"""Request documents – shared behaviour of parameter listing requests."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable
from typing import Any, ClassVar, Final, Self

from ssm_filters.config.settings import QuerySettings
from ssm_filters.kernel.ddd.value_object import ValueObject
from ssm_filters.kernel.errors import InvalidArgumentError
from ssm_filters.observability.logging import get_logger
from ssm_filters.validation import FilterCompatibilityChecker
from ssm_filters.value_object import (
    ParameterQueryOperation,
    ParameterStringFilter,
    ParameterStringFilterInput,
)

__all__ = ["CONTENT_TYPE", "TARGET_PREFIX", "ParameterQueryRequest"]

CONTENT_TYPE: Final = "application/x-amz-json-1.1"
TARGET_PREFIX: Final = "AmazonSSM"

_log = get_logger(__name__)


def normalise_filters(
    filters: Iterable[ParameterStringFilter | ParameterStringFilterInput] | None,
) -> tuple[ParameterStringFilter, ...] | None:
    """Coerce instances and raw mappings alike into a tuple of filters."""
    if filters is None:
        return None
    normalised: list[ParameterStringFilter] = []
    for index, f in enumerate(filters):
        try:
            normalised.append(ParameterStringFilter.create(f))
        except InvalidArgumentError as exc:
            _log.warning("parameter_query.invalid_filter", index=index, **exc.log_fields())
            raise
    return tuple(normalised)


@dataclasses.dataclass(frozen=True, slots=True)
class ParameterQueryRequest(ValueObject):
    """Base for request documents that carry ``ParameterFilters``.

    Subclasses declare ``operation`` and the fields ``parameter_filters``,
    ``max_results`` and ``next_token``; this class supplies the envelope
    metadata, JSON rendering and the immutable update helpers.
    """

    operation: ClassVar[ParameterQueryOperation]
    content_type: ClassVar[str] = CONTENT_TYPE

    @property
    def target(self) -> str:
        """Value of the ``X-Amz-Target`` header for this operation."""
        return f"{TARGET_PREFIX}.{self.operation}"

    def get_parameter_filters(self) -> list[ParameterStringFilter]:
        filters = getattr(self, "parameter_filters")
        return list(filters) if filters is not None else []

    def request_body(self) -> dict[str, Any]:
        payload = self._payload()
        _log.debug(
            "parameter_query.request_body",
            operation=str(self.operation),
            filter_count=len(self.get_parameter_filters()),
        )
        return payload

    def to_json(self) -> str:
        return json.dumps(self.request_body(), ensure_ascii=False)

    def with_next_token(self, next_token: str | None) -> Self:
        """Return a copy addressed at the page identified by *next_token*."""
        return dataclasses.replace(self, next_token=next_token)

    def apply_defaults(
        self,
        settings: QuerySettings,
        checker: FilterCompatibilityChecker | None = None,
    ) -> Self:
        """Fill unset fields from *settings*; optionally report filter problems."""
        changes = self._defaults(settings)
        request = dataclasses.replace(self, **changes) if changes else self
        if settings.check_compatibility:
            (checker or FilterCompatibilityChecker()).check_all(
                request.get_parameter_filters(), request.operation
            )
        return request

    def _defaults(self, settings: QuerySettings) -> dict[str, Any]:
        if getattr(self, "max_results") is None and settings.max_results is not None:
            return {"max_results": settings.max_results}
        return {}

    def _payload(self) -> dict[str, Any]:
        raise NotImplementedError

    @staticmethod
    def _filters_body(filters: tuple[ParameterStringFilter, ...]) -> list[dict[str, Any]]:
        return [f.request_body() for f in filters]
