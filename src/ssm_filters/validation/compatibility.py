"""Advisory key/option compatibility checks for parameter filters.

The service is the authority on which ``Key``/``Option`` combinations each
operation accepts.  This checker reports the documented rules so callers can
surface problems before a round trip.  Problems are returned and logged,
not raised, and :class:`ParameterStringFilter` never calls the checker.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final

from ssm_filters.observability.logging import get_logger
from ssm_filters.value_object.filter_vocabulary import (
    ParameterFilterKey as K,
    ParameterFilterOption as O,
    ParameterQueryOperation,
    is_tag_key,
)
from ssm_filters.value_object.parameter_string_filter import ParameterStringFilter

__all__ = ["MAX_VALUES_PER_FILTER", "MAX_VALUE_LENGTH", "FilterCompatibilityChecker"]

MAX_VALUES_PER_FILTER: Final = 50
MAX_VALUE_LENGTH: Final = 1024

_DEFAULT_OPTIONS: Final = frozenset({O.EQUALS, O.BEGINS_WITH})
_PATH_OPTIONS: Final = frozenset({O.RECURSIVE, O.ONE_LEVEL})

_DESCRIBE_KEYS: Final = frozenset({K.NAME, K.TYPE, K.KEY_ID, K.PATH, K.TIER, K.DATA_TYPE})
_DESCRIBE_OPTIONS: Final[Mapping[str, frozenset[str]]] = {
    K.NAME: _DEFAULT_OPTIONS | {O.CONTAINS},
    K.PATH: _PATH_OPTIONS,
}

_BY_PATH_KEYS: Final = frozenset({K.TYPE, K.KEY_ID, K.LABEL})
_BY_PATH_OPTIONS: Final[Mapping[str, frozenset[str]]] = {
    K.LABEL: frozenset({O.EQUALS}),
}

_log = get_logger(__name__)


class FilterCompatibilityChecker:
    """Report documented key/option/value problems for an operation."""

    def check(
        self,
        filter: ParameterStringFilter,
        operation: ParameterQueryOperation | str,
    ) -> list[str]:
        """Return a list of problems (empty when the filter looks valid)."""
        operation = ParameterQueryOperation(operation)
        key = filter.get_key()
        option = filter.get_option()
        problems: list[str] = []

        if operation is ParameterQueryOperation.DESCRIBE_PARAMETERS:
            allowed_keys, per_key = _DESCRIBE_KEYS, _DESCRIBE_OPTIONS
            tags_allowed = True
        else:
            allowed_keys, per_key = _BY_PATH_KEYS, _BY_PATH_OPTIONS
            tags_allowed = False

        if is_tag_key(key):
            if not tags_allowed:
                problems.append(f"Tag key {key!r} is not supported by {operation}")
            elif option is not None and option not in _DEFAULT_OPTIONS:
                problems.append(
                    f"Option {option!r} is not supported for key {key!r} by {operation}; "
                    f"expected one of {sorted(str(o) for o in _DEFAULT_OPTIONS)}"
                )
        elif key not in allowed_keys:
            problems.append(f"Key {key!r} is not supported by {operation}")
        elif option is not None:
            allowed_options = per_key.get(key, _DEFAULT_OPTIONS)
            if option not in allowed_options:
                problems.append(
                    f"Option {option!r} is not supported for key {key!r} by {operation}; "
                    f"expected one of {sorted(str(o) for o in allowed_options)}"
                )

        values = filter.get_values()
        if len(values) > MAX_VALUES_PER_FILTER:
            problems.append(
                f"Filter {key!r} has {len(values)} values; at most {MAX_VALUES_PER_FILTER} are accepted"
            )
        too_long = [v for v in values if len(v) > MAX_VALUE_LENGTH]
        if too_long:
            problems.append(
                f"Filter {key!r} has {len(too_long)} value(s) longer than {MAX_VALUE_LENGTH} characters"
            )

        for problem in problems:
            _log.warning("parameter_filter.incompatible", operation=str(operation), key=key, problem=problem)
        return problems

    def check_all(
        self,
        filters: Iterable[ParameterStringFilter],
        operation: ParameterQueryOperation | str,
    ) -> list[str]:
        problems: list[str] = []
        for f in filters:
            problems.extend(self.check(f, operation))
        return problems
