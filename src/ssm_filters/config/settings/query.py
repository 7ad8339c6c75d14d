"""Config settings – defaults applied to parameter listing requests."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar, Final

from ssm_filters.config.settings.base import Settings
from ssm_filters.config.validation import InvalidSettingValueError

MAX_RESULTS_LIMIT: Final = 50


@dataclasses.dataclass
class QuerySettings(Settings):
    """Request defaults read from ``SSM_FILTERS_*`` environment variables."""

    _prefix: ClassVar[str] = "SSM_FILTERS"

    max_results: int | None = None
    with_decryption: bool = False
    check_compatibility: bool = False
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.max_results is not None and not 1 <= self.max_results <= MAX_RESULTS_LIMIT:
            raise InvalidSettingValueError(
                "max_results", self.max_results, f"must be between 1 and {MAX_RESULTS_LIMIT}"
            )
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["MAX_RESULTS_LIMIT", "QuerySettings"]
