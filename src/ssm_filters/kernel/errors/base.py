"""Root error class for the ssm-filters error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        field: Wire field (``"Key"``, ``"Path"``) or setting name the error
            concerns, when there is one.
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        field: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.field = field
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        if self.field is None:
            return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
        return f"{type(self).__name__}(code={self.code!r}, field={self.field!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict; ``field`` and ``cause`` only when set."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field is not None:
            payload["field"] = self.field
        payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog event describing this error.

        Detail entries are prefixed with ``detail_`` so they cannot clash with
        the event's own keys.
        """
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        if self.field is not None:
            fields["error_field"] = self.field
        fields.update({f"detail_{k}": v for k, v in self.detail.items()})
        return fields


__all__ = ["BaseError"]
