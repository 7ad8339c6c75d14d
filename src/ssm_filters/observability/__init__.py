"""Observability – structured logging."""
from ssm_filters.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
