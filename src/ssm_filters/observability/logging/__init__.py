"""Observability – structured logging helpers."""
from ssm_filters.observability.logging.factory import JsonLoggerFactory
from ssm_filters.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
