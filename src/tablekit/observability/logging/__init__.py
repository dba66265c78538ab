"""Observability – structured logging helpers."""
from tablekit.observability.logging.factory import JsonLoggerFactory
from tablekit.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
