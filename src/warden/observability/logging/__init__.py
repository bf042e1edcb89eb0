"""Observability – structured logging helpers."""
from warden.observability.logging.factory import JsonLoggerFactory
from warden.observability.logging.processors import HandlerNameProcessor, get_logger

__all__ = ["HandlerNameProcessor", "JsonLoggerFactory", "get_logger"]
