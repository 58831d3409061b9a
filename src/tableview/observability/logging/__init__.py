"""Observability – structured logging helpers."""
from tableview.observability.logging.factory import JsonLoggerFactory
from tableview.observability.logging.processors import get_logger
from tableview.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
