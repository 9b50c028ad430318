"""Structured logging module for watchcfg.

Provides configurable logging with JSON format support and file rotation.
"""

from watchcfg.logging.config import configure_logging
from watchcfg.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
