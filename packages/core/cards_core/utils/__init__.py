"""Utility functions."""

from cards_core.utils.logging import get_logger, log_exceptions
from cards_core.utils.retry import format_exception, with_retry

__all__ = [
    "format_exception",
    "get_logger",
    "log_exceptions",
    "with_retry",
]
