"""Utilities package for Shift Board."""
from .logging_setup import (
    TRACE,
    get_logger,
    log_coverage_check,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_coverage_check",
    "TRACE",
]
