"""loguru logger bound to the per-request correlation id, plus log redaction."""

from .logger import (
    ContextualLogger,
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
    setup_logging,
)
from .sensitive_filter import SENSITIVE_PATTERNS, sanitize_message, sanitize_record

__all__ = [
    "SENSITIVE_PATTERNS",
    "ContextualLogger",
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "sanitize_message",
    "sanitize_record",
    "set_correlation_id",
    "setup_logging",
]
