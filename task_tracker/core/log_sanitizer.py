"""
Log sanitization filter to keep credentials out of the logs.

Bearer tokens arrive on every request and the database URL may carry a
password, so both are redacted before a record reaches any handler.
"""

import logging
import re
import traceback
from typing import List, Optional, Pattern, Tuple


class SensitiveDataFilter(logging.Filter):
    """
    Logging filter that redacts sensitive data from log records.

    The record is always let through; only its message and formatted
    exception text are rewritten.
    """

    # (compiled regex pattern, replacement string); order matters
    SENSITIVE_PATTERNS: List[Tuple[Pattern[str], str]] = [
        # JWT tokens MUST come before generic token patterns
        (re.compile(r"\beyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+", re.IGNORECASE), "JWT_TOKEN_REDACTED"),
        (re.compile(r"\beyJ[A-Za-z0-9_-]{10,}", re.IGNORECASE), "JWT_TOKEN_REDACTED"),
        # Authorization header values
        (
            re.compile(r'(Authorization)\s*[:=]\s*["\']?(Bearer\s+)?([^\s"\',}]+)["\']?', re.IGNORECASE),
            r"\1: Bearer REDACTED",
        ),
        (re.compile(r"\b(Bearer\s+[A-Za-z0-9\-_\.]+)", re.IGNORECASE), "Bearer REDACTED"),
        # Secrets and passwords
        (
            re.compile(r'(jwt[_-]?secret|secret[_-]?key|token|password|passwd|pwd)\s*[:=]\s*["\']?([^\s"\',}]+)["\']?', re.IGNORECASE),
            r"\1=REDACTED",
        ),
        # Database connection strings with credentials
        (
            re.compile(r"(postgres|postgresql|postgresql\+\w+|mysql|mysql\+\w+|mongodb)://[^@\s]+@[^\s]+", re.IGNORECASE),
            r"\1://REDACTED@REDACTED",
        ),
        # Email addresses
        (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "EMAIL_REDACTED"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        message = self.sanitize(str(record.getMessage()))

        record.msg = message
        record.args = ()  # already formatted

        if record.exc_info and record.exc_info[0] is not None:
            exc_text = "".join(traceback.format_exception(*record.exc_info))
            record.exc_text = self.sanitize(exc_text).strip()

        return True

    @classmethod
    def sanitize(cls, text: str) -> str:
        for pattern, replacement in cls.SENSITIVE_PATTERNS:
            text = pattern.sub(replacement, text)
        return text


def add_sensitive_data_filter(logger: Optional[logging.Logger] = None) -> None:
    """
    Add the sensitive data filter to a logger or to the root logger.

    Args:
        logger: The logger to add the filter to. If None, adds to root logger.
    """
    if logger is None:
        logger = logging.getLogger()

    for existing in logger.filters:
        if isinstance(existing, SensitiveDataFilter):
            return

    logger.addFilter(SensitiveDataFilter())


def configure_secure_logging() -> None:
    """Install the redaction filter on the root logger and its handlers."""
    add_sensitive_data_filter()

    # Logger-level filters only see records logged directly on that logger,
    # so handlers get one too for records propagated from child loggers.
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if not any(isinstance(f, SensitiveDataFilter) for f in handler.filters):
            handler.addFilter(SensitiveDataFilter())
