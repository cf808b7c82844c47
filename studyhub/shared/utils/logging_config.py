# studyhub/shared/utils/logging_config.py

"""
Application logging setup.

Configures the stdlib root logger once and attaches a filter that masks
credentials (bearer tokens, JWTs, passwords, cookie values) before any
record is emitted.
"""

import logging
import re
import sys

SENSITIVE_PATTERNS = [
    # Tokens
    (re.compile(r"(bearer\s+)([a-zA-Z0-9_\-\.]{20,})", re.IGNORECASE), r"\1***REDACTED***"),
    (re.compile(r"((?:access|refresh)_token\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)"),
     r"\1***REDACTED***\3"),
    (re.compile(r"\beyJ[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+"), "***JWT***"),

    # Passwords
    (re.compile(r"((?:confirm_?)?password\s*['\"]?\s*[:=]\s*['\"]?)([^'\",\s}]+)(['\"]?)", re.IGNORECASE),
     r"\1***REDACTED***\3"),

    # Database URLs with credentials
    (re.compile(r"(postgres(?:ql)?(?:\+\w+)?)://([^:]+):([^@]+)@"), r"\1://\2:***REDACTED***@"),

    # Authorization headers
    (re.compile(r"(authorization\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", re.IGNORECASE), r"\1***REDACTED***\3"),
]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def sanitize_message(message: str) -> str:
    sanitized = message
    for pattern, replacement in SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


class SensitiveDataFilter(logging.Filter):
    """Rewrites the rendered message of every record with secrets masked."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            return True

        record.msg = sanitize_message(message)
        record.args = None
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Safe to call more than once: the handler is only installed the first time.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if any(getattr(h, "_studyhub_handler", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(SensitiveDataFilter())
    handler._studyhub_handler = True
    root.addHandler(handler)

    # Silenciar loggers verbosos de bibliotecas
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
