"""Redaction helpers for safe logging.

Customer names and e-mail addresses are PII. Anything derived from a request
body or a customer record goes through these helpers before it is logged.
"""

import re
from typing import Any

_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_PATTERN = re.compile(r"\+?\d[\d\s\-()]{8,}\d")

_REDACTED = "[REDACTED]"


def redact_string(value: str) -> str:
    """Redact e-mail and phone patterns from a string."""
    result = _EMAIL_PATTERN.sub(_REDACTED, value)
    return _PHONE_PATTERN.sub(_REDACTED, result)


def mask_email(email: str) -> str:
    """Keep only the domain of an address: ``ana@x.com`` -> ``***@x.com``."""
    _, sep, domain = email.rpartition("@")
    if not sep or not domain:
        return _REDACTED
    return f"***@{domain}"


def redact_value(value: Any) -> str:
    """Redact any value for safe logging. Returns string representation."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return redact_string(value)
    if isinstance(value, dict):
        # Structure only, never values
        return f"dict(keys={list(value.keys())})"
    if isinstance(value, (list, tuple)):
        return f"list(len={len(value)})"
    return f"<{type(value).__name__}>"


def safe_log_context(**kwargs: Any) -> dict[str, str]:
    """Build a context dict safe for logging. All values are redacted."""
    return {k: redact_value(v) for k, v in kwargs.items()}
