"""Credential redaction for log output."""

import logging
import re

REDACTED = "[REDACTED]"

_PATTERNS = (
    # Authorization header values
    re.compile(r"(?P<prefix>\b(?:Basic|Bearer)\s+)[A-Za-z0-9._~+/=-]+"),
    # password-grant form fields
    re.compile(r"(?P<prefix>\bpassword=)[^&\s]+"),
    re.compile(r"(?P<prefix>\baccess_token['\"]?\s*[:=]\s*['\"]?)[^'\"&\s,}]+"),
)


def redact(text: str) -> str:
    """Replace credentials in ``text`` with a placeholder."""
    for pattern in _PATTERNS:
        text = pattern.sub(lambda m: m.group("prefix") + REDACTED, text)
    return text


class SanitizingFormatter(logging.Formatter):
    """Formatter that scrubs credentials from the rendered message.

    The record is updated in place (``msg`` holds the redacted message and
    ``args`` is cleared) so formatters that wrap this one see the sanitized
    text too.
    """

    def format(self, record: logging.LogRecord) -> str:
        record.msg = redact(record.getMessage())
        record.args = None
        return super().format(record)
