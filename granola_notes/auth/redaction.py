"""Scrub credentials out of error messages before they are surfaced."""

from __future__ import annotations

import re

REDACTED = "[REDACTED]"

_SENSITIVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"Bearer\s+[A-Za-z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[A-Za-z0-9]{20,}"),
    re.compile(r'"access_token":\s*"[^"]+"', re.IGNORECASE),
    re.compile(r'"refresh_token":\s*"[^"]+"', re.IGNORECASE),
    re.compile(r'"cognito_tokens":\s*"[^"]+"', re.IGNORECASE),
    re.compile(r'"workos_tokens":\s*"[^"]+"', re.IGNORECASE),
    re.compile(r"eyJ[A-Za-z0-9\-._~+/]*={0,2}"),
)

# Catch-all for anything the patterns above leave behind.
_LONG_WORD = re.compile(r"\b[A-Za-z0-9]{32,}\b")


def sanitize_error_message(message: str) -> str:
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(REDACTED, sanitized)
    return _LONG_WORD.sub(REDACTED, sanitized)


__all__ = ["REDACTED", "sanitize_error_message"]
