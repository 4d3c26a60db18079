"""CGI-compatible parameter reading from environment (web form fields)."""

from __future__ import annotations

import os


def get_key(name: str, default: str | None = '') -> str:
    """Read one form parameter from environment. Sanitized."""
    raw = os.environ.get(name, default)
    return _sanitize(str(raw).strip())


def has_key(name: str) -> bool:
    """True if the form parameter is present and non-blank."""
    return bool(os.environ.get(name, '').strip())


def _sanitize(s: str) -> str:
    """Basic sanitization: remove control chars and limit length."""
    s = ''.join(c for c in s if ord(c) >= 32 and ord(c) != 127)
    return s[:256] if len(s) > 256 else s
