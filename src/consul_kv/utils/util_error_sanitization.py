# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Consul error bodies and transport exceptions are copied into ClientError
context and log records. This module strips anything that may carry an
ACL token or other credential before that happens.

Example:
    >>> from consul_kv.utils import sanitize_error_string
    >>> sanitize_error_string("ACL not found")
    'ACL not found'
    >>> sanitize_error_string("Permission denied: token with AccessorID 'abc'")
    '[REDACTED - potentially sensitive data]'
"""

from __future__ import annotations

# Checked case-insensitively against the message.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Credentials
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "private_key",
    "credential",
    "bearer",
    "authorization",
    # Consul-specific
    "x-consul-token",
    "accessorid",
    "secretid",
    # Certificate and key material
    "-----begin",
    "-----end",
)


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for safe inclusion in logs and errors.

    Sanitization rules:
        1. If a sensitive pattern is present, return a generic redacted message
        2. Truncate long messages to ``max_length`` characters

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        Sanitized error message.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


def sanitize_error_message(exception: Exception, max_length: int = 500) -> str:
    """Sanitize an exception for logging, prefixed with its type name.

    Args:
        exception: The exception to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        ``"{ExceptionType}: {sanitized_message}"``
    """
    exception_type = type(exception).__name__
    return f"{exception_type}: {sanitize_error_string(str(exception), max_length) or '<no message>'}"


__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
]
