# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for the consul_kv package."""

from consul_kv.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_message,
    sanitize_error_string,
)

__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
]
