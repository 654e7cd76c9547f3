# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Masks credentials and personal data before a log record reaches any sink."""

from __future__ import annotations

import re
from typing import Any

REDACTED = "***REDACTED***"

# Applied in order; the JWT rule runs first so encoded tokens are never half-masked.
_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]+"), "***JWT***"),
    (re.compile(r"((?:set-)?cookie\s*:\s*)[^\r\n]+", re.IGNORECASE), rf"\1{REDACTED}"),
    (re.compile(r"(authorization\s*:\s*)[^\r\n]+", re.IGNORECASE), rf"\1{REDACTED}"),
    (re.compile(r"(bearer\s+)[\w.\-]{8,}", re.IGNORECASE), rf"\1{REDACTED}"),
    (
        re.compile(r"((?:jwt[_-]?secret|secret[_-]?key)\s*[:=]\s*['\"]?)[^\s'\"]+", re.IGNORECASE),
        rf"\1{REDACTED}",
    ),
    (re.compile(r"((?:access[_-]?)?token\s*[:=]\s*['\"]?)[\w.\-]{8,}", re.IGNORECASE), rf"\1{REDACTED}"),
    (re.compile(r"((?:password|passwd|pwd)\s*[:=]\s*['\"]?)[^\s'\",)]+", re.IGNORECASE), rf"\1{REDACTED}"),
    (re.compile(r"(\w+(?:\+\w+)?://[^:/\s]+:)[^@\s]+@"), rf"\1{REDACTED}@"),
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,})"), r"***@\1"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter: rewrites the message in place and never drops the record."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["REDACTED", "sanitize_message", "sanitize_record"]
