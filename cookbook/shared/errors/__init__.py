# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import AppError
from .http import register_error_handler, render_error
from .kinds import ErrorKind, status_for
from .validation import format_pydantic_errors, raise_validation_error

__all__ = [
    "AppError",
    "ErrorKind",
    "format_pydantic_errors",
    "raise_validation_error",
    "register_error_handler",
    "render_error",
    "status_for",
]
