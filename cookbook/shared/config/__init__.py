# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import (
    TOKEN_LIFETIME,
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    SecurityConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "AuthConfig",
    "DatabaseConfig",
    "SecurityConfig",
    "TOKEN_LIFETIME",
    "load_config",
]
