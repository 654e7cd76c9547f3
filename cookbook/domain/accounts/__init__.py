# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Account, AccountProfile, AuthSession, TokenClaim
from .repositories import AccountRepository, PasswordHasher, TokenService

__all__ = [
    "Account",
    "AccountProfile",
    "AccountRepository",
    "AuthSession",
    "PasswordHasher",
    "TokenClaim",
    "TokenService",
]
