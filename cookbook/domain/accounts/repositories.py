# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from cookbook.shared.result import Result

from .entities import Account, TokenClaim


class AccountRepository(Protocol):
    def find_by_email(self, email: str) -> Account | None: ...
    def find_by_id(self, account_id: int) -> Account | None: ...

    def add(self, account: Account) -> Account:
        """Insert atomically; raise ``DuplicateEntryError`` when the email is taken."""
        ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, claim: TokenClaim) -> str: ...
    def verify(self, token: str) -> Result[TokenClaim]: ...
