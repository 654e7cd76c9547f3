# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.accounts.entities import AccountProfile
from cookbook.domain.accounts.repositories import AccountRepository, TokenService
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class ResolveTokenUseCase:
    def __init__(self, *, accounts: AccountRepository, tokens: TokenService) -> None:
        self._accounts = accounts
        self._tokens = tokens

    @internal_failure_on_error("auth.resolve_token")
    def execute(self, token: str) -> Result[AccountProfile]:
        verified = self._tokens.verify(token)
        if isinstance(verified, Err):
            return Err(ErrorKind.UNAUTHENTICATED, context={"reason": verified.kind.value})

        account = self._accounts.find_by_email(verified.value.email)
        if account is None:
            return Err(ErrorKind.ACCOUNT_NOT_FOUND)
        return Ok(account.profile())


__all__ = ["ResolveTokenUseCase"]
