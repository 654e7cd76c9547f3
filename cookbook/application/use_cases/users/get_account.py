# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.accounts.entities import AccountProfile
from cookbook.domain.accounts.repositories import AccountRepository
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class GetAccountByEmailUseCase:
    def __init__(self, accounts: AccountRepository) -> None:
        self._accounts = accounts

    @internal_failure_on_error("users.by_email")
    def execute(self, email: str) -> Result[AccountProfile]:
        account = self._accounts.find_by_email(email)
        if account is None:
            return Err(ErrorKind.ACCOUNT_NOT_FOUND, message="account not found")
        return Ok(account.profile())


__all__ = ["GetAccountByEmailUseCase"]
