# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.accounts.entities import AuthSession, TokenClaim
from cookbook.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class LoginAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
        conceal_unknown_accounts: bool = False,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._conceal_unknown_accounts = conceal_unknown_accounts

    @internal_failure_on_error("auth.login")
    def execute(self, email: str, password: str) -> Result[AuthSession]:
        account = self._accounts.find_by_email(email)
        if account is None:
            logger.info("auth.login: unknown_account")
            if self._conceal_unknown_accounts:
                return Err(ErrorKind.INVALID_CREDENTIALS, message="invalid email or password")
            return Err(ErrorKind.ACCOUNT_NOT_FOUND, message="account not found")

        if not self._password_hasher.verify(password, account.password_hash):
            logger.info(f"auth.login: bad_password (user_id={account.id})")
            return Err(ErrorKind.INVALID_CREDENTIALS, message="invalid email or password")

        token = self._tokens.issue(TokenClaim(email=account.email))
        logger.info(f"auth.login: ok (user_id={account.id})")
        return Ok(AuthSession(token=token, account=account.profile()))


__all__ = ["LoginAccountUseCase"]
