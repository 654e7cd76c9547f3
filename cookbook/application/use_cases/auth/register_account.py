# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from cookbook.domain.accounts.entities import Account, AuthSession, TokenClaim
from cookbook.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)
from cookbook.domain.exceptions import DuplicateEntryError
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error

MIN_PASSWORD_LENGTH = 6


class RegisterAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens

    @internal_failure_on_error("auth.register")
    def execute(
        self, email: str, password: str, first_name: str, last_name: str
    ) -> Result[AuthSession]:
        if len(password) < MIN_PASSWORD_LENGTH:
            return Err(
                ErrorKind.VALIDATION,
                message=f"password must contain at least {MIN_PASSWORD_LENGTH} characters",
                context={"fields": ["password"], "min_length": MIN_PASSWORD_LENGTH},
            )

        hashed = self._password_hasher.hash(password)
        candidate = Account(
            id=0,
            email=email,
            password_hash=hashed,
            first_name=first_name,
            last_name=last_name,
            created_at=datetime.now(UTC),
        )
        try:
            account = self._accounts.add(candidate)
        except DuplicateEntryError:
            logger.info("auth.register: email_conflict")
            return Err(ErrorKind.EMAIL_CONFLICT, message="email is already registered")

        token = self._tokens.issue(TokenClaim(email=account.email))
        logger.info(f"auth.register: ok (user_id={account.id})")
        return Ok(AuthSession(token=token, account=account.profile()))


__all__ = ["MIN_PASSWORD_LENGTH", "RegisterAccountUseCase"]
