# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cookbook.domain.accounts.entities import Account as DomainAccount
from cookbook.domain.accounts.repositories import AccountRepository
from cookbook.domain.exceptions import DuplicateEntryError
from cookbook.infrastructure.db.errors import is_unique_violation
from cookbook.infrastructure.db.models import User
from cookbook.infrastructure.unit_of_work import unit_of_work_scope

from .mappers import to_account


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainAccount | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return to_account(row) if row else None

    def find_by_id(self, account_id: int) -> DomainAccount | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, account_id)
            return to_account(row) if row else None

    def add(self, account: DomainAccount) -> DomainAccount:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    email=account.email,
                    password_hash=account.password_hash,
                    first_name=account.first_name,
                    last_name=account.last_name,
                    created_at=account.created_at,
                )
                session.add(row)
                session.flush()
                created = to_account(row)
        except IntegrityError as exc:
            if is_unique_violation(exc, "users.email", "ix_users_email"):
                raise DuplicateEntryError("account", field="email") from exc
            raise
        return created
