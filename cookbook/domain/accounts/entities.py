# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class AccountProfile:

    id: int
    email: str
    first_name: str
    last_name: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    created_at: datetime

    def profile(self) -> AccountProfile:
        return AccountProfile(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            created_at=self.created_at,
        )


@dataclass(slots=True, frozen=True)
class TokenClaim:

    email: str


@dataclass(slots=True, frozen=True)
class AuthSession:

    token: str
    account: AccountProfile
