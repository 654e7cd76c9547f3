# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited bearer tokens carrying the account email."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from cookbook.domain.accounts.entities import TokenClaim
from cookbook.domain.accounts.repositories import TokenService
from cookbook.shared.config import TOKEN_LIFETIME
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result

_REQUIRED_CLAIMS = ["email", "exp", "iat"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        lifetime: timedelta = TOKEN_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock

    def issue(self, claim: TokenClaim) -> str:
        issued_at = self._clock()
        payload = {
            "email": claim.email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Result[TokenClaim]:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("tokens.verify: expired")
            return Err(ErrorKind.EXPIRED_TOKEN)
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.verify: invalid ({type(exc).__name__})")
            return Err(ErrorKind.INVALID_TOKEN)

        email = payload.get("email")
        if not isinstance(email, str) or not email:
            return Err(ErrorKind.INVALID_TOKEN)
        return Ok(TokenClaim(email=email))


__all__ = ["JwtTokenService"]
