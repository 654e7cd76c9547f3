# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Global request gate: every route except the public allow-list needs a valid session cookie."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from flask import Flask, Response, g, jsonify, request

from cookbook.domain.accounts.entities import AccountProfile
from cookbook.shared.config import AuthConfig
from cookbook.shared.errors import AppError, ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Result

SKIPPED_METHODS: tuple[str, ...] = ("OPTIONS",)


class TokenResolver(Protocol):
    def execute(self, token: str) -> Result[AccountProfile]: ...


def _normalize(path: str) -> str:
    return path.rstrip("/") or "/"


def is_public_path(path: str, public_paths: Iterable[str], *, prefix_match: bool = False) -> bool:
    path = _normalize(path)
    for public in public_paths:
        public = _normalize(public)
        if path == public:
            return True
        if prefix_match and path.startswith(public.rstrip("/") + "/"):
            return True
    return False


def _reject(reason: str) -> tuple[Response, int]:
    logger.info(f"auth.guard: rejected (reason={reason}, path={request.path})")
    error = AppError.from_kind(ErrorKind.UNAUTHENTICATED, message="authentication required")
    return jsonify(error.to_dict()), int(error.status)


def configure_auth_guard(app: Flask, *, resolve_token: TokenResolver, auth: AuthConfig) -> None:
    public_paths = tuple(auth.public_paths)

    @app.before_request
    def _authenticate():
        if request.method in SKIPPED_METHODS:
            return None
        if is_public_path(request.path, public_paths, prefix_match=auth.public_prefix_match):
            return None

        token = request.cookies.get(auth.cookie_name, "")
        if not token:
            return _reject("missing_token")

        try:
            result = resolve_token.execute(token)
        except Exception:
            logger.exception("auth.guard: err")
            return _reject("internal")

        if isinstance(result, Err):
            return _reject(str(result.kind))

        g.account = result.value
        g.user_id = result.value.id
        logger.debug(f"auth.guard: ok (user_id={g.user_id})")
        return None


def current_account() -> AccountProfile:
    account = g.get("account")
    if account is None:
        raise AppError.from_kind(ErrorKind.UNAUTHENTICATED, message="authentication required")
    return account


__all__ = ["configure_auth_guard", "current_account", "is_public_path"]
