# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum
from http import HTTPStatus


class ErrorKind(StrEnum):
    VALIDATION = "validation_error"
    EMAIL_CONFLICT = "email_conflict"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_FAILURE = "internal_failure"


_STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.EMAIL_CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.ACCOUNT_NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.INVALID_CREDENTIALS: HTTPStatus.UNAUTHORIZED,
    ErrorKind.UNAUTHENTICATED: HTTPStatus.UNAUTHORIZED,
    ErrorKind.INVALID_TOKEN: HTTPStatus.UNAUTHORIZED,
    ErrorKind.EXPIRED_TOKEN: HTTPStatus.UNAUTHORIZED,
    ErrorKind.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.INTERNAL_FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> HTTPStatus:
    return _STATUS_BY_KIND[kind]


__all__ = ["ErrorKind", "status_for"]
