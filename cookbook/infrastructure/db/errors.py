# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Classify ``IntegrityError`` by the constraint that rejected the statement."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

# SQLSTATE classes shared by PostgreSQL and the ANSI standard
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

# MySQL / MariaDB error numbers
_MYSQL_DUPLICATE_ENTRY = 1062
_MYSQL_FOREIGN_KEY = (1216, 1452)


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _mysql_errno(exc: IntegrityError) -> int | None:
    args = getattr(exc.orig, "args", ())
    return args[0] if args and isinstance(args[0], int) else None


def _message(exc: IntegrityError) -> str:
    return str(exc.orig).lower()


def is_unique_violation(exc: IntegrityError, *markers: str) -> bool:
    """True when a unique constraint or index named by one of ``markers`` was violated.

    A marker is a constraint/index name (``u_user_recipe``) or the
    ``table.column`` form SQLite reports (``users.email``).
    """
    state, errno, message = _sqlstate(exc), _mysql_errno(exc), _message(exc)
    if state is not None:
        unique = state == UNIQUE_VIOLATION
    elif errno is not None:
        unique = errno == _MYSQL_DUPLICATE_ENTRY
    else:
        unique = "unique constraint failed" in message
    return unique and any(marker.lower() in message for marker in markers)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    state, errno = _sqlstate(exc), _mysql_errno(exc)
    if state is not None:
        return state == FOREIGN_KEY_VIOLATION
    if errno is not None:
        return errno in _MYSQL_FOREIGN_KEY
    return "foreign key constraint failed" in _message(exc)


__all__ = ["is_foreign_key_violation", "is_unique_violation"]
