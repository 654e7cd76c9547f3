# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged success/failure values returned by use cases."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import wraps
from typing import Any, Generic, ParamSpec, TypeVar, Union

from cookbook.shared.errors.base import AppError
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(slots=True, frozen=True)
class Err:
    kind: ErrorKind
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def to_app_error(self) -> AppError:
        return AppError.from_kind(self.kind, message=self.message, context=self.context)


Result = Union[Ok[T], Err]


def unwrap(result: Result[T]) -> T:
    """Return the success value or raise the matching ``AppError``."""
    if isinstance(result, Err):
        raise result.to_app_error()
    return result.value


def internal_failure_on_error(
    operation: str,
) -> Callable[[Callable[P, Result[T]]], Callable[P, Result[T]]]:
    """Turn unexpected exceptions raised by collaborators into ``Err(INTERNAL_FAILURE)``."""

    def decorator(fn: Callable[P, Result[T]]) -> Callable[P, Result[T]]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
            try:
                return fn(*args, **kwargs)
            except Exception:
                logger.exception(f"{operation}: err")
                return Err(ErrorKind.INTERNAL_FAILURE)

        return wrapper

    return decorator


__all__ = ["Err", "Ok", "Result", "internal_failure_on_error", "unwrap"]
