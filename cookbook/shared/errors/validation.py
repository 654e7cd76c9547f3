# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import AppError
from .kinds import ErrorKind

_JSON_SCALARS = (str, int, float, bool, type(None))


def _json_safe(value: Any) -> Any:
    return value if isinstance(value, _JSON_SCALARS) else str(value)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Flatten pydantic errors into ``{"fields": [...], "errors": [...]}`` for the response body."""
    errors: list[dict[str, Any]] = []
    for error in exc.errors(include_url=False):
        field = ".".join(str(part) for part in error.get("loc", ()))
        entry: dict[str, Any] = {
            "field": field or "body",
            "type": error.get("type", "value_error"),
            "message": error.get("msg", ""),
        }
        ctx = error.get("ctx")
        if ctx:
            entry["ctx"] = {key: _json_safe(value) for key, value in ctx.items()}
        errors.append(entry)

    fields = sorted({entry["field"] for entry in errors if entry["field"] != "body"})
    return {"fields": fields, "errors": errors}


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise AppError.from_kind(ErrorKind.VALIDATION, context=format_pydantic_errors(exc)) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
