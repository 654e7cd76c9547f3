# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from cookbook.shared.logging import logger

from .base import AppError

INTERNAL_ERROR_CODE = "internal_error"


def _where() -> str:
    return f"{request.method} {request.path}"


def render_error(error: AppError) -> tuple[Response, int]:
    if error.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        # 5xx bodies never carry detail
        return jsonify({"error": INTERNAL_ERROR_CODE}), int(error.status)
    return jsonify(error.to_dict()), int(error.status)


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"http.error: {exc.code} on {_where()}")
        else:
            logger.info(f"http.error: {exc.code} ({int(exc.status)}) on {_where()}")
        return render_error(exc)

    @app.errorhandler(HTTPException)
    def _on_http_exception(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        if debug_mode:
            logger.opt(exception=exc).error(
                f"http.unhandled: {type(exc).__name__} on {_where()} "
                f"(user_id={g.get('user_id')}, query={dict(request.args)})"
            )
        else:
            logger.error(f"http.unhandled: {type(exc).__name__} on {_where()}")
        return jsonify({"error": INTERNAL_ERROR_CODE}), int(HTTPStatus.INTERNAL_SERVER_ERROR)


__all__ = ["INTERNAL_ERROR_CODE", "register_error_handler", "render_error"]
