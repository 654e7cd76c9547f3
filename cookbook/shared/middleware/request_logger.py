# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from time import perf_counter

from flask import Flask, Response, g, request

from cookbook.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie", "x-api-key"})
SENSITIVE_QUERY_KEYS = ("password", "token", "secret")
_MASK = "***"


def client_ip() -> str:
    # forwarded headers are only honoured through ProxyFix (TRUSTED_PROXY_HOPS)
    return request.remote_addr or "-"


def _masked_headers() -> dict[str, str]:
    return {
        name: _MASK if name.lower() in SENSITIVE_HEADERS else value
        for name, value in request.headers.items()
    }


def _masked_query() -> dict[str, str]:
    return {
        key: _MASK if any(word in key.lower() for word in SENSITIVE_QUERY_KEYS) else value
        for key, value in request.args.items()
    }


def _describe_request(debug_mode: bool) -> str:
    line = f"{request.method} {request.path} (ip={client_ip()}"
    if debug_mode:
        line += (
            f", query={_masked_query()}, headers={_masked_headers()}"
            f", body_bytes={request.content_length or 0}"
        )
    return line + ")"


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _open_request() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(6))
        g.request_started = perf_counter()
        logger.info(f"http.request: {_describe_request(debug_mode)}")

    @app.after_request
    def _close_request(response: Response) -> Response:
        started = g.get("request_started", perf_counter())
        dt_ms = int((perf_counter() - started) * 1000)
        logger.info(
            f"http.response: {request.method} {request.path} "
            f"(status={response.status_code}, dt_ms={dt_ms}, user_id={g.get('user_id')})"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            failure = f"http.failed: {type(exc).__name__} on {request.method} {request.path}"
            if debug_mode:
                logger.opt(exception=exc).error(failure)
            else:
                logger.error(failure)
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "client_ip", "configure_request_logging"]
