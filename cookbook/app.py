# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from cookbook.infrastructure.container import Container
from cookbook.infrastructure.db import init_db
from cookbook.shared.config import AppConfig, load_config
from cookbook.shared.errors import register_error_handler
from cookbook.shared.logging import logger, setup_logging
from cookbook.shared.middleware.auth_guard import configure_auth_guard
from cookbook.shared.middleware.request_logger import configure_request_logging


SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Permissions-Policy": "camera=(), geolocation=(), microphone=()",
}
HSTS_VALUE = "max-age=31536000; includeSubDomains"


def _configure_security_headers(app: Flask, *, enable_hsts: bool) -> None:
    headers = dict(SECURITY_HEADERS)
    if enable_hsts:
        headers["Strict-Transport-Security"] = HSTS_VALUE

    @app.after_request
    def _apply_security_headers(response: Response) -> Response:
        for name, value in headers.items():
            response.headers.setdefault(name, value)
        return response


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        "DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    container = Container(config)
    init_db(container.engine)

    app = Flask(__name__)
    hops = config.security.trusted_proxy_hops
    if hops:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops)  # type: ignore[method-assign]
    app.extensions["cookbook.container"] = container

    register_error_handler(app, debug_mode=config.debug_logging)
    # request logging first so the guard already runs under a correlation id
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_auth_guard(
        app,
        resolve_token=container.resolve_token_use_case,
        auth=config.auth,
    )

    origins = config.security.allowed_origins
    # credentialed CORS is only valid against explicit origins
    CORS(
        app,
        resources={r"/*": {"origins": origins}},
        supports_credentials="*" not in origins,
    )

    for controller in container.controllers():
        app.register_blueprint(controller.as_blueprint())

    _configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    logger.info(f"app: ready (env={config.app_env}, blueprints={len(app.blueprints)})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=3000, debug=True)
