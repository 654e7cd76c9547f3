# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Blueprint, jsonify


class MiscController:
    def __init__(self, *, database_probe: Callable[[], bool]) -> None:
        self._database_probe = database_probe

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        database_ok = self._database_probe()
        status: dict[str, object] = {
            "ok": database_ok,
            "database": "ok" if database_ok else "error",
        }
        return jsonify(status), 200 if database_ok else 503
