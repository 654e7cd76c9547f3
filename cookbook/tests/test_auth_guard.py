from __future__ import annotations

from datetime import UTC, datetime

import pytest
from flask import Flask, g, jsonify

from cookbook.domain.accounts.entities import AccountProfile
from cookbook.shared.config import AuthConfig
from cookbook.shared.errors import ErrorKind, register_error_handler
from cookbook.shared.middleware.auth_guard import (
    configure_auth_guard,
    current_account,
    is_public_path,
)
from cookbook.shared.result import Err, Ok

from conftest import TEST_SECRET

PROFILE = AccountProfile(
    id=7, email="a@b.com", first_name="A", last_name="B", created_at=datetime.now(UTC)
)


class StubResolver:
    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.tokens: list[str] = []

    def execute(self, token: str):
        self.tokens.append(token)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def _app(resolver: StubResolver, **auth) -> Flask:
    app = Flask(__name__)
    register_error_handler(app)
    configure_auth_guard(
        app, resolve_token=resolver, auth=AuthConfig(jwt_secret=TEST_SECRET, **auth)
    )

    @app.get("/auth/login")
    def login():
        return jsonify({"public": True})

    @app.get("/auth/login/extra")
    def login_extra():
        return jsonify({"public": True})

    @app.get("/recipes")
    def recipes():
        return jsonify({"user_id": g.user_id, "email": current_account().email})

    return app


@pytest.mark.parametrize(
    ("path", "prefix", "expected"),
    [
        ("/auth/login", False, True),
        ("/auth/login/", False, True),
        ("/auth/login/extra", False, False),
        ("/auth/login/extra", True, True),
        ("/auth/loginx", True, False),
        ("/recipes", True, False),
        ("/health", False, True),
    ],
)
def test_is_public_path(path: str, prefix: bool, expected: bool) -> None:
    public = ["/auth/login", "/auth/register", "/health"]

    assert is_public_path(path, public, prefix_match=prefix) is expected


def test_public_path_skips_guard() -> None:
    resolver = StubResolver(Ok(PROFILE))

    response = _app(resolver).test_client().get("/auth/login")

    assert response.status_code == 200
    assert resolver.tokens == []


def test_missing_cookie_is_unauthenticated() -> None:
    response = _app(StubResolver(Ok(PROFILE))).test_client().get("/recipes")

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthenticated", "message": "authentication required"}


def test_valid_cookie_attaches_account() -> None:
    resolver = StubResolver(Ok(PROFILE))
    client = _app(resolver).test_client()
    client.set_cookie("access_token", "good-token")

    response = client.get("/recipes")

    assert response.status_code == 200
    assert response.get_json() == {"user_id": 7, "email": "a@b.com"}
    assert resolver.tokens == ["good-token"]


@pytest.mark.parametrize(
    "outcome",
    [
        Err(ErrorKind.UNAUTHENTICATED, context={"reason": "expired_token"}),
        Err(ErrorKind.UNAUTHENTICATED, context={"reason": "invalid_token"}),
        Err(ErrorKind.ACCOUNT_NOT_FOUND),
        Err(ErrorKind.INTERNAL_FAILURE),
        RuntimeError("boom"),
    ],
)
def test_every_resolution_failure_is_uniform_401(outcome) -> None:
    client = _app(StubResolver(outcome)).test_client()
    client.set_cookie("access_token", "bad-token")

    response = client.get("/recipes")

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthenticated"
    assert "context" not in response.get_json()


def test_prefix_match_configuration() -> None:
    resolver = StubResolver(Ok(PROFILE))
    exact = _app(resolver).test_client().get("/auth/login/extra")
    prefixed = _app(resolver, public_prefix_match=True).test_client().get("/auth/login/extra")

    assert exact.status_code == 401
    assert prefixed.status_code == 200


def test_options_requests_bypass_guard() -> None:
    response = _app(StubResolver(Ok(PROFILE))).test_client().options("/recipes")

    assert response.status_code == 200


def test_custom_cookie_name() -> None:
    resolver = StubResolver(Ok(PROFILE))
    client = _app(resolver, cookie_name="session").test_client()
    client.set_cookie("session", "tok")

    assert client.get("/recipes").status_code == 200
