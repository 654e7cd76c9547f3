# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from cookbook.application.use_cases.auth.login_account import LoginAccountUseCase
from cookbook.application.use_cases.auth.register_account import RegisterAccountUseCase
from cookbook.domain.accounts.entities import AuthSession
from cookbook.interfaces.http.dto.auth import AccountDTO, LoginRequestDTO, RegisterRequestDTO
from cookbook.interfaces.http.dto.base import MessageDTO
from cookbook.shared.config import AuthConfig, SecurityConfig
from cookbook.shared.errors.validation import raise_validation_error
from cookbook.shared.logging import logger
from cookbook.shared.middleware.rate_limit import rate_limit
from cookbook.shared.result import unwrap


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterAccountUseCase,
        login_use_case: LoginAccountUseCase,
        auth: AuthConfig,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._auth = auth
        self._security = security

    def _session_response(self, session: AuthSession, status: int) -> tuple[Response, int]:
        response = jsonify(AccountDTO.from_profile(session.account).to_json())
        response.set_cookie(
            self._auth.cookie_name,
            session.token,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
            max_age=int(self._auth.token_lifetime.total_seconds()),
        )
        return response, status

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        session = unwrap(
            self._register_use_case.execute(
                dto.email, dto.password, dto.first_name, dto.last_name
            )
        )
        return self._session_response(session, 201)

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        session = unwrap(self._login_use_case.execute(dto.email, dto.password))
        return self._session_response(session, 200)

    def logout(self) -> tuple[Response, int]:
        response = jsonify(MessageDTO(message="Logged out successfully").to_json())
        response.delete_cookie(
            self._auth.cookie_name,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        register, login = self.register, self.login
        if self._security.enable_rate_limit:
            limited = rate_limit(
                self._security.rate_limit_requests, self._security.rate_limit_window
            )
            register, login = limited(register), limited(login)

        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=register, methods=["POST"])
        bp.add_url_rule("/login", view_func=login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
