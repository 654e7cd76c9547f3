# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

TOKEN_LIFETIME = timedelta(hours=24)

_WEAK_SECRETS = frozenset({"dev", "development", "test", "secret", "changeme"})
_MIN_PRODUCTION_SECRET_LENGTH = 32


def _settings_config() -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_by_alias=True,
    )


def _split_csv(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///cookbook.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")
    echo: bool = Field(False, alias="DATABASE_ECHO")

    model_config = _settings_config()


class SecurityConfig(BaseSettings):
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Strict", alias="COOKIE_SAMESITE")

    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # register/login only
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, ge=0.1, alias="RL_WINDOW")

    # number of reverse proxies whose X-Forwarded-For / X-Forwarded-Proto are trusted
    trusted_proxy_hops: int = Field(0, ge=0, alias="TRUSTED_PROXY_HOPS")

    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _settings_config()

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        return _split_csv(value)


class AuthConfig(BaseSettings):
    jwt_secret: str = Field(min_length=1, alias="JWT_SECRET")
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field("HS256", alias="JWT_ALGORITHM")
    cookie_name: str = Field("access_token", min_length=1, alias="AUTH_COOKIE_NAME")
    public_paths: Annotated[list[str], NoDecode] = Field(
        ["/auth/login", "/auth/register", "/auth/logout", "/health"],
        alias="AUTH_PUBLIC_PATHS",
    )
    public_prefix_match: bool = Field(False, alias="AUTH_PUBLIC_PREFIX_MATCH")
    conceal_unknown_accounts: bool = Field(False, alias="AUTH_CONCEAL_UNKNOWN_ACCOUNTS")

    model_config = _settings_config()

    @field_validator("public_paths", mode="before")
    @classmethod
    def _parse_paths(cls, value: str | list[str]) -> list[str]:
        return _split_csv(value)

    @property
    def token_lifetime(self) -> timedelta:
        return TOKEN_LIFETIME


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)

    model_config = _settings_config() | SettingsConfigDict(validate_assignment=True)

    @model_validator(mode="after")
    def _refuse_weak_production_secret(self) -> "AppConfig":
        if not self.is_production():
            return self

        secret = self.auth.jwt_secret
        if secret.lower() in _WEAK_SECRETS or len(secret) < _MIN_PRODUCTION_SECRET_LENGTH:
            sys.stderr.write(
                "\nFATAL: JWT_SECRET is too weak for APP_ENV=production.\n"
                f"Use a random value of at least {_MIN_PRODUCTION_SECRET_LENGTH} characters, e.g.\n"
                "  python -c \"import secrets; print(secrets.token_urlsafe(48))\"\n\n"
            )
            sys.exit(1)

        notes = [
            note
            for enabled, note in (
                (self.security.cookie_secure, "COOKIE_SECURE is off; the auth cookie travels over plain HTTP"),
                ("*" not in self.security.allowed_origins, "ALLOWED_ORIGINS accepts any origin"),
                (self.security.enable_hsts, "ENABLE_HSTS is off"),
            )
            if not enabled
        ]
        for note in notes:
            sys.stderr.write(f"WARNING (production): {note}\n")

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "AuthConfig",
    "DatabaseConfig",
    "SecurityConfig",
    "TOKEN_LIFETIME",
    "load_config",
]
