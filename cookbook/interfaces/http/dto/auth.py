from __future__ import annotations

import re

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from cookbook.domain.accounts.entities import AccountProfile

from .base import CamelModel

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(value: str) -> str:
    if not _EMAIL_RE.match(value):
        raise PydanticCustomError(
            "email_invalid",
            "Email must be a valid address",
            {"pattern": _EMAIL_RE.pattern},
        )
    return value


class RegisterRequestDTO(CamelModel):
    email: str = Field(min_length=3, max_length=255)
    # length policy is enforced by the registration use case
    password: str = Field(min_length=1, max_length=128)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)


class LoginRequestDTO(CamelModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)


class AccountDTO(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_profile(cls, profile: AccountProfile) -> AccountDTO:
        return cls(
            id=profile.id,
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
        )
