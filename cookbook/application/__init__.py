# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.auth.login_account import LoginAccountUseCase
from .use_cases.auth.register_account import MIN_PASSWORD_LENGTH, RegisterAccountUseCase
from .use_cases.auth.resolve_token import ResolveTokenUseCase

__all__ = [
    "LoginAccountUseCase",
    "MIN_PASSWORD_LENGTH",
    "RegisterAccountUseCase",
    "ResolveTokenUseCase",
]
