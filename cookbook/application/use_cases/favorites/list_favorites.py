# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.accounts.repositories import AccountRepository
from cookbook.domain.recipes.entities import FavoriteDetails
from cookbook.domain.recipes.repositories import FavoriteRepository
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class ListFavoritesUseCase:
    def __init__(self, favorites: FavoriteRepository) -> None:
        self._favorites = favorites

    @internal_failure_on_error("favorites.list")
    def execute(self, user_id: int) -> Result[list[FavoriteDetails]]:
        return Ok(list(self._favorites.list_for_user(user_id)))


class ListAccountFavoritesUseCase:
    def __init__(
        self, *, favorites: FavoriteRepository, accounts: AccountRepository
    ) -> None:
        self._favorites = favorites
        self._accounts = accounts

    @internal_failure_on_error("favorites.by_user")
    def execute(self, user_id: int) -> Result[list[FavoriteDetails]]:
        if self._accounts.find_by_id(user_id) is None:
            return Err(
                ErrorKind.ACCOUNT_NOT_FOUND,
                message="account not found",
                context={"user_id": user_id},
            )
        return Ok(list(self._favorites.list_for_user(user_id)))


class FavoriteStatusUseCase:
    def __init__(self, favorites: FavoriteRepository) -> None:
        self._favorites = favorites

    @internal_failure_on_error("favorites.status")
    def execute(self, recipe_id: int, user_id: int) -> Result[bool]:
        return Ok(self._favorites.find(user_id, recipe_id) is not None)


__all__ = [
    "FavoriteStatusUseCase",
    "ListAccountFavoritesUseCase",
    "ListFavoritesUseCase",
]
