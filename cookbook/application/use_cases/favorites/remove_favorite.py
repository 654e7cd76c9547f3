# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.ownership import authorize_mutation
from cookbook.domain.recipes.repositories import FavoriteRepository
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class RemoveFavoriteUseCase:
    def __init__(self, favorites: FavoriteRepository) -> None:
        self._favorites = favorites

    @internal_failure_on_error("favorites.remove")
    def execute(self, recipe_id: int, user_id: int) -> Result[None]:
        authorized = authorize_mutation(
            self._favorites.find(user_id, recipe_id), user_id, resource_name="favorite"
        )
        if isinstance(authorized, Err):
            logger.info(
                f"favorites.remove: {authorized.kind} (user_id={user_id}, recipe_id={recipe_id})"
            )
            return authorized

        self._favorites.delete(authorized.value.id)
        logger.info(f"favorites.remove: ok (user_id={user_id}, recipe_id={recipe_id})")
        return Ok(None)


__all__ = ["RemoveFavoriteUseCase"]
