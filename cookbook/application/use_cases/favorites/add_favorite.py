# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.exceptions import DuplicateEntryError, MissingReferenceError
from cookbook.domain.recipes.entities import FavoriteDetails
from cookbook.domain.recipes.repositories import FavoriteRepository, RecipeRepository
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class AddFavoriteUseCase:
    def __init__(
        self, *, favorites: FavoriteRepository, recipes: RecipeRepository
    ) -> None:
        self._favorites = favorites
        self._recipes = recipes

    @internal_failure_on_error("favorites.add")
    def execute(self, recipe_id: int, user_id: int) -> Result[FavoriteDetails]:
        if self._recipes.get(recipe_id) is None:
            return Err(ErrorKind.NOT_FOUND, message="recipe not found")

        try:
            details = self._favorites.add(user_id, recipe_id)
        except DuplicateEntryError:
            return Err(
                ErrorKind.CONFLICT,
                message="this recipe is already in your favorites",
                context={"recipe_id": recipe_id},
            )
        except MissingReferenceError:
            # recipe deleted between the lookup and the insert
            return Err(ErrorKind.NOT_FOUND, message="recipe not found")
        logger.info(f"favorites.add: ok (user_id={user_id}, recipe_id={recipe_id})")
        return Ok(details)


__all__ = ["AddFavoriteUseCase"]
