# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.ownership import authorize_mutation
from cookbook.domain.recipes.repositories import RecipeRepository
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class DeleteRecipeUseCase:
    def __init__(self, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    @internal_failure_on_error("recipes.delete")
    def execute(self, recipe_id: int, requester_id: int) -> Result[None]:
        authorized = authorize_mutation(
            self._recipes.get(recipe_id), requester_id, resource_name="recipe"
        )
        if isinstance(authorized, Err):
            logger.info(
                f"recipes.delete: {authorized.kind} (user_id={requester_id}, recipe_id={recipe_id})"
            )
            return authorized

        self._recipes.delete(recipe_id)
        logger.info(f"recipes.delete: ok (user_id={requester_id}, recipe_id={recipe_id})")
        return Ok(None)


__all__ = ["DeleteRecipeUseCase"]
