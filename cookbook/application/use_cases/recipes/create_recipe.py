# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.recipes.entities import RecipeDetails, RecipeDraft
from cookbook.domain.recipes.repositories import CategoryRepository, RecipeRepository
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class CreateRecipeUseCase:
    def __init__(
        self, *, recipes: RecipeRepository, categories: CategoryRepository
    ) -> None:
        self._recipes = recipes
        self._categories = categories

    @internal_failure_on_error("recipes.create")
    def execute(self, user_id: int, draft: RecipeDraft) -> Result[RecipeDetails]:
        if self._categories.find_by_id(draft.category_id) is None:
            return Err(
                ErrorKind.NOT_FOUND,
                message="category not found",
                context={"category_id": draft.category_id},
            )
        details = self._recipes.add(user_id, draft)
        logger.info(f"recipes.create: ok (user_id={user_id}, recipe_id={details.recipe.id})")
        return Ok(details)


__all__ = ["CreateRecipeUseCase"]
