# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cookbook.domain.ownership import authorize_mutation
from cookbook.domain.recipes.entities import RecipeDetails
from cookbook.domain.recipes.repositories import CategoryRepository, RecipeRepository
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class UpdateRecipeUseCase:
    def __init__(
        self, *, recipes: RecipeRepository, categories: CategoryRepository
    ) -> None:
        self._recipes = recipes
        self._categories = categories

    @internal_failure_on_error("recipes.update")
    def execute(
        self, recipe_id: int, changes: Mapping[str, Any], requester_id: int
    ) -> Result[RecipeDetails]:
        authorized = authorize_mutation(
            self._recipes.get(recipe_id), requester_id, resource_name="recipe"
        )
        if isinstance(authorized, Err):
            logger.info(
                f"recipes.update: {authorized.kind} (user_id={requester_id}, recipe_id={recipe_id})"
            )
            return authorized

        category_id = changes.get("category_id")
        if category_id is not None and self._categories.find_by_id(category_id) is None:
            return Err(
                ErrorKind.NOT_FOUND,
                message="category not found",
                context={"category_id": category_id},
            )

        if not changes:
            return Ok(authorized.value)

        details = self._recipes.update(recipe_id, changes)
        logger.info(
            f"recipes.update: ok (user_id={requester_id}, recipe_id={recipe_id}, "
            f"fields={sorted(changes)})"
        )
        return Ok(details)


__all__ = ["UpdateRecipeUseCase"]
