# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Read-only recipe queries."""

from __future__ import annotations

from cookbook.domain.recipes.entities import RecipeDetails, RecipeFilter
from cookbook.domain.recipes.repositories import RecipeRepository
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class ListRecipesUseCase:
    def __init__(self, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    @internal_failure_on_error("recipes.list")
    def execute(self, filters: RecipeFilter) -> Result[list[RecipeDetails]]:
        return Ok(list(self._recipes.find_all(filters)))


class GetRecipeUseCase:
    def __init__(self, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    @internal_failure_on_error("recipes.get")
    def execute(self, recipe_id: int) -> Result[RecipeDetails]:
        details = self._recipes.get(recipe_id)
        if details is None:
            return Err(ErrorKind.NOT_FOUND, message="recipe not found")
        return Ok(details)


class SearchRecipesUseCase:
    def __init__(self, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    @internal_failure_on_error("recipes.search")
    def execute(self, text: str) -> Result[list[RecipeDetails]]:
        text = text.strip()
        if not text:
            return Ok([])
        return Ok(list(self._recipes.search(text)))


class ListAccountRecipesUseCase:
    def __init__(self, recipes: RecipeRepository) -> None:
        self._recipes = recipes

    @internal_failure_on_error("recipes.by_user")
    def execute(self, user_id: int) -> Result[list[RecipeDetails]]:
        return Ok(list(self._recipes.list_for_user(user_id)))


__all__ = [
    "GetRecipeUseCase",
    "ListAccountRecipesUseCase",
    "ListRecipesUseCase",
    "SearchRecipesUseCase",
]
