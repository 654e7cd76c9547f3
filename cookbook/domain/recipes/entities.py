# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from cookbook.domain.accounts.entities import AccountProfile


class Difficulty(StrEnum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class RecipeSort(StrEnum):
    CREATED_AT = "createdAt"
    NAME = "name"
    PREP_TIME = "prepTime"
    COOK_TIME = "cookTime"


@dataclass(slots=True, frozen=True)
class Category:

    id: int
    name: str
    description: str | None
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Recipe:

    id: int
    name: str
    description: str | None
    instructions: str
    prep_time: int
    cook_time: int
    difficulty: Difficulty
    ingredients: str
    image_url: str
    user_id: int
    category_id: int
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class RecipeDraft:

    name: str
    description: str | None
    instructions: str
    prep_time: int
    cook_time: int
    difficulty: Difficulty
    ingredients: str
    image_url: str
    category_id: int


@dataclass(slots=True, frozen=True)
class RecipeDetails:

    recipe: Recipe
    category: Category | None
    author: AccountProfile | None
    favorites_count: int = 0

    @property
    def user_id(self) -> int:
        return self.recipe.user_id


@dataclass(slots=True, frozen=True)
class RecipeFilter:

    difficulty: Difficulty | None = None
    category_id: int | None = None
    ingredients: str | None = None
    sort_by: RecipeSort = RecipeSort.CREATED_AT


@dataclass(slots=True, frozen=True)
class Favorite:

    id: int
    user_id: int
    recipe_id: int
    created_at: datetime


@dataclass(slots=True, frozen=True)
class FavoriteDetails:

    favorite: Favorite
    recipe: RecipeDetails
