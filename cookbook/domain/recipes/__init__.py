# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    Category,
    Difficulty,
    Favorite,
    FavoriteDetails,
    Recipe,
    RecipeDetails,
    RecipeDraft,
    RecipeFilter,
    RecipeSort,
)
from .repositories import CategoryRepository, FavoriteRepository, RecipeRepository

__all__ = [
    "Category",
    "CategoryRepository",
    "Difficulty",
    "Favorite",
    "FavoriteDetails",
    "FavoriteRepository",
    "Recipe",
    "RecipeDetails",
    "RecipeDraft",
    "RecipeFilter",
    "RecipeRepository",
    "RecipeSort",
]
