# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import (
    Category,
    Favorite,
    FavoriteDetails,
    RecipeDetails,
    RecipeDraft,
    RecipeFilter,
)


class CategoryRepository(Protocol):
    def list_all(self) -> Sequence[Category]: ...
    def find_by_id(self, category_id: int) -> Category | None: ...
    def add(self, name: str, description: str | None) -> Category: ...


class RecipeRepository(Protocol):
    def find_all(self, filters: RecipeFilter) -> Sequence[RecipeDetails]: ...
    def search(self, text: str) -> Sequence[RecipeDetails]: ...
    def list_for_user(self, user_id: int) -> Sequence[RecipeDetails]: ...
    def get(self, recipe_id: int) -> RecipeDetails | None: ...
    def add(self, user_id: int, draft: RecipeDraft) -> RecipeDetails: ...
    def update(self, recipe_id: int, changes: Mapping[str, Any]) -> RecipeDetails: ...
    def delete(self, recipe_id: int) -> None: ...


class FavoriteRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[FavoriteDetails]: ...
    def find(self, user_id: int, recipe_id: int) -> Favorite | None: ...
    def add(self, user_id: int, recipe_id: int) -> FavoriteDetails: ...
    def delete(self, favorite_id: int) -> None: ...
