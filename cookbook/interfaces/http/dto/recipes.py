from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from cookbook.domain.recipes.entities import (
    Difficulty,
    RecipeDetails,
    RecipeDraft,
    RecipeFilter,
    RecipeSort,
)

from .auth import AccountDTO
from .base import CamelModel
from .categories import CategoryDTO


class RecipeCreateDTO(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    instructions: str = Field(min_length=1)
    prep_time: int = Field(ge=0)
    cook_time: int = Field(ge=0)
    difficulty: Difficulty
    ingredients: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    category_id: int = Field(ge=1)

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(**self.model_dump())


class RecipeUpdateDTO(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    instructions: str | None = Field(default=None, min_length=1)
    prep_time: int | None = Field(default=None, ge=0)
    cook_time: int | None = Field(default=None, ge=0)
    difficulty: Difficulty | None = None
    ingredients: str | None = Field(default=None, min_length=1)
    image_url: str | None = Field(default=None, min_length=1)
    category_id: int | None = Field(default=None, ge=1)

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent; ``description`` alone may be cleared with null."""
        sent = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in sent.items()
            if value is not None or key == "description"
        }


class RecipeFilterDTO(CamelModel):
    difficulty: Difficulty | None = None
    category_id: int | None = Field(default=None, ge=1)
    ingredients: str | None = None
    sort_by: RecipeSort = RecipeSort.CREATED_AT

    def to_filter(self) -> RecipeFilter:
        return RecipeFilter(
            difficulty=self.difficulty,
            category_id=self.category_id,
            ingredients=self.ingredients or None,
            sort_by=self.sort_by,
        )


class RecipeDTO(CamelModel):
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
    category: CategoryDTO | None = None
    author: AccountDTO | None = None
    favorites_count: int = 0

    @classmethod
    def from_details(cls, details: RecipeDetails) -> RecipeDTO:
        recipe = details.recipe
        return cls(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            instructions=recipe.instructions,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            difficulty=recipe.difficulty,
            ingredients=recipe.ingredients,
            image_url=recipe.image_url,
            user_id=recipe.user_id,
            category_id=recipe.category_id,
            created_at=recipe.created_at,
            updated_at=recipe.updated_at,
            category=CategoryDTO.from_entity(details.category) if details.category else None,
            author=AccountDTO.from_profile(details.author) if details.author else None,
            favorites_count=details.favorites_count,
        )
