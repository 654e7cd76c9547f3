from __future__ import annotations

from datetime import datetime

from cookbook.domain.recipes.entities import FavoriteDetails

from .base import CamelModel
from .recipes import RecipeDTO


class FavoriteDTO(CamelModel):
    id: int
    user_id: int
    recipe_id: int
    created_at: datetime
    recipe: RecipeDTO

    @classmethod
    def from_details(cls, details: FavoriteDetails) -> FavoriteDTO:
        favorite = details.favorite
        return cls(
            id=favorite.id,
            user_id=favorite.user_id,
            recipe_id=favorite.recipe_id,
            created_at=favorite.created_at,
            recipe=RecipeDTO.from_details(details.recipe),
        )


class FavoriteStatusDTO(CamelModel):
    is_favorite: bool
