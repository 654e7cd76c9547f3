from __future__ import annotations

from datetime import datetime

from pydantic import Field

from cookbook.domain.recipes.entities import Category

from .base import CamelModel


class CategoryCreateDTO(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)


class CategoryDTO(CamelModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, category: Category) -> CategoryDTO:
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            created_at=category.created_at,
        )
