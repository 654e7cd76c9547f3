# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Row to domain conversions shared by the SQLAlchemy repositories."""

from __future__ import annotations

from sqlalchemy.orm import selectinload

from cookbook.domain.accounts.entities import Account as DomainAccount
from cookbook.domain.accounts.entities import AccountProfile
from cookbook.domain.recipes.entities import Category as DomainCategory
from cookbook.domain.recipes.entities import Favorite as DomainFavorite
from cookbook.domain.recipes.entities import Recipe as DomainRecipe
from cookbook.domain.recipes.entities import RecipeDetails
from cookbook.infrastructure.db.models import Category, Favorite, Recipe, User


def recipe_load_options() -> tuple:
    return (
        selectinload(Recipe.category),
        selectinload(Recipe.author),
        selectinload(Recipe.favorites),
    )


def to_account(row: User) -> DomainAccount:
    return DomainAccount(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        created_at=row.created_at,
    )


def to_profile(row: User) -> AccountProfile:
    return to_account(row).profile()


def to_category(row: Category) -> DomainCategory:
    return DomainCategory(
        id=row.id,
        name=row.name,
        description=row.description,
        created_at=row.created_at,
    )


def to_recipe_details(row: Recipe) -> RecipeDetails:
    recipe = DomainRecipe(
        id=row.id,
        name=row.name,
        description=row.description,
        instructions=row.instructions,
        prep_time=row.prep_time,
        cook_time=row.cook_time,
        difficulty=row.difficulty,
        ingredients=row.ingredients,
        image_url=row.image_url,
        user_id=row.user_id,
        category_id=row.category_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
    return RecipeDetails(
        recipe=recipe,
        category=to_category(row.category) if row.category is not None else None,
        author=to_profile(row.author) if row.author is not None else None,
        favorites_count=len(row.favorites),
    )


def to_favorite(row: Favorite) -> DomainFavorite:
    return DomainFavorite(
        id=row.id,
        user_id=row.user_id,
        recipe_id=row.recipe_id,
        created_at=row.created_at,
    )
