from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
from flask import Flask
from flask.testing import FlaskClient

from cookbook.app import create_app
from cookbook.domain.accounts.entities import Account
from cookbook.domain.accounts.repositories import AccountRepository, PasswordHasher
from cookbook.domain.exceptions import DuplicateEntryError
from cookbook.domain.recipes.entities import (
    Category,
    Favorite,
    FavoriteDetails,
    Recipe,
    RecipeDetails,
    RecipeDraft,
    RecipeFilter,
    RecipeSort,
)
from cookbook.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "test-signing-secret-0123456789-abcdefghij"


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> Account | None:
        return self._accounts.get(email)

    def find_by_id(self, account_id: int) -> Account | None:
        return next((a for a in self._accounts.values() if a.id == account_id), None)

    def add(self, account: Account) -> Account:
        if account.email in self._accounts:
            raise DuplicateEntryError("account", field="email")
        created = replace(account, id=self._seq)
        self._seq += 1
        self._accounts[created.email] = created
        return created

    def __len__(self) -> int:
        return len(self._accounts)


class InMemoryCategoryRepository:
    def __init__(self) -> None:
        self._categories: dict[int, Category] = {}
        self._seq = 1

    def list_all(self) -> list[Category]:
        return sorted(self._categories.values(), key=lambda c: c.name)

    def find_by_id(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def add(self, name: str, description: str | None) -> Category:
        if any(c.name == name for c in self._categories.values()):
            raise DuplicateEntryError("category", field="name")
        category = Category(
            id=self._seq, name=name, description=description, created_at=datetime.now(UTC)
        )
        self._seq += 1
        self._categories[category.id] = category
        return category


class InMemoryRecipeRepository:
    def __init__(
        self, accounts: InMemoryAccountRepository, categories: InMemoryCategoryRepository
    ) -> None:
        self._accounts = accounts
        self._categories = categories
        self._recipes: dict[int, Recipe] = {}
        self._seq = 1
        self.favorites_count: dict[int, int] = {}

    def _details(self, recipe: Recipe) -> RecipeDetails:
        author = self._accounts.find_by_id(recipe.user_id)
        return RecipeDetails(
            recipe=recipe,
            category=self._categories.find_by_id(recipe.category_id),
            author=author.profile() if author else None,
            favorites_count=self.favorites_count.get(recipe.id, 0),
        )

    def _newest_first(self, recipes) -> list[RecipeDetails]:
        ordered = sorted(recipes, key=lambda r: (r.created_at, r.id), reverse=True)
        return [self._details(r) for r in ordered]

    def find_all(self, filters: RecipeFilter) -> list[RecipeDetails]:
        items = list(self._recipes.values())
        if filters.difficulty is not None:
            items = [r for r in items if r.difficulty == filters.difficulty]
        if filters.category_id is not None:
            items = [r for r in items if r.category_id == filters.category_id]
        if filters.ingredients:
            needle = filters.ingredients.lower()
            items = [r for r in items if needle in r.ingredients.lower()]
        if filters.sort_by is RecipeSort.CREATED_AT:
            return self._newest_first(items)
        key = {
            RecipeSort.NAME: lambda r: r.name,
            RecipeSort.PREP_TIME: lambda r: r.prep_time,
            RecipeSort.COOK_TIME: lambda r: r.cook_time,
        }[filters.sort_by]
        return [self._details(r) for r in sorted(items, key=key)]

    def search(self, text: str) -> list[RecipeDetails]:
        needle = text.lower()
        return self._newest_first(
            r
            for r in self._recipes.values()
            if needle in r.name.lower()
            or needle in (r.description or "").lower()
            or needle in r.ingredients.lower()
        )

    def list_for_user(self, user_id: int) -> list[RecipeDetails]:
        return self._newest_first(r for r in self._recipes.values() if r.user_id == user_id)

    def get(self, recipe_id: int) -> RecipeDetails | None:
        recipe = self._recipes.get(recipe_id)
        return self._details(recipe) if recipe else None

    def add(self, user_id: int, draft: RecipeDraft) -> RecipeDetails:
        now = datetime.now(UTC) + timedelta(microseconds=self._seq)
        recipe = Recipe(
            id=self._seq,
            user_id=user_id,
            created_at=now,
            updated_at=now,
            name=draft.name,
            description=draft.description,
            instructions=draft.instructions,
            prep_time=draft.prep_time,
            cook_time=draft.cook_time,
            difficulty=draft.difficulty,
            ingredients=draft.ingredients,
            image_url=draft.image_url,
            category_id=draft.category_id,
        )
        self._seq += 1
        self._recipes[recipe.id] = recipe
        return self._details(recipe)

    def update(self, recipe_id: int, changes: Mapping[str, Any]) -> RecipeDetails:
        recipe = replace(self._recipes[recipe_id], **changes, updated_at=datetime.now(UTC))
        self._recipes[recipe_id] = recipe
        return self._details(recipe)

    def delete(self, recipe_id: int) -> None:
        self._recipes.pop(recipe_id, None)

    def __contains__(self, recipe_id: int) -> bool:
        return recipe_id in self._recipes


class InMemoryFavoriteRepository:
    def __init__(self, recipes: InMemoryRecipeRepository) -> None:
        self._recipes = recipes
        self._favorites: dict[int, Favorite] = {}
        self._seq = 1

    def list_for_user(self, user_id: int) -> list[FavoriteDetails]:
        return [
            FavoriteDetails(favorite=f, recipe=self._recipes.get(f.recipe_id))
            for f in self._favorites.values()
            if f.user_id == user_id
        ]

    def find(self, user_id: int, recipe_id: int) -> Favorite | None:
        return next(
            (
                f
                for f in self._favorites.values()
                if f.user_id == user_id and f.recipe_id == recipe_id
            ),
            None,
        )

    def add(self, user_id: int, recipe_id: int) -> FavoriteDetails:
        if self.find(user_id, recipe_id) is not None:
            raise DuplicateEntryError("favorite", field="recipe")
        favorite = Favorite(
            id=self._seq, user_id=user_id, recipe_id=recipe_id, created_at=datetime.now(UTC)
        )
        self._seq += 1
        self._favorites[favorite.id] = favorite
        return FavoriteDetails(favorite=favorite, recipe=self._recipes.get(recipe_id))

    def delete(self, favorite_id: int) -> None:
        self._favorites.pop(favorite_id, None)

    def __len__(self) -> int:
        return len(self._favorites)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def accounts() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture()
def categories() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()


@pytest.fixture()
def recipes(
    accounts: InMemoryAccountRepository, categories: InMemoryCategoryRepository
) -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository(accounts, categories)


@pytest.fixture()
def favorites(recipes: InMemoryRecipeRepository) -> InMemoryFavoriteRepository:
    return InMemoryFavoriteRepository(recipes)


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        log_level="WARNING",
        log_file=tmp_path / "app.log",
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'cookbook.db'}"),
        security=SecurityConfig(enable_rate_limit=False),
        auth=AuthConfig(jwt_secret=TEST_SECRET),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    app = create_app(app_config)
    app.config.update(TESTING=True)
    yield app
    app.extensions["cookbook.container"].engine.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
