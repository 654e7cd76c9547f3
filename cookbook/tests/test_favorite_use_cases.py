from __future__ import annotations

from datetime import UTC, datetime

import pytest

from cookbook.application.use_cases.favorites.add_favorite import AddFavoriteUseCase
from cookbook.application.use_cases.favorites.list_favorites import (
    FavoriteStatusUseCase,
    ListAccountFavoritesUseCase,
    ListFavoritesUseCase,
)
from cookbook.application.use_cases.favorites.remove_favorite import RemoveFavoriteUseCase
from cookbook.domain.accounts.entities import Account
from cookbook.domain.exceptions import MissingReferenceError
from cookbook.domain.recipes.entities import Difficulty, RecipeDraft
from cookbook.shared.errors import ErrorKind
from cookbook.shared.result import Err, Ok

from conftest import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryFavoriteRepository,
    InMemoryRecipeRepository,
)


@pytest.fixture()
def owners(accounts: InMemoryAccountRepository) -> tuple[Account, Account]:
    def make(email: str) -> Account:
        return accounts.add(
            Account(
                id=0,
                email=email,
                password_hash="hashed:secret1",
                first_name="F",
                last_name="L",
                created_at=datetime.now(UTC),
            )
        )

    return make("alice@example.com"), make("bob@example.com")


@pytest.fixture()
def recipe_id(
    recipes: InMemoryRecipeRepository,
    categories: InMemoryCategoryRepository,
    owners: tuple[Account, Account],
) -> int:
    category = categories.add("Soup", None)
    details = recipes.add(
        owners[0].id,
        RecipeDraft(
            name="Minestrone",
            description=None,
            instructions="Simmer.",
            prep_time=15,
            cook_time=40,
            difficulty=Difficulty.MEDIUM,
            ingredients="beans, pasta, tomato",
            image_url="img",
            category_id=category.id,
        ),
    )
    return details.recipe.id


@pytest.fixture()
def add(
    favorites: InMemoryFavoriteRepository, recipes: InMemoryRecipeRepository
) -> AddFavoriteUseCase:
    return AddFavoriteUseCase(favorites=favorites, recipes=recipes)


def test_add_favorite_and_status(
    add: AddFavoriteUseCase,
    favorites: InMemoryFavoriteRepository,
    owners: tuple[Account, Account],
    recipe_id: int,
) -> None:
    _, bob = owners
    status = FavoriteStatusUseCase(favorites)
    assert status.execute(recipe_id, bob.id) == Ok(False)

    result = add.execute(recipe_id, bob.id)

    assert isinstance(result, Ok)
    assert result.value.favorite.user_id == bob.id
    assert result.value.recipe.recipe.name == "Minestrone"
    assert status.execute(recipe_id, bob.id) == Ok(True)


def test_add_favorite_twice_conflicts(
    add: AddFavoriteUseCase,
    favorites: InMemoryFavoriteRepository,
    owners: tuple[Account, Account],
    recipe_id: int,
) -> None:
    add.execute(recipe_id, owners[1].id)

    result = add.execute(recipe_id, owners[1].id)

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.CONFLICT
    assert len(favorites) == 1


def test_add_favorite_for_missing_recipe(
    add: AddFavoriteUseCase, owners: tuple[Account, Account]
) -> None:
    result = add.execute(404, owners[1].id)

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.NOT_FOUND


def test_remove_favorite(
    add: AddFavoriteUseCase,
    favorites: InMemoryFavoriteRepository,
    owners: tuple[Account, Account],
    recipe_id: int,
) -> None:
    alice, bob = owners
    add.execute(recipe_id, bob.id)
    remove = RemoveFavoriteUseCase(favorites)

    missing = remove.execute(recipe_id, alice.id)
    assert isinstance(missing, Err) and missing.kind is ErrorKind.NOT_FOUND
    assert len(favorites) == 1

    assert remove.execute(recipe_id, bob.id) == Ok(None)
    assert len(favorites) == 0


def test_list_favorites_for_account(
    add: AddFavoriteUseCase,
    favorites: InMemoryFavoriteRepository,
    accounts: InMemoryAccountRepository,
    owners: tuple[Account, Account],
    recipe_id: int,
) -> None:
    _, bob = owners
    add.execute(recipe_id, bob.id)

    mine = ListFavoritesUseCase(favorites).execute(bob.id)
    theirs = ListAccountFavoritesUseCase(favorites=favorites, accounts=accounts)

    assert isinstance(mine, Ok)
    assert [f.favorite.recipe_id for f in mine.value] == [recipe_id]
    assert theirs.execute(bob.id) == mine
    unknown = theirs.execute(999)
    assert isinstance(unknown, Err) and unknown.kind is ErrorKind.ACCOUNT_NOT_FOUND


def test_add_favorite_when_recipe_vanishes_before_insert(
    recipes: InMemoryRecipeRepository,
    owners: tuple[Account, Account],
    recipe_id: int,
) -> None:
    class RacingFavorites(InMemoryFavoriteRepository):
        def add(self, user_id: int, recipe_id: int):
            raise MissingReferenceError("recipe")

    result = AddFavoriteUseCase(favorites=RacingFavorites(recipes), recipes=recipes).execute(
        recipe_id, owners[1].id
    )

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.NOT_FOUND
