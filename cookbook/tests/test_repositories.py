from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from cookbook.domain.accounts.entities import Account
from cookbook.domain.exceptions import DuplicateEntryError, MissingReferenceError
from cookbook.domain.recipes.entities import Difficulty, RecipeDraft
from cookbook.infrastructure.db import build_engine, build_session_factory, init_db
from cookbook.infrastructure.db.errors import is_foreign_key_violation, is_unique_violation
from cookbook.infrastructure.repositories.accounts import SqlAlchemyAccountRepository
from cookbook.infrastructure.repositories.categories import SqlAlchemyCategoryRepository
from cookbook.infrastructure.repositories.favorites import SqlAlchemyFavoriteRepository
from cookbook.infrastructure.repositories.recipes import SqlAlchemyRecipeRepository
from cookbook.shared.config import DatabaseConfig


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = build_engine(DatabaseConfig(url="sqlite://"))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def repos(engine: Engine):
    factory = build_session_factory(engine)
    return (
        SqlAlchemyAccountRepository(factory),
        SqlAlchemyCategoryRepository(factory),
        SqlAlchemyRecipeRepository(factory),
        SqlAlchemyFavoriteRepository(factory),
    )


def _account(email: str) -> Account:
    return Account(
        id=0,
        email=email,
        password_hash="hashed",
        first_name="F",
        last_name="L",
        created_at=datetime.now(UTC),
    )


def _draft(category_id: int) -> RecipeDraft:
    return RecipeDraft(
        name="Ramen",
        description=None,
        instructions="Boil.",
        prep_time=10,
        cook_time=20,
        difficulty=Difficulty.HARD,
        ingredients="noodles, broth",
        image_url="img",
        category_id=category_id,
    )


def test_duplicate_email_is_duplicate_entry(repos) -> None:
    accounts = repos[0]
    accounts.add(_account("a@example.com"))

    with pytest.raises(DuplicateEntryError):
        accounts.add(_account("a@example.com"))


def test_duplicate_category_name_is_duplicate_entry(repos) -> None:
    categories = repos[1]
    categories.add("Soup", None)

    with pytest.raises(DuplicateEntryError):
        categories.add("Soup", "again")


def test_duplicate_favorite_is_duplicate_entry(repos) -> None:
    accounts, categories, recipes, favorites = repos
    user = accounts.add(_account("a@example.com"))
    recipe = recipes.add(user.id, _draft(categories.add("Noodles", None).id))
    favorites.add(user.id, recipe.recipe.id)

    with pytest.raises(DuplicateEntryError):
        favorites.add(user.id, recipe.recipe.id)


def test_favorite_for_unknown_recipe_is_missing_reference(repos) -> None:
    accounts, _, _, favorites = repos
    user = accounts.add(_account("a@example.com"))

    with pytest.raises(MissingReferenceError):
        favorites.add(user.id, 999)

    assert favorites.list_for_user(user.id) == []


class _DriverError(Exception):
    def __init__(self, message: str, pgcode: str | None = None) -> None:
        super().__init__(message)
        self.pgcode = pgcode


def _integrity(message: str, pgcode: str | None = None) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, _DriverError(message, pgcode))


@pytest.mark.parametrize(
    ("exc", "unique", "foreign_key"),
    [
        (_integrity("UNIQUE constraint failed: users.email"), True, False),
        (_integrity("FOREIGN KEY constraint failed"), False, True),
        (_integrity("NOT NULL constraint failed: users.email"), False, False),
        (
            _integrity('duplicate key value violates unique constraint "ix_users_email"', "23505"),
            True,
            False,
        ),
        (
            _integrity('insert violates foreign key constraint "favorites_recipe_id_fkey"', "23503"),
            False,
            True,
        ),
    ],
)
def test_integrity_error_classification(
    exc: IntegrityError, unique: bool, foreign_key: bool
) -> None:
    assert is_unique_violation(exc, "users.email", "ix_users_email") is unique
    assert is_foreign_key_violation(exc) is foreign_key


def test_unique_violation_on_another_constraint_is_not_matched() -> None:
    exc = _integrity("UNIQUE constraint failed: categories.name")

    assert not is_unique_violation(exc, "users.email", "ix_users_email")
