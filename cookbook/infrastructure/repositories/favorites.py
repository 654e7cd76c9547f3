# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from cookbook.domain.exceptions import DuplicateEntryError, MissingReferenceError
from cookbook.domain.recipes.entities import Favorite as DomainFavorite
from cookbook.domain.recipes.entities import FavoriteDetails
from cookbook.domain.recipes.repositories import FavoriteRepository
from cookbook.infrastructure.db.errors import is_foreign_key_violation, is_unique_violation
from cookbook.infrastructure.db.models import Favorite, Recipe
from cookbook.infrastructure.unit_of_work import unit_of_work_scope

from .mappers import to_favorite, to_recipe_details


def _details(row: Favorite) -> FavoriteDetails:
    return FavoriteDetails(favorite=to_favorite(row), recipe=to_recipe_details(row.recipe))


class SqlAlchemyFavoriteRepository(FavoriteRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def _query(self, session: Session):
        recipe = selectinload(Favorite.recipe)
        return session.query(Favorite).options(
            recipe.selectinload(Recipe.category),
            recipe.selectinload(Recipe.author),
            recipe.selectinload(Recipe.favorites),
        )

    def list_for_user(self, user_id: int) -> Sequence[FavoriteDetails]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                self._query(session)
                .filter(Favorite.user_id == user_id)
                .order_by(Favorite.created_at.desc(), Favorite.id.desc())
                .all()
            )
            return [_details(row) for row in rows]

    def find(self, user_id: int, recipe_id: int) -> DomainFavorite | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(Favorite)
                .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
                .first()
            )
            return to_favorite(row) if row else None

    def add(self, user_id: int, recipe_id: int) -> FavoriteDetails:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Favorite(user_id=user_id, recipe_id=recipe_id)
                session.add(row)
                session.flush()
                row = self._query(session).filter(Favorite.id == row.id).one()
                created = _details(row)
        except IntegrityError as exc:
            if is_unique_violation(
                exc, "u_user_recipe", "favorites.user_id, favorites.recipe_id"
            ):
                raise DuplicateEntryError("favorite", field="recipe") from exc
            if is_foreign_key_violation(exc):
                raise MissingReferenceError("recipe") from exc
            raise
        return created

    def delete(self, favorite_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.query(Favorite).filter(Favorite.id == favorite_id).delete()
