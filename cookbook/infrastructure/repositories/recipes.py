# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from cookbook.domain.recipes.entities import (
    RecipeDetails,
    RecipeDraft,
    RecipeFilter,
    RecipeSort,
)
from cookbook.domain.recipes.repositories import RecipeRepository
from cookbook.infrastructure.db.models import Recipe
from cookbook.infrastructure.unit_of_work import unit_of_work_scope

from .mappers import recipe_load_options, to_recipe_details

_SORT_COLUMNS = {
    RecipeSort.NAME: Recipe.name,
    RecipeSort.PREP_TIME: Recipe.prep_time,
    RecipeSort.COOK_TIME: Recipe.cook_time,
}

_UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "instructions",
        "prep_time",
        "cook_time",
        "difficulty",
        "ingredients",
        "image_url",
        "category_id",
    }
)


def _newest_first(query: Query) -> Query:
    return query.order_by(Recipe.created_at.desc(), Recipe.id.desc())


class SqlAlchemyRecipeRepository(RecipeRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def _query(self, session: Session) -> Query:
        return session.query(Recipe).options(*recipe_load_options())

    def find_all(self, filters: RecipeFilter) -> Sequence[RecipeDetails]:
        with unit_of_work_scope(self._session_factory) as session:
            query = self._query(session)
            if filters.difficulty is not None:
                query = query.filter(Recipe.difficulty == filters.difficulty)
            if filters.category_id is not None:
                query = query.filter(Recipe.category_id == filters.category_id)
            if filters.ingredients:
                query = query.filter(
                    Recipe.ingredients.icontains(filters.ingredients, autoescape=True)
                )

            column = _SORT_COLUMNS.get(filters.sort_by)
            if column is None:
                query = _newest_first(query)
            else:
                query = query.order_by(column.asc(), Recipe.id.asc())
            return [to_recipe_details(row) for row in query.all()]

    def search(self, text: str) -> Sequence[RecipeDetails]:
        with unit_of_work_scope(self._session_factory) as session:
            query = self._query(session).filter(
                or_(
                    Recipe.name.icontains(text, autoescape=True),
                    Recipe.description.icontains(text, autoescape=True),
                    Recipe.ingredients.icontains(text, autoescape=True),
                )
            )
            return [to_recipe_details(row) for row in _newest_first(query).all()]

    def list_for_user(self, user_id: int) -> Sequence[RecipeDetails]:
        with unit_of_work_scope(self._session_factory) as session:
            query = self._query(session).filter(Recipe.user_id == user_id)
            return [to_recipe_details(row) for row in _newest_first(query).all()]

    def get(self, recipe_id: int) -> RecipeDetails | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._query(session).filter(Recipe.id == recipe_id).first()
            return to_recipe_details(row) if row else None

    def add(self, user_id: int, draft: RecipeDraft) -> RecipeDetails:
        with unit_of_work_scope(self._session_factory) as session:
            row = Recipe(
                name=draft.name,
                description=draft.description,
                instructions=draft.instructions,
                prep_time=draft.prep_time,
                cook_time=draft.cook_time,
                difficulty=draft.difficulty,
                ingredients=draft.ingredients,
                image_url=draft.image_url,
                user_id=user_id,
                category_id=draft.category_id,
            )
            session.add(row)
            session.flush()
            row = self._query(session).filter(Recipe.id == row.id).one()
            return to_recipe_details(row)

    def update(self, recipe_id: int, changes: Mapping[str, Any]) -> RecipeDetails:
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"unsupported recipe fields: {sorted(unknown)}")

        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Recipe, recipe_id)
            if row is None:
                raise LookupError(f"recipe {recipe_id} does not exist")
            for name, value in changes.items():
                setattr(row, name, value)
            session.flush()
            # category relationship may be stale after category_id changed
            session.expire(row)
            row = self._query(session).filter(Recipe.id == recipe_id).one()
            return to_recipe_details(row)

    def delete(self, recipe_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Recipe, recipe_id)
            if row is not None:
                session.delete(row)
