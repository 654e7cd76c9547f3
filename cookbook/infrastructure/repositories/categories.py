# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cookbook.domain.exceptions import DuplicateEntryError
from cookbook.domain.recipes.entities import Category as DomainCategory
from cookbook.domain.recipes.repositories import CategoryRepository
from cookbook.infrastructure.db.errors import is_unique_violation
from cookbook.infrastructure.db.models import Category
from cookbook.infrastructure.unit_of_work import unit_of_work_scope

from .mappers import to_category


class SqlAlchemyCategoryRepository(CategoryRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainCategory]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(Category).order_by(Category.name.asc()).all()
            return [to_category(row) for row in rows]

    def find_by_id(self, category_id: int) -> DomainCategory | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Category, category_id)
            return to_category(row) if row else None

    def add(self, name: str, description: str | None) -> DomainCategory:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Category(name=name, description=description)
                session.add(row)
                session.flush()
                created = to_category(row)
        except IntegrityError as exc:
            if is_unique_violation(exc, "categories.name", "ix_categories_name"):
                raise DuplicateEntryError("category", field="name") from exc
            raise
        return created
