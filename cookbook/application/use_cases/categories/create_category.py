# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.exceptions import DuplicateEntryError
from cookbook.domain.recipes.entities import Category
from cookbook.domain.recipes.repositories import CategoryRepository
from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.logging import logger
from cookbook.shared.result import Err, Ok, Result, internal_failure_on_error


class CreateCategoryUseCase:
    def __init__(self, categories: CategoryRepository) -> None:
        self._categories = categories

    @internal_failure_on_error("categories.create")
    def execute(self, name: str, description: str | None = None) -> Result[Category]:
        try:
            category = self._categories.add(name, description)
        except DuplicateEntryError:
            logger.info("categories.create: duplicate_name")
            return Err(
                ErrorKind.CONFLICT,
                message="a category with this name already exists",
                context={"name": name},
            )
        logger.info(f"categories.create: ok (category_id={category.id})")
        return Ok(category)


__all__ = ["CreateCategoryUseCase"]
