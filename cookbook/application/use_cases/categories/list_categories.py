# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cookbook.domain.recipes.entities import Category
from cookbook.domain.recipes.repositories import CategoryRepository
from cookbook.shared.result import Ok, Result, internal_failure_on_error


class ListCategoriesUseCase:
    def __init__(self, categories: CategoryRepository) -> None:
        self._categories = categories

    @internal_failure_on_error("categories.list")
    def execute(self) -> Result[list[Category]]:
        return Ok(list(self._categories.list_all()))


__all__ = ["ListCategoriesUseCase"]
