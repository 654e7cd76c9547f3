# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from cookbook.application.use_cases.categories.create_category import CreateCategoryUseCase
from cookbook.application.use_cases.categories.list_categories import ListCategoriesUseCase
from cookbook.interfaces.http.dto.categories import CategoryCreateDTO, CategoryDTO
from cookbook.shared.errors.validation import raise_validation_error
from cookbook.shared.result import unwrap


class CategoriesController:
    def __init__(
        self,
        *,
        list_categories: ListCategoriesUseCase,
        create_category: CreateCategoryUseCase,
    ) -> None:
        self._list_categories = list_categories
        self._create_category = create_category

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("categories", __name__, url_prefix="/categories")
        bp.add_url_rule("", view_func=self.list_all, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        return bp

    def list_all(self):
        items = unwrap(self._list_categories.execute())
        return jsonify([CategoryDTO.from_entity(item).to_json() for item in items])

    def create(self):
        try:
            dto = CategoryCreateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        category = unwrap(self._create_category.execute(dto.name, dto.description))
        return jsonify(CategoryDTO.from_entity(category).to_json()), 201
