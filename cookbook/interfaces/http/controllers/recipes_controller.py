# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from cookbook.application.use_cases.recipes.browse_recipes import (
    GetRecipeUseCase,
    ListRecipesUseCase,
    SearchRecipesUseCase,
)
from cookbook.application.use_cases.recipes.create_recipe import CreateRecipeUseCase
from cookbook.application.use_cases.recipes.delete_recipe import DeleteRecipeUseCase
from cookbook.application.use_cases.recipes.update_recipe import UpdateRecipeUseCase
from cookbook.interfaces.http.dto.base import MessageDTO
from cookbook.interfaces.http.dto.recipes import (
    RecipeCreateDTO,
    RecipeDTO,
    RecipeFilterDTO,
    RecipeUpdateDTO,
)
from cookbook.shared.errors.validation import raise_validation_error
from cookbook.shared.logging import logger
from cookbook.shared.middleware.auth_guard import current_account
from cookbook.shared.result import unwrap


class RecipesController:
    def __init__(
        self,
        *,
        list_recipes: ListRecipesUseCase,
        get_recipe: GetRecipeUseCase,
        search_recipes: SearchRecipesUseCase,
        create_recipe: CreateRecipeUseCase,
        update_recipe: UpdateRecipeUseCase,
        delete_recipe: DeleteRecipeUseCase,
    ) -> None:
        self._list_recipes = list_recipes
        self._get_recipe = get_recipe
        self._search_recipes = search_recipes
        self._create_recipe = create_recipe
        self._update_recipe = update_recipe
        self._delete_recipe = delete_recipe

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("recipes", __name__, url_prefix="/recipes")
        bp.add_url_rule("", view_func=self.list_all, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/search/<string:text>", view_func=self.search, methods=["GET"])
        bp.add_url_rule("/<int:recipe_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<int:recipe_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<int:recipe_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_all(self):
        t0 = perf_counter()
        try:
            dto = RecipeFilterDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        items = unwrap(self._list_recipes.execute(dto.to_filter()))
        dt = (perf_counter() - t0) * 1000
        logger.info(f"recipes.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([RecipeDTO.from_details(item).to_json() for item in items])

    def search(self, text: str):
        items = unwrap(self._search_recipes.execute(text))
        return jsonify([RecipeDTO.from_details(item).to_json() for item in items])

    def get(self, recipe_id: int):
        details = unwrap(self._get_recipe.execute(recipe_id))
        return jsonify(RecipeDTO.from_details(details).to_json())

    def create(self):
        try:
            dto = RecipeCreateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        details = unwrap(self._create_recipe.execute(current_account().id, dto.to_draft()))
        return jsonify(RecipeDTO.from_details(details).to_json()), 201

    def update(self, recipe_id: int):
        try:
            dto = RecipeUpdateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        details = unwrap(
            self._update_recipe.execute(recipe_id, dto.changes(), current_account().id)
        )
        return jsonify(RecipeDTO.from_details(details).to_json())

    def delete(self, recipe_id: int):
        unwrap(self._delete_recipe.execute(recipe_id, current_account().id))
        return jsonify(MessageDTO(message="Recipe deleted successfully").to_json())
