# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from cookbook.application.use_cases.recipes.browse_recipes import ListAccountRecipesUseCase
from cookbook.application.use_cases.users.get_account import GetAccountByEmailUseCase
from cookbook.interfaces.http.dto.auth import AccountDTO
from cookbook.interfaces.http.dto.recipes import RecipeDTO
from cookbook.shared.middleware.auth_guard import current_account
from cookbook.shared.result import unwrap


class UsersController:
    def __init__(
        self,
        *,
        get_by_email: GetAccountByEmailUseCase,
        list_recipes: ListAccountRecipesUseCase,
    ) -> None:
        self._get_by_email = get_by_email
        self._list_recipes = list_recipes

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("", view_func=self.me, methods=["GET"])
        bp.add_url_rule("/email/<string:email>", view_func=self.by_email, methods=["GET"])
        bp.add_url_rule("/<int:user_id>/recipes", view_func=self.recipes, methods=["GET"])
        return bp

    def me(self):
        return jsonify(AccountDTO.from_profile(current_account()).to_json())

    def by_email(self, email: str):
        profile = unwrap(self._get_by_email.execute(email))
        return jsonify(AccountDTO.from_profile(profile).to_json())

    def recipes(self, user_id: int):
        items = unwrap(self._list_recipes.execute(user_id))
        return jsonify([RecipeDTO.from_details(item).to_json() for item in items])
