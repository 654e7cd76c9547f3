# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from cookbook.application.use_cases.favorites.add_favorite import AddFavoriteUseCase
from cookbook.application.use_cases.favorites.list_favorites import (
    FavoriteStatusUseCase,
    ListAccountFavoritesUseCase,
    ListFavoritesUseCase,
)
from cookbook.application.use_cases.favorites.remove_favorite import RemoveFavoriteUseCase
from cookbook.interfaces.http.dto.base import MessageDTO
from cookbook.interfaces.http.dto.favorites import FavoriteDTO, FavoriteStatusDTO
from cookbook.shared.middleware.auth_guard import current_account
from cookbook.shared.result import unwrap


class FavoritesController:
    def __init__(
        self,
        *,
        list_favorites: ListFavoritesUseCase,
        list_account_favorites: ListAccountFavoritesUseCase,
        favorite_status: FavoriteStatusUseCase,
        add_favorite: AddFavoriteUseCase,
        remove_favorite: RemoveFavoriteUseCase,
    ) -> None:
        self._list_favorites = list_favorites
        self._list_account_favorites = list_account_favorites
        self._favorite_status = favorite_status
        self._add_favorite = add_favorite
        self._remove_favorite = remove_favorite

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("favorites", __name__, url_prefix="/favorites")
        bp.add_url_rule("", view_func=self.list_mine, methods=["GET"])
        bp.add_url_rule("/user/<int:user_id>", view_func=self.list_for_user, methods=["GET"])
        bp.add_url_rule("/<int:recipe_id>/status", view_func=self.status, methods=["GET"])
        bp.add_url_rule("/<int:recipe_id>", view_func=self.add, methods=["POST"])
        bp.add_url_rule("/<int:recipe_id>", view_func=self.remove, methods=["DELETE"])
        return bp

    def list_mine(self):
        items = unwrap(self._list_favorites.execute(current_account().id))
        return jsonify([FavoriteDTO.from_details(item).to_json() for item in items])

    def list_for_user(self, user_id: int):
        items = unwrap(self._list_account_favorites.execute(user_id))
        return jsonify([FavoriteDTO.from_details(item).to_json() for item in items])

    def status(self, recipe_id: int):
        is_favorite = unwrap(self._favorite_status.execute(recipe_id, current_account().id))
        return jsonify(FavoriteStatusDTO(is_favorite=is_favorite).to_json())

    def add(self, recipe_id: int):
        details = unwrap(self._add_favorite.execute(recipe_id, current_account().id))
        return jsonify(FavoriteDTO.from_details(details).to_json()), 201

    def remove(self, recipe_id: int):
        unwrap(self._remove_favorite.execute(recipe_id, current_account().id))
        return jsonify(MessageDTO(message="Recipe removed from favorites").to_json())
