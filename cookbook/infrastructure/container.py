# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from cookbook.application.services.password_hashing import WerkzeugPasswordHasher
from cookbook.application.services.tokens import JwtTokenService
from cookbook.application.use_cases.auth.login_account import LoginAccountUseCase
from cookbook.application.use_cases.auth.register_account import RegisterAccountUseCase
from cookbook.application.use_cases.auth.resolve_token import ResolveTokenUseCase
from cookbook.application.use_cases.categories.create_category import CreateCategoryUseCase
from cookbook.application.use_cases.categories.list_categories import ListCategoriesUseCase
from cookbook.application.use_cases.favorites.add_favorite import AddFavoriteUseCase
from cookbook.application.use_cases.favorites.list_favorites import (
    FavoriteStatusUseCase,
    ListAccountFavoritesUseCase,
    ListFavoritesUseCase,
)
from cookbook.application.use_cases.favorites.remove_favorite import RemoveFavoriteUseCase
from cookbook.application.use_cases.recipes.browse_recipes import (
    GetRecipeUseCase,
    ListAccountRecipesUseCase,
    ListRecipesUseCase,
    SearchRecipesUseCase,
)
from cookbook.application.use_cases.recipes.create_recipe import CreateRecipeUseCase
from cookbook.application.use_cases.recipes.delete_recipe import DeleteRecipeUseCase
from cookbook.application.use_cases.recipes.update_recipe import UpdateRecipeUseCase
from cookbook.application.use_cases.users.get_account import GetAccountByEmailUseCase
from cookbook.infrastructure.db import build_engine, build_session_factory
from cookbook.infrastructure.health import check_database
from cookbook.infrastructure.repositories.accounts import SqlAlchemyAccountRepository
from cookbook.infrastructure.repositories.categories import SqlAlchemyCategoryRepository
from cookbook.infrastructure.repositories.favorites import SqlAlchemyFavoriteRepository
from cookbook.infrastructure.repositories.recipes import SqlAlchemyRecipeRepository
from cookbook.interfaces.http.controllers.auth_controller import AuthController
from cookbook.interfaces.http.controllers.categories_controller import CategoriesController
from cookbook.interfaces.http.controllers.favorites_controller import FavoritesController
from cookbook.interfaces.http.controllers.misc_controller import MiscController
from cookbook.interfaces.http.controllers.recipes_controller import RecipesController
from cookbook.interfaces.http.controllers.users_controller import UsersController
from cookbook.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Persistence

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.session_factory)

    @cached_property
    def category_repository(self) -> SqlAlchemyCategoryRepository:
        return SqlAlchemyCategoryRepository(self.session_factory)

    @cached_property
    def recipe_repository(self) -> SqlAlchemyRecipeRepository:
        return SqlAlchemyRecipeRepository(self.session_factory)

    @cached_property
    def favorite_repository(self) -> SqlAlchemyFavoriteRepository:
        return SqlAlchemyFavoriteRepository(self.session_factory)

    # Services

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        auth = self.config.auth
        return JwtTokenService(
            auth.jwt_secret,
            algorithm=auth.jwt_algorithm,
            lifetime=auth.token_lifetime,
        )

    # Auth use cases

    @cached_property
    def register_account_use_case(self) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
        )

    @cached_property
    def login_account_use_case(self) -> LoginAccountUseCase:
        return LoginAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
            conceal_unknown_accounts=self.config.auth.conceal_unknown_accounts,
        )

    @cached_property
    def resolve_token_use_case(self) -> ResolveTokenUseCase:
        return ResolveTokenUseCase(accounts=self.account_repository, tokens=self.token_service)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_account_use_case,
            login_use_case=self.login_account_use_case,
            auth=self.config.auth,
            security=self.config.security,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            get_by_email=GetAccountByEmailUseCase(self.account_repository),
            list_recipes=ListAccountRecipesUseCase(self.recipe_repository),
        )

    @cached_property
    def categories_controller(self) -> CategoriesController:
        return CategoriesController(
            list_categories=ListCategoriesUseCase(self.category_repository),
            create_category=CreateCategoryUseCase(self.category_repository),
        )

    @cached_property
    def recipes_controller(self) -> RecipesController:
        recipes, categories = self.recipe_repository, self.category_repository
        return RecipesController(
            list_recipes=ListRecipesUseCase(recipes),
            get_recipe=GetRecipeUseCase(recipes),
            search_recipes=SearchRecipesUseCase(recipes),
            create_recipe=CreateRecipeUseCase(recipes=recipes, categories=categories),
            update_recipe=UpdateRecipeUseCase(recipes=recipes, categories=categories),
            delete_recipe=DeleteRecipeUseCase(recipes),
        )

    @cached_property
    def favorites_controller(self) -> FavoritesController:
        favorites = self.favorite_repository
        return FavoritesController(
            list_favorites=ListFavoritesUseCase(favorites),
            list_account_favorites=ListAccountFavoritesUseCase(
                favorites=favorites, accounts=self.account_repository
            ),
            favorite_status=FavoriteStatusUseCase(favorites),
            add_favorite=AddFavoriteUseCase(favorites=favorites, recipes=self.recipe_repository),
            remove_favorite=RemoveFavoriteUseCase(favorites),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database_probe=lambda: check_database(self.engine))

    def controllers(self) -> list:
        return [
            self.misc_controller,
            self.auth_controller,
            self.users_controller,
            self.categories_controller,
            self.recipes_controller,
            self.favorites_controller,
        ]
