# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from authportal.application.services.password_hashing import WerkzeugPasswordHasher
from authportal.application.use_cases.users.check_auth import CheckAuthUseCase
from authportal.application.use_cases.users.login_user import LoginUserUseCase
from authportal.application.use_cases.users.logout_user import LogoutUserUseCase
from authportal.application.use_cases.users.register_user import RegisterUserUseCase
from authportal.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from authportal.infrastructure.sessions import InMemorySessionStore
from authportal.interfaces.http.controllers.auth_controller import AuthController
from authportal.interfaces.http.controllers.misc_controller import MiscController
from authportal.interfaces.http.controllers.pages_controller import PagesController
from authportal.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.security.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def session_store(self) -> InMemorySessionStore:
        return InMemorySessionStore(ttl_seconds=self.config.session.ttl_seconds)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_store)

    @cached_property
    def check_auth_use_case(self) -> CheckAuthUseCase:
        return CheckAuthUseCase(sessions=self.session_store)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            check_auth_use_case=self.check_auth_use_case,
            config=self.config,
        )

    @cached_property
    def pages_controller(self) -> PagesController:
        return PagesController(sessions=self.session_store, config=self.config)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(sessions=self.session_store)
