# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session as DbSession

from launchpad.application.services.password_hashing import Argon2PasswordHasher
from launchpad.application.services.sessions import Clock, SessionManager, SessionPolicy, utcnow
from launchpad.application.use_cases.users.login_user import LoginUserUseCase
from launchpad.application.use_cases.users.logout_user import LogoutUserUseCase
from launchpad.application.use_cases.users.register_user import RegisterUserUseCase
from launchpad.domain.users.repositories import PasswordHasher
from launchpad.infrastructure.db import ENGINE, make_session_factory
from launchpad.infrastructure.health import HealthChecker
from launchpad.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionRepository,
    SqlAlchemyUserRepository,
)
from launchpad.interfaces.http.controllers.auth_controller import AuthController
from launchpad.interfaces.http.controllers.example_controller import ExampleController
from launchpad.interfaces.http.controllers.misc_controller import MiscController
from launchpad.interfaces.http.controllers.pages_controller import PagesController
from launchpad.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        engine: Engine | None = None,
        session_factory: Callable[[], DbSession] | None = None,
        password_hasher: PasswordHasher | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self.config = config or load_config()
        self.engine = engine or ENGINE
        self._session_factory = session_factory
        self._password_hasher = password_hasher
        self.clock = clock

    @cached_property
    def session_factory(self) -> Callable[[], DbSession]:
        return self._session_factory or make_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher or Argon2PasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def session_repository(self) -> SqlAlchemySessionRepository:
        return SqlAlchemySessionRepository(self.session_factory)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            sessions=self.session_repository,
            policy=SessionPolicy.from_config(self.config.session),
            clock=self.clock,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            sessions=self.session_manager,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_manager,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_manager)

    @cached_property
    def health_checker(self) -> HealthChecker:
        return HealthChecker(engine=self.engine, config=self.config)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(health_checker=self.health_checker)

    @cached_property
    def example_controller(self) -> ExampleController:
        return ExampleController()

    @cached_property
    def pages_controller(self) -> PagesController:
        return PagesController(config=self.config)
