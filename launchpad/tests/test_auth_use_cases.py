from __future__ import annotations

import pytest

from launchpad.application.services.sessions import SessionManager
from launchpad.application.services.tokens import derive_session_id
from launchpad.application.use_cases.users.login_user import LoginUserUseCase
from launchpad.application.use_cases.users.logout_user import LogoutUserUseCase
from launchpad.application.use_cases.users.register_user import RegisterUserUseCase
from launchpad.domain.users.entities import User
from launchpad.domain.users.exceptions import (
    REGISTRATION_FAILED_MESSAGE,
    InvalidCredentialsError,
    RegistrationConflictError,
    SessionConflictError,
)
from launchpad.domain.users.repositories import UserRepository
from launchpad.shared.errors.base import ConflictError

from conftest import DeterministicHasher, FakeClock, InMemorySessionRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, sessions: InMemorySessionRepository) -> None:
        self._users: dict[str, User] = {}
        self._sessions = sessions

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: str) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        self._users[user.username] = user
        self._sessions.users[user.id] = user
        return user


@pytest.fixture()
def session_repo() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture()
def users(session_repo: InMemorySessionRepository) -> InMemoryUserRepository:
    return InMemoryUserRepository(session_repo)


@pytest.fixture()
def manager(session_repo: InMemorySessionRepository, clock: FakeClock) -> SessionManager:
    return SessionManager(sessions=session_repo, clock=clock)


@pytest.fixture()
def register(users: InMemoryUserRepository, manager: SessionManager) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        users=users, sessions=manager, password_hasher=DeterministicHasher()
    )


@pytest.fixture()
def login(users: InMemoryUserRepository, manager: SessionManager) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, sessions=manager, password_hasher=DeterministicHasher())


def test_register_user_success(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    session_repo: InMemorySessionRepository,
) -> None:
    user, token, session = register.execute("alice", "secret123")

    assert user.username == "alice"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_username("alice") is not None
    assert session.id == derive_session_id(token)
    assert session.user_id == user.id
    assert session.id in session_repo.sessions


def test_register_normalizes_username(register: RegisterUserUseCase) -> None:
    user, _, _ = register.execute("  Alice ", "secret123")

    assert user.username == "alice"


def test_register_is_case_insensitive(register: RegisterUserUseCase) -> None:
    register.execute("Alice", "secret123")

    with pytest.raises(ConflictError) as excinfo:
        register.execute("alice", "other-pass")

    assert isinstance(excinfo.value, RegistrationConflictError)
    assert excinfo.value.to_dict() == {
        "error": "registration_failed",
        "context": {"message": REGISTRATION_FAILED_MESSAGE},
    }


def test_session_collision_looks_like_duplicate(
    register: RegisterUserUseCase, session_repo: InMemorySessionRepository
) -> None:
    def _collide(_session) -> None:
        raise SessionConflictError()

    session_repo.insert = _collide  # type: ignore[method-assign]

    with pytest.raises(RegistrationConflictError):
        register.execute("alice", "secret123")


def test_login_user_success(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    registered, first_token, _ = register.execute("alice", "secret123")

    user, token, session = login.execute("ALICE", "secret123")

    assert user == registered
    assert token != first_token
    assert session.user_id == registered.id


def test_login_user_invalid_credentials(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "secret123")

    with pytest.raises(InvalidCredentialsError):
        login.execute("alice", "wrong")


def test_login_unknown_user_is_indistinguishable(login: LoginUserUseCase) -> None:
    with pytest.raises(InvalidCredentialsError) as excinfo:
        login.execute("ghost", "secret123")

    assert excinfo.value.code == "invalid_credentials"


def test_logout_user_removes_session(
    register: RegisterUserUseCase,
    manager: SessionManager,
    session_repo: InMemorySessionRepository,
) -> None:
    _, _, session = register.execute("alice", "secret123")
    logout = LogoutUserUseCase(sessions=manager)

    logout.execute(session.id)
    logout.execute(session.id)

    assert session_repo.sessions == {}
