from __future__ import annotations

import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="authportal-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP / 'users.db'}")
os.environ.setdefault("LOG_FILE", str(_TMP / "app.log"))
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402

from authportal.domain.users.entities import User  # noqa: E402
from authportal.domain.users.exceptions import UserAlreadyExistsError  # noqa: E402
from authportal.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_email_or_username(self, email: str, username: str) -> User | None:
        for user in self._users.values():
            if user.email == email or user.username == username:
                return user
        return None

    def find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def add(self, username: str, email: str, password_hash: str) -> User:
        if self.find_by_email_or_username(email, username):
            raise UserAlreadyExistsError()
        user = User(
            id=self._seq,
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
        self._seq += 1
        self._users[user.id] = user
        return user


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls = 0
        self.hash_calls = 0

    def hash(self, password: str) -> str:
        self.hash_calls += 1
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()
