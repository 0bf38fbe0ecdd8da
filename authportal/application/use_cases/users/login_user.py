# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authportal.domain.users.entities import SessionRecord
from authportal.domain.users.exceptions import InvalidCredentialsError
from authportal.domain.users.repositories import PasswordHasher, SessionStore, UserRepository
from authportal.shared.errors.base import MissingFieldsError
from authportal.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher
        # unknown emails are verified against this so both failures cost one verify
        self._dummy_hash = password_hasher.hash("authportal-timing-dummy")

    def execute(
        self, email: str, password: str, previous_token: str | None = None
    ) -> SessionRecord:
        missing = [name for name, value in (("email", email), ("password", password)) if not value]
        if missing:
            raise MissingFieldsError(missing, message="Email and password are required")

        user = self._users.find_by_email(email)
        if user is None:
            self._password_hasher.verify(password, self._dummy_hash)
            logger.info("auth.login: invalid credentials")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: invalid credentials (user_id={user.id})")
            raise InvalidCredentialsError()

        if previous_token:
            self._sessions.destroy(previous_token)

        session = self._sessions.create(user.id, user.username)
        logger.info(f"auth.login: ok user_id={user.id}")
        return session
