# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authportal.domain.users.entities import User
from authportal.domain.users.exceptions import UserAlreadyExistsError
from authportal.domain.users.repositories import PasswordHasher, UserRepository
from authportal.shared.errors.base import MissingFieldsError
from authportal.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, email: str, password: str) -> User:
        missing = [
            name
            for name, value in (("username", username), ("email", email), ("password", password))
            if not value
        ]
        if missing:
            raise MissingFieldsError(missing)

        # the unique constraint in add() still decides concurrent signups
        existing = self._users.find_by_email_or_username(email, username)
        if existing:
            logger.info(f"auth.signup: rejected, user exists (user_id={existing.id})")
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        user = self._users.add(username, email, hashed)
        logger.info(f"auth.signup: ok user_id={user.id}")
        return user
