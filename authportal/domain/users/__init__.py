# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AuthStatus, SessionRecord, User
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError
from .repositories import PasswordHasher, SessionStore, UserRepository

__all__ = [
    "AuthStatus",
    "InvalidCredentialsError",
    "PasswordHasher",
    "SessionRecord",
    "SessionStore",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
