# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionRecord, User


class UserRepository(Protocol):
    def find_by_email_or_username(self, email: str, username: str) -> User | None: ...
    def find_by_email(self, email: str) -> User | None: ...
    def add(self, username: str, email: str, password_hash: str) -> User: ...


class SessionStore(Protocol):
    def create(self, user_id: int, username: str) -> SessionRecord: ...
    def get(self, token: str | None) -> SessionRecord | None: ...
    def destroy(self, token: str | None) -> None: ...
    def count(self) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
