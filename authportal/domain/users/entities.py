# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class SessionRecord:

    token: str
    user_id: int
    username: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


@dataclass(slots=True, frozen=True)
class AuthStatus:

    authenticated: bool
    username: str | None = None

    def to_dict(self) -> dict[str, object]:
        if not self.authenticated:
            return {"authenticated": False}
        return {"authenticated": True, "username": self.username}
