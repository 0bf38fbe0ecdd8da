# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-local session storage keyed by opaque cookie tokens."""

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from threading import Lock

from authportal.domain.users.entities import SessionRecord
from authportal.domain.users.repositories import SessionStore
from authportal.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemorySessionStore(SessionStore):
    """Thread-safe token -> session map with a fixed time-to-live.

    Sessions do not survive a restart and are not shared between processes.
    Expired entries are dropped when read and swept whenever a new session
    is created.
    """

    TOKEN_BYTES = 32

    def __init__(
        self,
        ttl_seconds: int = 3600,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._lock = Lock()
        self._sessions: dict[str, SessionRecord] = {}
        logger.debug(f"sessions: initialized ttl={ttl_seconds}s")

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def create(self, user_id: int, username: str) -> SessionRecord:
        now = self._clock()
        record = SessionRecord(
            token=secrets.token_urlsafe(self.TOKEN_BYTES),
            user_id=user_id,
            username=username,
            created_at=now,
            expires_at=now + self._ttl,
        )
        with self._lock:
            self._purge_locked(now)
            self._sessions[record.token] = record
        logger.info(
            f"sessions: created user_id={user_id} exp={record.expires_at.isoformat()} "
            f"tok={record.token[:6]}…"
        )
        return record

    def get(self, token: str | None) -> SessionRecord | None:
        if not token:
            return None
        now = self._clock()
        with self._lock:
            record = self._sessions.get(token)
            if record is None:
                return None
            if record.is_expired(now):
                del self._sessions[token]
                logger.debug(f"sessions: expired user_id={record.user_id}")
                return None
            return record

    def destroy(self, token: str | None) -> None:
        if not token:
            return
        with self._lock:
            record = self._sessions.pop(token, None)
        if record:
            logger.info(f"sessions: destroyed user_id={record.user_id}")
        else:
            logger.debug("sessions: destroy on unknown token")

    def purge_expired(self) -> int:
        with self._lock:
            return self._purge_locked(self._clock())

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _purge_locked(self, now: datetime) -> int:
        expired = [token for token, record in self._sessions.items() if record.is_expired(now)]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug(f"sessions: purged {len(expired)} expired")
        return len(expired)


__all__ = ["InMemorySessionStore"]
