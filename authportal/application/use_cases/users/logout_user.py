"""Use-case for ending a browser session."""

from __future__ import annotations

from authportal.domain.users.repositories import SessionStore
from authportal.shared.errors.base import SessionError
from authportal.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> None:
        if not token:
            return
        try:
            self._sessions.destroy(token)
        except Exception as exc:
            logger.exception("auth.logout: session store failure")
            raise SessionError() from exc
