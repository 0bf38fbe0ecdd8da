"""Use-case reporting whether a session token is still valid."""

from __future__ import annotations

from authportal.domain.users.entities import AuthStatus
from authportal.domain.users.repositories import SessionStore


class CheckAuthUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> AuthStatus:
        session = self._sessions.get(token)
        if session is None:
            return AuthStatus(authenticated=False)
        return AuthStatus(authenticated=True, username=session.username)
