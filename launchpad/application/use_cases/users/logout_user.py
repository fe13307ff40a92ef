"""Use-case for revoking sessions."""

from __future__ import annotations

from launchpad.application.services.sessions import SessionManager


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, session_id: str) -> None:
        if session_id:
            self._sessions.invalidate_session(session_id)
