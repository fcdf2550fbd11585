import logging

from ai_terminal.models.session import ShellSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages shell sessions by id."""

    def __init__(self) -> None:
        # Simple dict as an in-process session storage; sessions are never persisted.
        self._storage: dict[str, ShellSession] = {}

    def get_session(self, session_id: str = "default") -> ShellSession:
        """Returns or creates the session for a given id."""
        if session_id not in self._storage:
            logger.info(f"Starting new shell session '{session_id}'")
            self._storage[session_id] = ShellSession()
        return self._storage[session_id]

    def new_session(self, session_id: str = "default") -> ShellSession:
        """Replaces a session with a fresh one: initial tree, home directory, empty history."""
        logger.info(f"Resetting shell session '{session_id}'")
        self._storage[session_id] = ShellSession()
        return self._storage[session_id]
