"""
In-memory registry of live sessions. Nothing here survives a restart.

At most ``MAX_SESSIONS`` sessions are kept; creating one more discards the
oldest.
"""

import uuid

from structlog import get_logger

from ticket_search.core.config import settings
from ticket_search.services.session_service import TicketSession

logger = get_logger()


class SessionStore:
    """Keeps :class:`TicketSession` objects by id for the API layer."""

    def __init__(self) -> None:
        # Insertion order is creation order
        self._sessions: dict[str, TicketSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    async def create(self, query: str = "") -> TicketSession:
        while len(self._sessions) >= settings.MAX_SESSIONS:
            oldest = next(iter(self._sessions))
            logger.info("session_evicted", session=oldest, limit=settings.MAX_SESSIONS)
            await self.discard(oldest)

        session = TicketSession(session_id=uuid.uuid4().hex, query=query)
        self._sessions[session.session_id] = session
        logger.info("session_created", session=session.session_id)
        return session

    def get(self, session_id: str) -> TicketSession | None:
        return self._sessions.get(session_id)

    async def discard(self, session_id: str) -> bool:
        """Remove a session and cancel its in-flight actions.

        Returns:
            False if no such session existed.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        await session.aclose()
        logger.info("session_discarded", session=session_id)
        return True

    async def close(self) -> None:
        """Discard every session (used on application shutdown)."""
        for session_id in list(self._sessions):
            await self.discard(session_id)


session_store = SessionStore()
