"""In-memory board sessions, one CompositionEngine per board.

Sessions live only as long as the process; there is no persistence.
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field

from balance_coach.config import settings
from balance_coach.engine.composition import CompositionEngine
from balance_coach.engine.errors import SessionNotFound
from balance_coach.engine.shapes import Board
from balance_coach.llm.jobs import FeedbackJob

logger = logging.getLogger(__name__)


@dataclass
class BoardSession:
    board_id: str
    engine: CompositionEngine
    feedback: FeedbackJob = field(default_factory=FeedbackJob)


class SessionStore:
    """Bounded LRU map of board id → session."""

    def __init__(self, max_sessions: int | None = None) -> None:
        self.max_sessions = max_sessions or settings.max_sessions
        self._sessions: OrderedDict[str, BoardSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(
        self,
        width: float | None = None,
        height: float | None = None,
        seed: int | None = None,
    ) -> BoardSession:
        board = Board(width=width or settings.board_width, height=height or settings.board_height)
        board_id = uuid.uuid4().hex[:12]
        session = BoardSession(board_id=board_id, engine=CompositionEngine(board, seed=seed))
        self._sessions[board_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, evicted = self._sessions.popitem(last=False)
            evicted.feedback.cancel()
            logger.info("Evicted board session %s", evicted_id)
        logger.info("Created board session %s (%gx%g)", board_id, board.width, board.height)
        return session

    def get(self, board_id: str) -> BoardSession:
        session = self._sessions.get(board_id)
        if session is None:
            raise SessionNotFound(board_id)
        self._sessions.move_to_end(board_id)
        return session

    def delete(self, board_id: str) -> None:
        session = self._sessions.pop(board_id, None)
        if session is None:
            raise SessionNotFound(board_id)
        session.feedback.cancel()


# Singleton
_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get or create the global SessionStore singleton."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
