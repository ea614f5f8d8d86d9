"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException

from balance_coach.config import settings
from balance_coach.engine.errors import SessionNotFound
from balance_coach.sessions import BoardSession, get_session_store


def get_settings():
    return settings


def get_board_session(board_id: str) -> BoardSession:
    try:
        return get_session_store().get(board_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
