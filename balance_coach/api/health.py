"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from balance_coach import __version__
from balance_coach.models.responses import HealthResponse
from balance_coach.sessions import get_session_store

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, sessions=len(get_session_store()))
