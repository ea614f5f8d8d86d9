"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from balance_coach.api import boards, drag, feedback, health, shapes

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(boards.router)
api_router.include_router(shapes.router)
api_router.include_router(drag.router)
api_router.include_router(feedback.router)
