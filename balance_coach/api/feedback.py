"""POST/GET /api/boards/{id}/feedback: art-coach critique of the current board."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from balance_coach.dependencies import get_board_session
from balance_coach.llm.client import request_feedback
from balance_coach.llm.jobs import FeedbackJob
from balance_coach.models.responses import FeedbackResponse
from balance_coach.sessions import BoardSession

router = APIRouter(prefix="/boards/{board_id}/feedback")
logger = logging.getLogger(__name__)


@router.post("", response_model=FeedbackResponse)
async def start_feedback(session: BoardSession = Depends(get_board_session)) -> FeedbackResponse:
    """Start a feedback request against a snapshot of the board.

    Returns immediately; poll ``GET`` for the result. The board stays editable
    while the request is in flight, and a newer request replaces this one as
    the displayed result.
    """
    engine = session.engine
    if not engine.shapes:
        return FeedbackResponse(analyzing=False, feedback=None)

    shapes = list(engine.shapes)
    report = engine.balance()
    job = FeedbackJob()
    session.feedback = job
    job.start(request_feedback(shapes, report.tilt_angle, engine.mode, engine.board.fulcrum_x))
    logger.debug("Feedback requested for board %s (%d shapes)", session.board_id, len(shapes))
    return FeedbackResponse(analyzing=job.analyzing, feedback=job.result)


@router.get("", response_model=FeedbackResponse)
async def get_feedback(session: BoardSession = Depends(get_board_session)) -> FeedbackResponse:
    job = session.feedback
    return FeedbackResponse(analyzing=job.analyzing, feedback=job.result)
