"""Drag gesture: pointer down / move / up (or leave)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from balance_coach.api.snapshot import board_response
from balance_coach.dependencies import get_board_session
from balance_coach.models.requests import DragMoveRequest, DragStartRequest
from balance_coach.models.responses import BoardResponse
from balance_coach.sessions import BoardSession

router = APIRouter(prefix="/boards/{board_id}/drag")


@router.post("/start", response_model=BoardResponse)
async def start_drag(req: DragStartRequest, session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.begin_drag(req.shape_id, req.grab_x, req.grab_y)
    return board_response(session)


@router.post("/move", response_model=BoardResponse)
async def move_drag(req: DragMoveRequest, session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.drag_to(req.x, req.y)
    return board_response(session)


@router.post("/end", response_model=BoardResponse)
async def end_drag(session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.end_drag()
    return board_response(session)
