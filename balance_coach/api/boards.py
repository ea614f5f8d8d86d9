"""Board session lifecycle and board-level actions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from balance_coach.api.snapshot import board_response
from balance_coach.dependencies import get_board_session
from balance_coach.engine.errors import SessionNotFound
from balance_coach.models.requests import ChallengeRequest, CreateBoardRequest, ModeRequest
from balance_coach.models.responses import BalanceModel, BoardResponse
from balance_coach.sessions import BoardSession, get_session_store

router = APIRouter(prefix="/boards")


@router.post("", response_model=BoardResponse, status_code=201)
async def create_board(req: CreateBoardRequest | None = None) -> BoardResponse:
    req = req or CreateBoardRequest()
    session = get_session_store().create(width=req.width, height=req.height, seed=req.seed)
    return board_response(session)


@router.get("/{board_id}", response_model=BoardResponse)
async def get_board(session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    return board_response(session)


@router.delete("/{board_id}", status_code=204)
async def delete_board(board_id: str) -> None:
    try:
        get_session_store().delete(board_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post("/{board_id}/mode", response_model=BoardResponse)
async def set_mode(req: ModeRequest, session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.set_mode(req.mode)
    return board_response(session)


@router.post("/{board_id}/reset", response_model=BoardResponse)
async def reset(session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.reset()
    return board_response(session)


@router.post("/{board_id}/guides", response_model=BoardResponse)
async def toggle_guides(session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.toggle_guides()
    return board_response(session)


@router.post("/{board_id}/challenge", response_model=BoardResponse)
async def start_challenge(
    req: ChallengeRequest | None = None,
    session: BoardSession = Depends(get_board_session),
) -> BoardResponse:
    """Start a challenge, or advance to the next one if already in challenge mode."""
    req = req or ChallengeRequest()
    session.engine.start_challenge(count=req.count, pattern=req.pattern)
    return board_response(session)


@router.get("/{board_id}/balance", response_model=BalanceModel)
async def get_balance(session: BoardSession = Depends(get_board_session)) -> BalanceModel:
    return board_response(session).balance
