"""Shape actions: add, select, rotate, resize, shade, delete.

Rejected edits (collisions, bounds, challenge shapes) are not errors: the
board comes back unchanged. Only a failed add is reported, since the user
asked for something that did not happen.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from balance_coach.api.snapshot import board_response
from balance_coach.dependencies import get_board_session
from balance_coach.engine.errors import PlacementError
from balance_coach.models.requests import AddShapeRequest, ShadeRequest, SizeRequest
from balance_coach.models.responses import BoardResponse
from balance_coach.sessions import BoardSession

router = APIRouter(prefix="/boards/{board_id}/shapes")


@router.post("", response_model=BoardResponse, status_code=201)
async def add_shape(req: AddShapeRequest, session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    try:
        session.engine.add_shape(req.kind, req.size, req.shade)
    except PlacementError as e:
        raise HTTPException(status_code=409, detail=e.message) from e
    return board_response(session)


@router.post("/{shape_id}/select", response_model=BoardResponse)
async def select_shape(shape_id: str, session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.select(shape_id)
    return board_response(session)


@router.post("/{shape_id}/rotate", response_model=BoardResponse)
async def rotate_shape(shape_id: str, session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.rotate(shape_id)
    return board_response(session)


@router.post("/{shape_id}/size", response_model=BoardResponse)
async def resize_shape(
    shape_id: str,
    req: SizeRequest,
    session: BoardSession = Depends(get_board_session),
) -> BoardResponse:
    session.engine.resize(shape_id, req.size)
    return board_response(session)


@router.post("/{shape_id}/shade", response_model=BoardResponse)
async def set_shade(
    shape_id: str,
    req: ShadeRequest,
    session: BoardSession = Depends(get_board_session),
) -> BoardResponse:
    session.engine.set_shade(shape_id, req.shade)
    return board_response(session)


@router.delete("/{shape_id}", response_model=BoardResponse)
async def delete_shape(shape_id: str, session: BoardSession = Depends(get_board_session)) -> BoardResponse:
    session.engine.delete(shape_id)
    return board_response(session)
