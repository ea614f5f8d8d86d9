"""Engine state → response models."""

from __future__ import annotations

from balance_coach.engine.shapes import Shape
from balance_coach.models.responses import BalanceModel, BoardResponse, ShapeModel
from balance_coach.sessions import BoardSession


def shape_model(shape: Shape) -> ShapeModel:
    return ShapeModel(
        id=shape.id,
        kind=shape.kind,
        x=shape.x,
        y=shape.y,
        width=shape.width,
        height=shape.height,
        shade=shape.shade,
        shade_name=shape.shade_name,
        weight=shape.weight,
        saturation=shape.saturation,
        color=shape.color,
        mirror_id=shape.mirror_id,
        is_challenge=shape.is_challenge,
    )


def board_response(session: BoardSession) -> BoardResponse:
    engine = session.engine
    report = engine.balance()
    return BoardResponse(
        board_id=session.board_id,
        width=engine.board.width,
        height=engine.board.height,
        floor_height=engine.board.floor_height,
        fulcrum_x=engine.board.fulcrum_x,
        mode=engine.mode,
        is_challenge=engine.is_challenge,
        challenge_count=engine.challenge_count,
        challenge_pattern=engine.challenge_pattern,
        guide_mode=engine.guide_mode,
        selected_id=engine.selected_id,
        dragging_id=engine.drag.shape_id if engine.drag else None,
        shapes=[shape_model(s) for s in engine.shapes],
        balance=BalanceModel(
            left_moment=report.moments.left,
            right_moment=report.moments.right,
            tilt_angle=report.tilt_angle,
            display_tilt=report.display_tilt,
            status=report.status,
            left_count=report.left_count,
            right_count=report.right_count,
        ),
    )
