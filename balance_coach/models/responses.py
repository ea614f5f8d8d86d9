"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    sessions: int = 0


class ShapeModel(BaseModel):
    id: str
    kind: str
    x: float
    y: float
    width: float
    height: float
    shade: int
    shade_name: str
    weight: float
    saturation: float
    color: str
    mirror_id: str | None = None
    is_challenge: bool = False


class BalanceModel(BaseModel):
    left_moment: float = 0.0
    right_moment: float = 0.0
    tilt_angle: float = 0.0
    display_tilt: float = 0.0
    status: str = "Balanced"
    left_count: int = 0
    right_count: int = 0


class BoardResponse(BaseModel):
    board_id: str
    width: float
    height: float
    floor_height: float
    fulcrum_x: float
    mode: str = "asymmetrical"
    is_challenge: bool = False
    challenge_count: int = 0
    challenge_pattern: str | None = None
    guide_mode: str = "none"
    selected_id: str | None = None
    dragging_id: str | None = None
    shapes: list[ShapeModel] = Field(default_factory=list)
    balance: BalanceModel = Field(default_factory=BalanceModel)


class FeedbackResponse(BaseModel):
    analyzing: bool = False
    feedback: str | None = None
