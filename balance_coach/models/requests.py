"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CreateBoardRequest(BaseModel):
    width: float | None = Field(None, gt=0, description="Board width in pixels (default from settings)")
    height: float | None = Field(None, gt=0, description="Board height in pixels (default from settings)")
    seed: int | None = Field(None, description="Seed for reproducible placement and challenges")


class ModeRequest(BaseModel):
    mode: Literal["asymmetrical", "symmetrical"]


class ChallengeRequest(BaseModel):
    count: Literal[6, 8] | None = Field(None, description="Override the random shape count")
    pattern: Literal["grid", "pyramid", "towers", "staircase"] | None = Field(
        None, description="Override the random layout pattern"
    )


class AddShapeRequest(BaseModel):
    kind: Literal["square", "rectangle"]
    size: int = Field(100, ge=80, le=200, multiple_of=20, description="Shape height in pixels")
    shade: int = Field(1, ge=1, le=5, description="Shade level 1 (lightest) to 5 (darkest)")


class SizeRequest(BaseModel):
    size: int = Field(..., ge=80, le=200, multiple_of=20, description="Size slider value")


class ShadeRequest(BaseModel):
    shade: int = Field(..., ge=1, le=5)


class DragStartRequest(BaseModel):
    shape_id: str
    grab_x: float = Field(0, description="Pointer offset from the shape's left edge")
    grab_y: float = Field(0, description="Pointer offset from the shape's top edge")


class DragMoveRequest(BaseModel):
    x: float = Field(..., description="Pointer x, board-relative")
    y: float = Field(..., description="Pointer y, board-relative")
