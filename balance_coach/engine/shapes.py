"""Shape and Board records plus the shade lookup rules.

Shapes are plain mutable dataclasses, but the mutation helpers always produce
new records via ``dataclasses.replace`` so a shape list can be treated as a
value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from balance_coach.engine.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    COLORS,
    FLOOR_HEIGHT,
    SHADE_LEVELS,
    SHADE_NAMES,
    SHADE_SATURATIONS,
    SHADE_WEIGHT_MULTIPLIERS,
)
from balance_coach.utils.geometry import Rect, mirror_x, straddles, within

ShapeKind = Literal["square", "rectangle"]
Mode = Literal["asymmetrical", "symmetrical"]


@dataclass(frozen=True)
class Board:
    """Board dimensions. The fulcrum sits at ``width / 2``."""

    width: float = BOARD_WIDTH
    height: float = BOARD_HEIGHT
    floor_height: float = FLOOR_HEIGHT

    @property
    def fulcrum_x(self) -> float:
        return self.width / 2

    @property
    def floor_y(self) -> float:
        return self.height - self.floor_height

    def accepts(self, rect: Rect) -> bool:
        """Inside the board, above the floor band, and clear of the fulcrum line."""
        return within(rect, self.width, self.floor_y) and not straddles(rect, self.fulcrum_x)


@dataclass
class Shape:
    id: str
    kind: ShapeKind
    x: float
    y: float
    width: float
    height: float
    shade: int
    weight: float = 0.0
    saturation: float = 0.0
    color: str = ""
    mirror_id: str | None = None
    is_challenge: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def shade_name(self) -> str:
        return SHADE_NAMES[self.shade - 1]

    def side(self, fulcrum_x: float) -> str:
        return "left" if self.center_x < fulcrum_x else "right"


def check_shade(shade: int) -> int:
    if shade not in SHADE_LEVELS:
        raise ValueError(f"shade must be one of {SHADE_LEVELS}, got {shade!r}")
    return shade


def dimensions(kind: ShapeKind, size: float) -> tuple[float, float]:
    """(width, height) for a shape of the given size. Rectangles are half as wide as tall."""
    if kind == "square":
        return size, size
    if kind == "rectangle":
        return size / 2, size
    raise ValueError(f"unknown shape kind {kind!r}")


def shape_weight(width: float, height: float, shade: int) -> float:
    return (height * width / 100) * SHADE_WEIGHT_MULTIPLIERS[check_shade(shade) - 1]


def shape_saturation(shade: int) -> float:
    return SHADE_SATURATIONS[check_shade(shade) - 1]


def make_shape(
    shape_id: str,
    kind: ShapeKind,
    size: float,
    shade: int,
    x: float = 0,
    y: float = 0,
    *,
    is_challenge: bool = False,
) -> Shape:
    """Build a shape with its derived weight, saturation and color filled in."""
    width, height = dimensions(kind, size)
    return Shape(
        id=shape_id,
        kind=kind,
        x=x,
        y=y,
        width=width,
        height=height,
        shade=shade,
        weight=shape_weight(width, height, shade),
        saturation=shape_saturation(shade),
        color=COLORS[kind],
        is_challenge=is_challenge,
    )


def mirror_pair(shape: Shape, board_width: float, mirror_id: str | None = None) -> tuple[Shape, Shape]:
    """Return ``(shape, twin)`` linked to each other, the twin reflected about the centerline."""
    mirror_id = mirror_id or f"{shape.id}-mirror"
    original = replace(shape, mirror_id=mirror_id)
    twin = replace(
        shape,
        id=mirror_id,
        x=mirror_x(shape.x, shape.width, board_width),
        mirror_id=shape.id,
    )
    return original, twin


def find_shape(shapes: list[Shape], shape_id: str | None) -> Shape | None:
    if shape_id is None:
        return None
    return next((s for s in shapes if s.id == shape_id), None)
