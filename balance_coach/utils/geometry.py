"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle: top-left corner plus width/height."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2


def snap(value: float, unit: int = 20) -> int:
    """Round to the nearest multiple of ``unit`` (halves round up)."""
    return int(math.floor(value / unit + 0.5)) * unit


def overlaps(a: Rect, b: Rect) -> bool:
    """Strict AABB intersection. Rectangles sharing only an edge or corner do not overlap."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def straddles(rect: Rect, line_x: float) -> bool:
    """True if the vertical line ``x = line_x`` passes through the rectangle's interior."""
    return rect.x < line_x < rect.right


def within(rect: Rect, width: float, height: float) -> bool:
    """True if the rectangle lies inside ``[0, width] x [0, height]``."""
    return rect.x >= 0 and rect.y >= 0 and rect.right <= width and rect.bottom <= height


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def mirror_x(x: float, width: float, board_width: float) -> float:
    """Reflect a left edge about the board's vertical centerline."""
    return board_width - x - width


def recenter(rect: Rect, new_w: float, new_h: float, unit: int = 20) -> Rect:
    """Resize about the current center, snapping the new top-left to the grid."""
    return Rect(
        x=snap(rect.center_x - new_w / 2, unit),
        y=snap(rect.center_y - new_h / 2, unit),
        w=new_w,
        h=new_h,
    )
