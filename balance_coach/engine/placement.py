"""Placement planner: randomized, retry-bounded search for a free spot.

Each attempt draws a uniform top-left position, snaps it to the grid and
checks it against the board constraints. In symmetrical mode the reflected
twin must pass the same checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from balance_coach.engine.collision import has_collision
from balance_coach.engine.constants import GRID_UNIT, PLACEMENT_ATTEMPTS
from balance_coach.engine.errors import PlacementError
from balance_coach.engine.shapes import Board, Mode, Shape, ShapeKind, dimensions, make_shape, mirror_pair
from balance_coach.utils.geometry import Rect, mirror_x, snap

logger = logging.getLogger(__name__)


@dataclass
class PlacementResult:
    """Shapes to commit (the new shape, then its twin if mirrored)."""

    shapes: list[Shape] = field(default_factory=list)
    attempts: int = 0

    @property
    def primary(self) -> Shape:
        return self.shapes[0]


def is_placeable(
    shapes: list[Shape],
    rect: Rect,
    board: Board,
    *,
    mirrored: bool = False,
    exclude: tuple[str | None, ...] = (),
) -> bool:
    """Check bounds, floor, fulcrum and collisions (and the twin's, if mirrored)."""
    if not board.accepts(rect) or has_collision(shapes, rect, exclude):
        return False
    if mirrored:
        twin = Rect(mirror_x(rect.x, rect.w, board.width), rect.y, rect.w, rect.h)
        if not board.accepts(twin) or has_collision(shapes, twin, exclude):
            return False
    return True


def attempt_placement(
    rng: np.random.Generator,
    shapes: list[Shape],
    width: float,
    height: float,
    board: Board,
    *,
    mirrored: bool = False,
) -> Rect | None:
    """One draw from ``rng``: a valid snapped rectangle, or None."""
    x = snap(rng.random() * (board.width - width), GRID_UNIT)
    y = snap(rng.random() * (board.floor_y - height), GRID_UNIT)
    rect = Rect(x, y, width, height)
    if is_placeable(shapes, rect, board, mirrored=mirrored):
        return rect
    return None


def place_new_shape(
    shapes: list[Shape],
    kind: ShapeKind,
    size: float,
    shade: int,
    board: Board,
    mode: Mode,
    rng: np.random.Generator,
    shape_id: str,
    *,
    max_attempts: int = PLACEMENT_ATTEMPTS,
) -> PlacementResult:
    """Find a spot for a new shape; raise PlacementError once the budget is spent."""
    width, height = dimensions(kind, size)
    mirrored = mode == "symmetrical"

    for attempt in range(1, max_attempts + 1):
        rect = attempt_placement(rng, shapes, width, height, board, mirrored=mirrored)
        if rect is None:
            continue
        shape = make_shape(shape_id, kind, size, shade, rect.x, rect.y)
        if mirrored:
            return PlacementResult(shapes=list(mirror_pair(shape, board.width)), attempts=attempt)
        return PlacementResult(shapes=[shape], attempts=attempt)

    logger.info("No space for %s size=%s after %d attempts", kind, size, max_attempts)
    raise PlacementError()
