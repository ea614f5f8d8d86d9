"""Challenge generator: counterbalance puzzles confined to the left half.

A challenge is a set of uniquely sized blueprints laid out by one of a few
fixed structural patterns. Candidate positions are deterministic; only the
blueprint order, the shape kinds and the pattern choice are random.
Proposals that collide or leave the left half are dropped, so a challenge
may hold fewer shapes than its target count.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from balance_coach.engine.collision import has_collision
from balance_coach.engine.constants import CHALLENGE_COUNTS, CHALLENGE_SIZES, GRID_UNIT, SHADE_LEVELS
from balance_coach.engine.shapes import Board, Shape, ShapeKind, make_shape
from balance_coach.utils.geometry import snap, within

logger = logging.getLogger(__name__)

# Fallback size when a layout peeks past the last blueprint.
_SPARE_SIZE = 60


@dataclass(frozen=True)
class Blueprint:
    size: int
    shade: int


@dataclass
class ChallengeResult:
    shapes: list[Shape] = field(default_factory=list)
    target_count: int = 0
    pattern: str = ""


def generate_blueprints(count: int, rng: np.random.Generator) -> list[Blueprint]:
    """``count`` blueprints with distinct sizes and cycling shades, in random order."""
    if count > len(CHALLENGE_SIZES):
        raise ValueError(f"at most {len(CHALLENGE_SIZES)} unique sizes available, asked for {count}")
    sizes = rng.permutation(CHALLENGE_SIZES)[:count]
    blueprints = [
        Blueprint(size=int(size), shade=SHADE_LEVELS[i % len(SHADE_LEVELS)])
        for i, size in enumerate(sizes)
    ]
    return [blueprints[i] for i in rng.permutation(count)]


class _LayoutBuilder:
    """Consumes blueprints in order and keeps the proposals that fit."""

    def __init__(self, blueprints: list[Blueprint], board: Board, rng: np.random.Generator) -> None:
        self.blueprints = blueprints
        self.board = board
        self.rng = rng
        self.index = 0
        self.accepted: list[Shape] = []

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.blueprints)

    def next_size(self) -> int:
        if self.exhausted:
            return _SPARE_SIZE
        return self.blueprints[self.index].size

    def propose(self, x: float, y: float) -> bool:
        if self.exhausted:
            return False
        bp = self.blueprints[self.index]
        self.index += 1

        kind: ShapeKind = "square" if self.rng.random() < 0.5 else "rectangle"
        shape = make_shape(
            f"challenge-{len(self.accepted)}",
            kind,
            bp.size,
            bp.shade,
            snap(x, GRID_UNIT),
            snap(y, GRID_UNIT),
            is_challenge=True,
        )
        rect = shape.rect
        if has_collision(self.accepted, rect):
            return False
        if not within(rect, self.board.fulcrum_x, self.board.floor_y):
            return False
        self.accepted.append(shape)
        return True


def _grid(b: _LayoutBuilder) -> None:
    cols, cell_w, cell_h, start_x = 2, 80, 100, 40
    rows = len(b.blueprints) // cols
    start_y = b.board.floor_y - rows * cell_h
    for r in range(rows):
        for c in range(cols):
            b.propose(start_x + c * cell_w, start_y + r * cell_h)


def _pyramid(b: _LayoutBuilder) -> None:
    size, start_x = 80, 20
    floor_y = b.board.floor_y
    for i in range(3):
        b.propose(start_x + i * size, floor_y - size)
    for i in range(2):
        b.propose(start_x + size / 2 + i * size, floor_y - size * 2)
    # apex: whatever is left stacks above the middle column
    while not b.exhausted:
        b.propose(start_x + size, floor_y - size * (3 + (b.index - 5)))


def _towers(b: _LayoutBuilder) -> None:
    start_x, spacing, towers = 40, 120, 2
    per_tower = len(b.blueprints) // towers
    for t in range(towers):
        current_y = b.board.floor_y
        for _ in range(per_tower):
            current_y -= b.next_size()
            b.propose(start_x + t * spacing, current_y)


def _staircase(b: _LayoutBuilder) -> None:
    step_w, rise, start_x = 45, 20, 20
    for i in range(len(b.blueprints)):
        b.propose(start_x + i * step_w, b.board.floor_y - b.next_size() - i * rise)


LAYOUTS: dict[str, Callable[[_LayoutBuilder], None]] = {
    "grid": _grid,
    "pyramid": _pyramid,
    "towers": _towers,
    "staircase": _staircase,
}


def generate_challenge(
    board: Board,
    rng: np.random.Generator,
    *,
    count: int | None = None,
    pattern: str | None = None,
) -> ChallengeResult:
    """Generate a new challenge. ``count``/``pattern`` override the random picks."""
    if count is None:
        count = int(rng.choice(CHALLENGE_COUNTS))
    blueprints = generate_blueprints(count, rng)

    if pattern is None:
        pattern = list(LAYOUTS)[int(rng.integers(len(LAYOUTS)))]
    if pattern not in LAYOUTS:
        raise ValueError(f"unknown challenge pattern {pattern!r}")

    builder = _LayoutBuilder(blueprints, board, rng)
    LAYOUTS[pattern](builder)

    if len(builder.accepted) < count:
        logger.debug(
            "Challenge '%s' placed %d of %d shapes", pattern, len(builder.accepted), count
        )
    return ChallengeResult(shapes=builder.accepted, target_count=count, pattern=pattern)
