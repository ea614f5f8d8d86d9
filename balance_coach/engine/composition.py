"""CompositionEngine: the single owner of board state.

Holds the shape list, the symmetry mode, challenge state, guide overlay,
selection and the active drag gesture. Every user action maps to one method;
the presentation layer re-renders from the engine's attributes afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import numpy as np

from balance_coach.engine import mutation
from balance_coach.engine.balance import BalanceReport, balance_report
from balance_coach.engine.challenge import generate_challenge
from balance_coach.engine.constants import GUIDE_MODES
from balance_coach.engine.placement import place_new_shape
from balance_coach.engine.shapes import Board, Mode, Shape, ShapeKind, check_shade, find_shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragState:
    shape_id: str
    grab_x: float
    grab_y: float


class CompositionEngine:
    def __init__(
        self,
        board: Board | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.board = board or Board()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.shapes: list[Shape] = []
        self.mode: Mode = "asymmetrical"
        self.is_challenge = False
        self.challenge_count = 0
        self.challenge_pattern: str | None = None
        self.guide_mode = GUIDE_MODES[0]
        self.selected_id: str | None = None
        self.drag: DragState | None = None
        self._next_id = 1

    # --- Queries ---

    @property
    def selected(self) -> Shape | None:
        return find_shape(self.shapes, self.selected_id)

    def get(self, shape_id: str) -> Shape | None:
        return find_shape(self.shapes, shape_id)

    def balance(self) -> BalanceReport:
        return balance_report(self.shapes, self.board.fulcrum_x)

    # --- Board-level actions ---

    def reset(self) -> None:
        self.shapes = []
        self.selected_id = None
        self.drag = None
        self.is_challenge = False
        self.challenge_count = 0
        self.challenge_pattern = None
        self.mode = "asymmetrical"

    def set_mode(self, mode: Mode) -> None:
        """Switch symmetry mode. Switching always starts from a clean board."""
        if mode not in ("asymmetrical", "symmetrical"):
            raise ValueError(f"unknown mode {mode!r}")
        self.reset()
        self.mode = mode

    def toggle_guides(self) -> str:
        idx = GUIDE_MODES.index(self.guide_mode)
        self.guide_mode = GUIDE_MODES[(idx + 1) % len(GUIDE_MODES)]
        return self.guide_mode

    def start_challenge(self, *, count: int | None = None, pattern: str | None = None) -> list[Shape]:
        """Wipe the board and lay out a new challenge (also used for "next challenge")."""
        self.reset()
        self.is_challenge = True
        result = generate_challenge(self.board, self.rng, count=count, pattern=pattern)
        self.shapes = result.shapes
        self.challenge_count = result.target_count
        self.challenge_pattern = result.pattern
        logger.info(
            "Started '%s' challenge with %d/%d shapes",
            result.pattern,
            len(result.shapes),
            result.target_count,
        )
        return self.shapes

    # --- Shape actions ---

    def add_shape(self, kind: ShapeKind, size: float, shade: int) -> list[Shape]:
        """Place a new shape (and its twin in symmetrical mode). Raises PlacementError."""
        check_shade(shade)
        mode: Mode = "asymmetrical" if self.is_challenge else self.mode
        result = place_new_shape(
            self.shapes,
            kind,
            size,
            shade,
            self.board,
            mode,
            self.rng,
            f"shape-{self._next_id}",
        )
        self._next_id += 1
        self.shapes = self.shapes + result.shapes
        self.selected_id = result.primary.id
        logger.debug("Placed %s after %d attempt(s)", result.primary.id, result.attempts)
        return result.shapes

    def select(self, shape_id: str | None) -> Shape | None:
        self.selected_id = shape_id if self.get(shape_id or "") else None
        return self.selected

    def rotate(self, shape_id: str) -> Shape | None:
        self.shapes = mutation.rotate_shape(self.shapes, shape_id, self.board)
        return self.get(shape_id)

    def resize(self, shape_id: str, size: float) -> Shape | None:
        self.shapes = mutation.resize_shape(self.shapes, shape_id, size, self.board)
        return self.get(shape_id)

    def set_shade(self, shape_id: str, shade: int) -> Shape | None:
        check_shade(shade)
        self.shapes = mutation.set_shade(self.shapes, shape_id, shade)
        return self.get(shape_id)

    def delete(self, shape_id: str) -> bool:
        before = len(self.shapes)
        self.shapes = mutation.delete_shape(self.shapes, shape_id)
        if self.get(self.selected_id or "") is None:
            self.selected_id = None
        if self.drag is not None and self.get(self.drag.shape_id) is None:
            self.drag = None
        return len(self.shapes) < before

    # --- Drag gesture ---

    def begin_drag(self, shape_id: str, grab_x: float, grab_y: float) -> bool:
        """Pointer-down: select the shape and remember where inside it was grabbed."""
        if self.get(shape_id) is None:
            return False
        self.selected_id = shape_id
        self.drag = DragState(shape_id, grab_x, grab_y)
        return True

    def drag_to(self, pointer_x: float, pointer_y: float) -> Shape | None:
        """Pointer-move: try to move the dragged shape under the pointer."""
        if self.drag is None:
            return None
        d = self.drag
        self.shapes = mutation.move_shape(
            self.shapes, d.shape_id, pointer_x - d.grab_x, pointer_y - d.grab_y, self.board
        )
        return self.get(d.shape_id)

    def end_drag(self) -> None:
        """Pointer-up or pointer-leave."""
        self.drag = None

    @contextmanager
    def dragging(self, shape_id: str, grab_x: float = 0, grab_y: float = 0) -> Iterator[bool]:
        started = self.begin_drag(shape_id, grab_x, grab_y)
        try:
            yield started
        finally:
            self.end_drag()
