"""Mutation gateway: every edit to a shape list goes through here.

All functions take a shape list and return a new list; a rejected edit returns
the input list unchanged. Mirror partners receive only the attributes that
must stay identical across the pair. Positions are never copied across the
pair; the move/rotate/resize flows compute the reflected x explicitly.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from balance_coach.engine.constants import GRID_UNIT
from balance_coach.engine.placement import is_placeable
from balance_coach.engine.shapes import Board, Shape, dimensions, find_shape, shape_saturation, shape_weight
from balance_coach.utils.geometry import Rect, clamp, mirror_x, recenter, snap

# Attributes copied to a mirror partner on update.
MIRRORED_FIELDS = ("width", "height", "shade", "weight", "saturation")


def update_shape(shapes: list[Shape], shape_id: str, **changes: Any) -> list[Shape]:
    """Apply ``changes`` to one shape, propagating the mirrored subset to its partner."""
    target = find_shape(shapes, shape_id)
    if target is None:
        return shapes

    partner_changes = {k: v for k, v in changes.items() if k in MIRRORED_FIELDS}
    result = []
    for s in shapes:
        if s.id == shape_id:
            s = replace(s, **changes)
        elif target.mirror_id is not None and s.id == target.mirror_id and partner_changes:
            s = replace(s, **partner_changes)
        result.append(s)
    return result


def _set_geometry(shapes: list[Shape], updates: dict[str, dict[str, Any]]) -> list[Shape]:
    """Apply per-id field updates with no propagation."""
    return [replace(s, **updates[s.id]) if s.id in updates else s for s in shapes]


def _editable(shapes: list[Shape], shape_id: str) -> Shape | None:
    target = find_shape(shapes, shape_id)
    if target is None or target.is_challenge:
        return None
    return target


def delete_shape(shapes: list[Shape], shape_id: str) -> list[Shape]:
    """Remove a shape and its mirror partner. Challenge or unknown ids are a no-op."""
    target = _editable(shapes, shape_id)
    if target is None:
        return shapes
    doomed = {target.id, target.mirror_id}
    return [s for s in shapes if s.id not in doomed]


def _reshape(shapes: list[Shape], target: Shape, rect: Rect, board: Board, **extra: Any) -> list[Shape]:
    """Commit a new footprint for ``target`` (and its reflected partner) if it validates."""
    partner = find_shape(shapes, target.mirror_id)
    exclude = (target.id, target.mirror_id)
    if not is_placeable(shapes, rect, board, mirrored=partner is not None, exclude=exclude):
        return shapes

    geometry = {"x": rect.x, "y": rect.y, "width": rect.w, "height": rect.h, **extra}
    updates = {target.id: geometry}
    if partner is not None:
        updates[partner.id] = {**geometry, "x": mirror_x(rect.x, rect.w, board.width)}
    return _set_geometry(shapes, updates)


def rotate_shape(shapes: list[Shape], shape_id: str, board: Board) -> list[Shape]:
    """Rotate a rectangle 90° about its center, or do nothing if the result would not fit."""
    target = _editable(shapes, shape_id)
    if target is None or target.kind != "rectangle":
        return shapes
    rect = recenter(target.rect, target.height, target.width, GRID_UNIT)
    return _reshape(shapes, target, rect, board)


def resize_shape(shapes: list[Shape], shape_id: str, size: float, board: Board) -> list[Shape]:
    """Set a new grid-aligned size, keeping the center and the kind's proportions."""
    target = _editable(shapes, shape_id)
    if target is None or size <= 0 or size % GRID_UNIT != 0:
        return shapes
    width, height = dimensions(target.kind, size)
    # rotated rectangles keep their orientation
    if target.kind == "rectangle" and target.width > target.height:
        width, height = height, width
    rect = recenter(target.rect, width, height, GRID_UNIT)
    return _reshape(shapes, target, rect, board, weight=shape_weight(width, height, target.shade))


def set_shade(shapes: list[Shape], shape_id: str, shade: int) -> list[Shape]:
    """Change the shade level, recomputing weight and saturation for the pair."""
    target = _editable(shapes, shape_id)
    if target is None:
        return shapes
    return update_shape(
        shapes,
        shape_id,
        shade=shade,
        weight=shape_weight(target.width, target.height, shade),
        saturation=shape_saturation(shade),
    )


def move_shape(shapes: list[Shape], shape_id: str, x: float, y: float, board: Board) -> list[Shape]:
    """One drag step toward top-left ``(x, y)``.

    The position is snapped, clamped to the board, and pushed off the fulcrum
    toward the side holding the shape's center. Nothing moves if the target
    (or, for a linked pair, the reflected target) collides.
    """
    target = _editable(shapes, shape_id)
    if target is None:
        return shapes

    nx = clamp(snap(x, GRID_UNIT), 0, board.width - target.width)
    ny = clamp(snap(y, GRID_UNIT), 0, board.floor_y - target.height)
    fulcrum = board.fulcrum_x
    if nx < fulcrum < nx + target.width:
        nx = fulcrum - target.width if nx + target.width / 2 < fulcrum else fulcrum

    if nx == target.x and ny == target.y:
        return shapes

    rect = Rect(nx, ny, target.width, target.height)
    partner = find_shape(shapes, target.mirror_id)
    if not is_placeable(shapes, rect, board, mirrored=partner is not None, exclude=(target.id, target.mirror_id)):
        return shapes

    updates = {target.id: {"x": nx, "y": ny}}
    if partner is not None:
        updates[partner.id] = {"x": mirror_x(nx, target.width, board.width), "y": ny}
    return _set_geometry(shapes, updates)
