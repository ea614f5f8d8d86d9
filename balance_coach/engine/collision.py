"""Collision index: linear scan over the live shape set.

Boards hold tens of shapes, so no spatial structure is kept.
"""

from __future__ import annotations

from collections.abc import Iterable

from balance_coach.engine.shapes import Shape
from balance_coach.utils.geometry import Rect, overlaps


def has_collision(
    shapes: Iterable[Shape],
    candidate: Rect,
    exclude: str | Iterable[str | None] | None = None,
) -> bool:
    """True if ``candidate`` overlaps any shape whose id is not excluded."""
    if exclude is None:
        skip: set[str | None] = set()
    elif isinstance(exclude, str):
        skip = {exclude}
    else:
        skip = set(exclude)

    for shape in shapes:
        if shape.id in skip:
            continue
        if overlaps(candidate, shape.rect):
            return True
    return False
