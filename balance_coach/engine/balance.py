"""Balance calculator: torque about the fulcrum and the derived beam tilt."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from balance_coach.engine.constants import BALANCED_TOLERANCE, MAX_DISPLAY_TILT, TILT_SCALE
from balance_coach.engine.shapes import Shape


@dataclass(frozen=True)
class Moments:
    left: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class BalanceReport:
    moments: Moments
    tilt_angle: float
    display_tilt: float
    status: str
    left_count: int
    right_count: int

    @property
    def is_balanced(self) -> bool:
        return self.status == "Balanced"


def compute_moments(shapes: Iterable[Shape], fulcrum_x: float) -> Moments:
    """Sum weight × |center − fulcrum| per side. Shapes centered on the fulcrum count right."""
    left: list[float] = []
    right: list[float] = []
    for s in shapes:
        center = s.center_x
        moment = s.weight * abs(center - fulcrum_x)
        (left if center < fulcrum_x else right).append(moment)
    # fsum is exactly rounded, so the totals do not depend on shape order
    return Moments(left=math.fsum(left), right=math.fsum(right))


def tilt_angle(moments: Moments) -> float:
    """Beam angle in degrees; positive tips right."""
    return (moments.right - moments.left) / TILT_SCALE


def display_tilt(angle: float) -> float:
    return max(-MAX_DISPLAY_TILT, min(MAX_DISPLAY_TILT, angle))


def balance_status(angle: float) -> str:
    if abs(angle) < BALANCED_TOLERANCE:
        return "Balanced"
    if angle > 0:
        return "Tipped Right"
    return "Tipped Left"


def balance_report(shapes: list[Shape], fulcrum_x: float) -> BalanceReport:
    moments = compute_moments(shapes, fulcrum_x)
    angle = tilt_angle(moments)
    left_count = sum(1 for s in shapes if s.center_x < fulcrum_x)
    return BalanceReport(
        moments=moments,
        tilt_angle=angle,
        display_tilt=display_tilt(angle),
        status=balance_status(angle),
        left_count=left_count,
        right_count=len(shapes) - left_count,
    )
