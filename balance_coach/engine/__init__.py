"""Composition engine: placement, mirroring, mutation and balance."""

from balance_coach.engine.balance import BalanceReport, Moments, balance_report, compute_moments, tilt_angle
from balance_coach.engine.composition import CompositionEngine
from balance_coach.engine.errors import PlacementError, SessionNotFound
from balance_coach.engine.shapes import Board, Shape

__all__ = [
    "BalanceReport",
    "Board",
    "CompositionEngine",
    "Moments",
    "PlacementError",
    "SessionNotFound",
    "Shape",
    "balance_report",
    "compute_moments",
    "tilt_angle",
]
