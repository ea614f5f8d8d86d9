"""Tests for the balance calculator."""

from __future__ import annotations

import numpy as np
import pytest

from balance_coach.engine.balance import (
    Moments,
    balance_report,
    balance_status,
    compute_moments,
    display_tilt,
    tilt_angle,
)
from tests.conftest import BOARD, linked, rectangle, square


def test_empty_board_is_balanced():
    report = balance_report([], BOARD.fulcrum_x)
    assert report.moments == Moments(0.0, 0.0)
    assert report.tilt_angle == 0
    assert report.status == "Balanced"
    assert report.is_balanced


def test_symmetric_pair_balances_exactly():
    shapes = linked(square("a", 300, 100, size=100, shade=3))
    assert shapes[1].x == 400
    m = compute_moments(shapes, BOARD.fulcrum_x)
    assert m.left == m.right == 150 * 50
    assert tilt_angle(m) == 0
    assert balance_status(tilt_angle(m)) == "Balanced"


def test_moment_is_weight_times_distance():
    s = square("a", 0, 0, size=100, shade=1)  # weight 100, center 50
    m = compute_moments([s], BOARD.fulcrum_x)
    assert m.left == 100 * 350
    assert m.right == 0


def test_shape_centered_on_fulcrum_counts_right():
    s = square("a", 350, 0, size=100, shade=1)
    m = compute_moments([s], BOARD.fulcrum_x)
    assert m == Moments(0.0, 0.0)


def test_tilt_sign_follows_heavier_side():
    heavy_right = [square("l", 300, 0, shade=1), square("r", 400, 0, shade=5)]
    m = compute_moments(heavy_right, BOARD.fulcrum_x)
    assert m.right > m.left
    assert tilt_angle(m) > 0

    heavy_left = [square("l", 0, 0, shade=5), square("r", 400, 0, shade=1)]
    m = compute_moments(heavy_left, BOARD.fulcrum_x)
    assert m.left > m.right
    assert tilt_angle(m) < 0


def test_tilt_scale():
    assert tilt_angle(Moments(left=0, right=8000)) == 1.0
    assert tilt_angle(Moments(left=16000, right=0)) == -2.0


@pytest.mark.parametrize(
    "angle,status",
    [(0, "Balanced"), (0.49, "Balanced"), (-0.49, "Balanced"), (0.5, "Tipped Right"), (-0.5, "Tipped Left"), (12, "Tipped Right")],
)
def test_status_band(angle, status):
    assert balance_status(angle) == status


def test_display_tilt_clamped():
    assert display_tilt(40) == 25
    assert display_tilt(-40) == -25
    assert display_tilt(3.5) == 3.5


def test_order_independent_and_non_negative():
    rng = np.random.default_rng(21)
    shapes = [
        square(f"s{i}", float(rng.integers(0, 700)), 0, size=int(rng.choice([60, 80, 100])), shade=int(rng.integers(1, 6)))
        for i in range(12)
    ] + [rectangle(f"r{i}", float(rng.integers(0, 750)), 200, shade=int(rng.integers(1, 6))) for i in range(6)]
    base = compute_moments(shapes, BOARD.fulcrum_x)
    assert base.left >= 0 and base.right >= 0
    for _ in range(10):
        order = rng.permutation(len(shapes))
        assert compute_moments([shapes[i] for i in order], BOARD.fulcrum_x) == base


def test_report_counts_sides():
    shapes = [square("a", 0, 0), square("b", 120, 0), square("c", 500, 0)]
    report = balance_report(shapes, BOARD.fulcrum_x)
    assert (report.left_count, report.right_count) == (2, 1)
    assert report.status == "Tipped Left"
    assert report.display_tilt == max(-25, report.tilt_angle)
