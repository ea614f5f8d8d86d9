"""Tests for the coach feedback prompt."""

from __future__ import annotations

from balance_coach.llm.prompts import build_feedback_prompt, describe_shapes
from tests.conftest import BOARD, rectangle, square


def test_describe_shapes_reports_side_size_and_shade():
    shapes = [square("a", 100, 0, size=100, shade=3), rectangle("b", 500, 0, size=120, shade=5)]
    text = describe_shapes(shapes, BOARD.fulcrum_x)
    lines = text.splitlines()
    assert lines[0] == "- A square on the Left side (Size: 100x100, Shade Level: 3 - Medium)"
    assert lines[1] == "- A rectangle on the Right side (Size: 120x60, Shade Level: 5 - Darkest)"


def test_prompt_includes_status_mode_and_counts():
    shapes = [square("a", 0, 0), square("b", 120, 0), square("c", 500, 0)]
    prompt = build_feedback_prompt(shapes, -8.06, "asymmetrical", BOARD.fulcrum_x)
    assert "The current mode is: asymmetrical." in prompt
    assert "Tipped Left (Tilt Angle: -8.1 degrees)" in prompt
    assert "Total Shapes: 3 (2 on left, 1 on right)" in prompt
    assert "under 150 words" in prompt


def test_prompt_balanced_status():
    prompt = build_feedback_prompt([], 0.2, "symmetrical", BOARD.fulcrum_x)
    assert "Balanced (Tilt Angle: 0.2 degrees)" in prompt
    assert "- (no shapes)" in prompt
