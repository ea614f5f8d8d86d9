"""Prompt template for the art-coach feedback request."""

from __future__ import annotations

from balance_coach.engine.balance import balance_report, balance_status
from balance_coach.engine.shapes import Shape

_FEEDBACK_TEMPLATE = """You are a helpful and objective art coach for 6th grade students.

Analyze the following graphic design composition created by a student in the "Visual Balance Coach" app.

Context:
- The goal is to create a visually balanced composition using shapes.
- The current mode is: {mode}.
- The mechanical balance beam status is: {status} (Tilt Angle: {tilt:.1f} degrees).
- Total Shapes: {total} ({left_count} on left, {right_count} on right).

Shape Details:
{shape_details}

Instructions:
1. Confirm if the composition is balanced mechanically.
2. Discuss the visual weight distribution (size/color darkness).
3. Comment on the use of symmetry vs asymmetry.
4. Provide one clear strength and one specific, constructive tip for improvement.
5. Tone: Friendly and professional, but not overly excited. Avoid excessive exclamation marks. Use a coaching voice, not a cheerleader voice.
6. Keep it under 150 words."""


def describe_shapes(shapes: list[Shape], fulcrum_x: float) -> str:
    """One bullet per shape: kind, side of the fulcrum, size and shade."""
    lines = []
    for s in shapes:
        side = "Left side" if s.side(fulcrum_x) == "left" else "Right side"
        lines.append(
            f"- A {s.kind} on the {side} "
            f"(Size: {s.height:g}x{s.width:g}, Shade Level: {s.shade} - {s.shade_name})"
        )
    return "\n".join(lines)


def build_feedback_prompt(
    shapes: list[Shape],
    tilt_angle: float,
    mode: str,
    fulcrum_x: float,
) -> str:
    # side counts come from the snapshot; the tilt is whatever the caller measured
    report = balance_report(shapes, fulcrum_x)
    return _FEEDBACK_TEMPLATE.format(
        mode=mode,
        status=balance_status(tilt_angle),
        tilt=tilt_angle,
        total=len(shapes),
        left_count=report.left_count,
        right_count=report.right_count,
        shape_details=describe_shapes(shapes, fulcrum_x) or "- (no shapes)",
    )


def get_prompt_template() -> str:
    return _FEEDBACK_TEMPLATE
