"""LangChain ChatAnthropic wrapper for coach feedback.

``request_feedback`` never raises: a missing key, a network error or an empty
reply all turn into a fixed, student-safe message.
"""

from __future__ import annotations

import logging

from balance_coach.config import settings
from balance_coach.engine.constants import BOARD_WIDTH
from balance_coach.engine.shapes import Shape
from balance_coach.llm.prompts import build_feedback_prompt

logger = logging.getLogger(__name__)

FALLBACK_FEEDBACK = "Sorry, I couldn't analyze your artwork right now. Please try again later."
EMPTY_FEEDBACK = "Could not generate analysis."


def _build_llm():
    from langchain_anthropic import ChatAnthropic

    return ChatAnthropic(
        model=settings.model_feedback,
        api_key=settings.anthropic_api_key,
        max_tokens=settings.feedback_max_tokens,
    )


def _content_text(content) -> str:
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


async def request_feedback(
    shapes: list[Shape],
    tilt_angle: float,
    mode: str,
    fulcrum_x: float = BOARD_WIDTH / 2,
) -> str:
    """Ask the coach model for a short critique of the composition."""
    if not settings.anthropic_api_key:
        logger.warning("Coach feedback requested but ANTHROPIC_API_KEY is not set")
        return FALLBACK_FEEDBACK

    from langchain_core.messages import HumanMessage

    prompt = build_feedback_prompt(shapes, tilt_angle, mode, fulcrum_x)
    try:
        llm = _build_llm()
        response = await llm.ainvoke([HumanMessage(content=prompt)])
    except Exception as e:
        logger.warning("Coach feedback request failed: %s", e)
        return FALLBACK_FEEDBACK

    text = _content_text(response.content).strip()
    return text or EMPTY_FEEDBACK
