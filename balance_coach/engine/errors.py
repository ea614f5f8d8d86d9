"""Domain errors raised by the composition engine."""

from __future__ import annotations


class CompositionError(Exception):
    """Base class for composition engine errors."""


class PlacementError(CompositionError):
    """No collision-free position was found within the retry budget."""

    def __init__(self, message: str = "No space to add shape! Try moving existing shapes.") -> None:
        super().__init__(message)
        self.message = message


class SessionNotFound(CompositionError):
    """No board session exists for the given id."""

    def __init__(self, board_id: str) -> None:
        super().__init__(f"Board session '{board_id}' not found")
        self.board_id = board_id
