"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from balance_coach.engine.composition import CompositionEngine
from balance_coach.engine.shapes import Board, make_shape, mirror_pair

# Reference board: 800x600 with a 140px floor band, fulcrum at 400.
BOARD = Board(width=800, height=600, floor_height=140)


def square(shape_id: str, x: float, y: float, size: float = 100, shade: int = 3):
    return make_shape(shape_id, "square", size, shade, x, y)


def rectangle(shape_id: str, x: float, y: float, size: float = 100, shade: int = 1):
    return make_shape(shape_id, "rectangle", size, shade, x, y)


def linked(shape, board: Board = BOARD):
    """Return ``[shape, twin]`` as a linked mirror pair."""
    return list(mirror_pair(shape, board.width))


@pytest.fixture
def board() -> Board:
    return BOARD


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def engine() -> CompositionEngine:
    return CompositionEngine(BOARD, seed=42)
