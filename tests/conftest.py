"""Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides:
- Environment variable loading from .env
- Shared boards and move histories used across the core tests
"""

from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

from scorekeeper.core.board import Board
from scorekeeper.core.types import GameMove, Placement


def pytest_configure(config):
    """Load environment variables from .env file."""
    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


def word_placements(row: int, col: int, word: str, horizontal: bool = True) -> list[Placement]:
    """Placements for `word` starting at (row, col); '?' marks a blank."""
    out: list[Placement] = []
    for i, ch in enumerate(word):
        r, c = (row, col + i) if horizontal else (row + i, col)
        out.append(Placement(r, c, ch))
    return out


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def cat_board() -> Board:
    """CAT on row 7, columns 7-9 (C on the centre square)."""
    b = Board()
    b.place_letters(word_placements(7, 7, "CAT"))
    return b


@pytest.fixture
def cat_history() -> list[GameMove]:
    """Player 0 opened with CAT, player 1 added S under the A."""
    return [
        GameMove(0, word_placements(7, 7, "CAT")),
        GameMove(1, [Placement(8, 8, "S")]),
    ]
