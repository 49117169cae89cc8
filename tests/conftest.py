"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from fenboard.core.board import Board


@pytest.fixture
def initial_board() -> Board:
    """Fresh starting placement for each test."""
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    return Board()
