"""Tile type alias and coordinate helpers.

Board layout (row-major, first FEN row first):
    (0, 0)=0 ... (7, 0)=7      rank 8
    (0, 1)=8 ... (7, 1)=15     rank 7
    ...
    (0, 7)=56 ... (7, 7)=63    rank 1

``x`` is the file (a-h), ``y`` the row counted from the top of the board.
"""

from __future__ import annotations

from typing import Final, TypeAlias

Tile: TypeAlias = int  # 0–63

BOARD_WIDTH: Final = 8
TILE_COUNT: Final = BOARD_WIDTH * BOARD_WIDTH


def is_valid_coordinate(x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies on the board."""
    return 0 <= x < BOARD_WIDTH and 0 <= y < BOARD_WIDTH


def tile_index(x: int, y: int) -> Tile:
    """Slot index of ``(x, y)``.

    Coordinates outside 0–7 are a caller bug, not bad input, so they raise
    :class:`IndexError` instead of being wrapped like a negative list index.
    """
    if not is_valid_coordinate(x, y):
        raise IndexError(f"x and y must be between 0 and 7, got ({x}, {y})")
    return y * BOARD_WIDTH + x


def coordinates_of(index: Tile) -> tuple[int, int]:
    """Inverse of :func:`tile_index`, e.g. 63 → (7, 7)."""
    if not 0 <= index < TILE_COUNT:
        raise IndexError(f"Tile index must be between 0 and 63, got {index}")
    return index % BOARD_WIDTH, index // BOARD_WIDTH
