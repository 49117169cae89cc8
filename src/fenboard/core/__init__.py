"""Core domain layer: board placement and its FEN board-field codec.

Quick start::

    from fenboard.core import Board, STARTING_BOARD_FEN

    board = Board.from_fen(STARTING_BOARD_FEN)
    print(board)
"""

from fenboard.core.board import EMPTY_TILE, STARTING_BOARD_FEN, Board
from fenboard.core.enums import Color, PieceType
from fenboard.core.errors import (
    FenError,
    IncorrectAmountOfSlash,
    IncorrectAmountOfTiles,
    UnknownCharacter,
)
from fenboard.core.piece import Piece
from fenboard.core.types import (
    BOARD_WIDTH,
    TILE_COUNT,
    Tile,
    coordinates_of,
    is_valid_coordinate,
    tile_index,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_WIDTH",
    "TILE_COUNT",
    "Tile",
    "coordinates_of",
    "is_valid_coordinate",
    "tile_index",
    # Domain objects
    "Board",
    "Piece",
    "EMPTY_TILE",
    "STARTING_BOARD_FEN",
    # Errors
    "FenError",
    "IncorrectAmountOfSlash",
    "IncorrectAmountOfTiles",
    "UnknownCharacter",
]
