"""fenboard: chess board placement parsed from the FEN board field."""

from fenboard.core import (
    Board,
    Color,
    FenError,
    IncorrectAmountOfSlash,
    IncorrectAmountOfTiles,
    Piece,
    PieceType,
    UnknownCharacter,
)

__all__ = [
    "Board",
    "Color",
    "FenError",
    "IncorrectAmountOfSlash",
    "IncorrectAmountOfTiles",
    "Piece",
    "PieceType",
    "UnknownCharacter",
]
