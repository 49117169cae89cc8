"""Errors raised while parsing the board field of a FEN string."""

from __future__ import annotations


class FenError(ValueError):
    """Base class for rejected FEN board fields."""

    def __init__(self, message: str, fen: str) -> None:
        super().__init__(f"{message}: {fen!r}")
        self.fen = fen


class IncorrectAmountOfSlash(FenError):
    """The board field did not split into exactly 8 rows."""


class IncorrectAmountOfTiles(FenError):
    """A row, or the board as a whole, did not cover exactly its squares."""


class UnknownCharacter(FenError):
    """A row held something other than a digit 1–9 or a piece letter."""

    def __init__(self, character: str, fen: str) -> None:
        super().__init__(f"Unknown character {character!r} in FEN board", fen)
        self.character = character
