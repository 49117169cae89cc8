"""Board - piece placement on an 8x8 board, read from a FEN board field."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Final

from fenboard.core.errors import (
    IncorrectAmountOfSlash,
    IncorrectAmountOfTiles,
    UnknownCharacter,
)
from fenboard.core.piece import Piece
from fenboard.core.types import BOARD_WIDTH, TILE_COUNT, tile_index

_LOGGER = logging.getLogger(__name__)

STARTING_BOARD_FEN: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_TILE: Final = "-"


class Board:
    """Fixed 64-slot board addressed by ``(x, y)`` coordinates."""

    __slots__ = ("_tiles",)

    def __init__(self) -> None:
        self._tiles: list[Piece | None] = [None] * TILE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Parse the board part of a FEN string.

        Rows run top to bottom (rank 8 first). Digits 1-9 skip that many empty
        squares; every other character must be a piece letter. Raises a
        :class:`~fenboard.core.errors.FenError` subclass on the first
        violation, so a half-filled board is never returned.

        Example::

            Board.from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
        """
        rows = fen.split("/")
        if len(rows) != BOARD_WIDTH:
            _LOGGER.debug("FEN board has %d rows instead of 8: %r", len(rows), fen)
            raise IncorrectAmountOfSlash(
                f"FEN board must contain 8 rows, got {len(rows)}", fen
            )

        tiles: list[Piece | None] = [None] * TILE_COUNT
        i = 0
        for row_index, row in enumerate(rows):
            row_end = row_index * BOARD_WIDTH + BOARD_WIDTH
            for ch in row:
                if i >= row_end:
                    _LOGGER.debug("FEN row %d overflows at %r: %r", row_index, ch, fen)
                    raise IncorrectAmountOfTiles(
                        f"FEN row {row_index + 1} is wider than 8 squares", fen
                    )

                if ch in "123456789":
                    i += int(ch)
                    continue

                try:
                    piece = Piece.from_char(ch)
                except ValueError:
                    _LOGGER.debug("Unknown FEN character %r: %r", ch, fen)
                    raise UnknownCharacter(ch, fen) from None
                tiles[i] = piece
                i += 1

            if i != row_end:
                _LOGGER.debug("FEN row %d covers %d squares: %r", row_index, i, fen)
                raise IncorrectAmountOfTiles(
                    f"FEN row {row_index + 1} does not cover 8 squares", fen
                )

        if i != TILE_COUNT:
            raise IncorrectAmountOfTiles(
                f"FEN board must cover 64 squares, got {i}", fen
            )

        board = cls()
        board._tiles = tiles
        return board

    @classmethod
    def initial(cls) -> Board:
        """Standard starting placement."""
        return cls.from_fen(STARTING_BOARD_FEN)

    # -- Element access -----------------------------------------------------

    def get_tile(self, x: int, y: int) -> Piece | None:
        """Piece on ``(x, y)`` or ``None`` if the tile is empty."""
        return self._tiles[tile_index(x, y)]

    def set_tile(self, x: int, y: int, piece: Piece) -> None:
        """Put *piece* on ``(x, y)``, replacing whatever was there."""
        self._tiles[tile_index(x, y)] = piece

    def remove_tile(self, x: int, y: int) -> None:
        """Empty ``(x, y)``."""
        self._tiles[tile_index(x, y)] = None

    # -- Copying / serialisation --------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._tiles = self._tiles.copy()
        return b

    def to_fen(self) -> str:
        """Canonical FEN board field, empty runs compressed to digits."""
        rows: list[str] = []
        for start in range(0, TILE_COUNT, BOARD_WIDTH):
            empty = 0
            row = ""
            for piece in self._tiles[start : start + BOARD_WIDTH]:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return TILE_COUNT

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Debug dump: 8 lines of piece letters, ``-`` for empty tiles."""
        lines: list[str] = []
        for start in range(0, TILE_COUNT, BOARD_WIDTH):
            lines.append(
                "".join(
                    str(p) if p is not None else EMPTY_TILE
                    for p in self._tiles[start : start + BOARD_WIDTH]
                )
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({self.to_fen()!r})"
