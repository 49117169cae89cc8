"""Tests for Piece."""

import pytest

from fenboard.core.enums import Color, PieceType
from fenboard.core.piece import Piece


class TestPieceChars:
    @pytest.mark.parametrize(
        ("char", "color", "piece_type"),
        [
            ("P", Color.WHITE, PieceType.PAWN),
            ("N", Color.WHITE, PieceType.KNIGHT),
            ("B", Color.WHITE, PieceType.BISHOP),
            ("R", Color.WHITE, PieceType.ROOK),
            ("Q", Color.WHITE, PieceType.QUEEN),
            ("K", Color.WHITE, PieceType.KING),
            ("p", Color.BLACK, PieceType.PAWN),
            ("n", Color.BLACK, PieceType.KNIGHT),
            ("b", Color.BLACK, PieceType.BISHOP),
            ("r", Color.BLACK, PieceType.ROOK),
            ("q", Color.BLACK, PieceType.QUEEN),
            ("k", Color.BLACK, PieceType.KING),
        ],
    )
    def test_from_char(self, char: str, color: Color, piece_type: PieceType) -> None:
        piece = Piece.from_char(char)
        assert piece == Piece(color, piece_type)
        assert str(piece) == char

    @pytest.mark.parametrize("char", ["x", "0", "9", "-", "", "Kq", " "])
    def test_invalid_char_raises(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_pieces_are_hashable_values(self) -> None:
        assert len({Piece.from_char("q"), Piece(Color.BLACK, PieceType.QUEEN)}) == 1


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite is Color.BLACK
        assert Color.BLACK.opposite is Color.WHITE

    def test_str(self) -> None:
        assert str(Color.WHITE) == "white"
