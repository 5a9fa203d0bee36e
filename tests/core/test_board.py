"""Tests for Board: initial array, king cache, probing and rendering."""

import pytest

from chessdev.core.board import Board
from chessdev.core.enums import PieceKind, Side
from chessdev.core.piece import Piece
from chessdev.core.types import A1, D1, D8, E1, E2, E4, E8, H8, parse_square

WK = Piece(Side.WHITE, PieceKind.KING)
BK = Piece(Side.BLACK, PieceKind.KING)
WQ = Piece(Side.WHITE, PieceKind.QUEEN)
BR = Piece(Side.BLACK, PieceKind.ROOK)


class TestInitial:
    def test_back_rows(self) -> None:
        b = Board.initial()
        assert b[A1] == Piece(Side.WHITE, PieceKind.ROOK)
        assert b[D1] == WQ
        assert b[E1] == WK
        assert b[D8] == Piece(Side.BLACK, PieceKind.QUEEN)
        assert b[E8] == BK
        assert b[H8] == BR

    def test_pawn_rows(self) -> None:
        b = Board.initial()
        for col in "abcdefgh":
            assert b[parse_square(f"{col}2")] == Piece(Side.WHITE, PieceKind.PAWN)
            assert b[parse_square(f"{col}7")] == Piece(Side.BLACK, PieceKind.PAWN)

    def test_middle_empty(self) -> None:
        b = Board.initial()
        for sq in range(16, 48):
            assert b.is_empty(sq)

    def test_piece_counts(self) -> None:
        b = Board.initial()
        assert len(b.all_pieces(Side.WHITE)) == 16
        assert len(b.all_pieces(Side.BLACK)) == 16

    def test_king_cache(self) -> None:
        b = Board.initial()
        assert b.king_square(Side.WHITE) == E1
        assert b.king_square(Side.BLACK) == E8


class TestKingCache:
    def test_follows_king(self) -> None:
        b = Board()
        b[E1] = WK
        b[E1] = None
        b[E2] = WK
        assert b.king_square(Side.WHITE) == E2

    def test_missing_king_raises(self) -> None:
        b = Board()
        assert not b.has_king(Side.BLACK)
        with pytest.raises(ValueError, match="No BLACK king"):
            b.king_square(Side.BLACK)

    def test_overwriting_king_clears_cache(self) -> None:
        b = Board()
        b[E8] = BK
        b[E8] = WQ
        assert not b.has_king(Side.BLACK)

    def test_clear(self) -> None:
        b = Board.initial()
        b.clear()
        assert not b.has_king(Side.WHITE)
        assert b.all_pieces(Side.WHITE) == []


class TestProbe:
    def test_restores_cells(self) -> None:
        b = Board.initial()
        before = b.copy()
        pawn = b[E2]
        assert pawn is not None
        with b.probe(E2, E4, pawn):
            assert b[E2] is None
            assert b[E4] == pawn
        assert b == before

    def test_restores_king_cache(self) -> None:
        b = Board.initial()
        b[E2] = None
        with b.probe(E1, E2, WK):
            assert b.king_square(Side.WHITE) == E2
        assert b.king_square(Side.WHITE) == E1

    def test_restores_captured_king_on_error(self) -> None:
        b = Board()
        b[E1] = WK
        b[E8] = BK
        b[D8] = WQ
        before = b.copy()
        with pytest.raises(RuntimeError), b.probe(D8, E8, WQ):
            assert not b.has_king(Side.BLACK)
            raise RuntimeError("boom")
        assert b == before
        assert b.king_square(Side.BLACK) == E8


class TestCopyAndEquality:
    def test_copy_is_independent(self) -> None:
        b = Board.initial()
        c = b.copy()
        c[E2] = None
        assert b[E2] is not None
        assert b != c

    def test_equal_boards(self) -> None:
        assert Board.initial() == Board.initial()


class TestLabels:
    def test_initial_labels(self) -> None:
        rows = Board.initial().labels()
        assert len(rows) == 8
        assert all(len(row) == 8 for row in rows)
        assert rows[0] == ["WR", "WN", "WB", "WQ", "WK", "WB", "WN", "WR"]
        assert rows[1] == ["WP"] * 8
        assert rows[4] == ["**"] * 8
        assert rows[6] == ["BP"] * 8
        assert rows[7] == ["BR", "BN", "BB", "BQ", "BK", "BB", "BN", "BR"]
