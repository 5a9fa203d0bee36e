"""Tests for Position — make / unmake and the check flag."""

from chessdev.core.enums import PieceKind, Side
from chessdev.core.move import Move
from chessdev.core.notation import position_from_fen, position_to_fen
from chessdev.core.piece import Piece
from chessdev.core.position import Position
from chessdev.core.types import E2, E4, E7, E8, parse_square


class TestMakeUnmake:
    def test_quiet_move(self) -> None:
        pos = Position()
        captured = pos.make_move(Move(E2, E4))
        assert captured is None
        assert pos.board[E4] == Piece(Side.WHITE, PieceKind.PAWN)
        assert pos.board[E2] is None
        assert pos.side_to_move == Side.BLACK
        assert not pos.in_check
        assert pos.ply_count == 1

    def test_round_trip(self) -> None:
        pos = Position()
        before = pos.board.copy()
        move = Move(E2, E4)
        pos.make_move(move)
        pos.unmake_move(move)
        assert pos.board == before
        assert pos.side_to_move == Side.WHITE
        assert not pos.in_check
        assert pos.ply_count == 0

    def test_capture_round_trip(self) -> None:
        fen = "4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1"
        pos = position_from_fen(fen)
        move = Move(parse_square("e4"), parse_square("d5"))
        captured = pos.make_move(move)
        assert captured == Piece(Side.BLACK, PieceKind.PAWN)
        pos.unmake_move(move)
        assert position_to_fen(pos) == fen

    def test_promotion(self) -> None:
        pos = position_from_fen("k7/4P3/8/8/8/8/8/4K3 w - - 0 1")
        move = Move(E7, E8, PieceKind.KNIGHT)
        pos.make_move(move)
        assert pos.board[E8] == Piece(Side.WHITE, PieceKind.KNIGHT)
        pos.unmake_move(move)
        assert pos.board[E7] == Piece(Side.WHITE, PieceKind.PAWN)
        assert pos.board[E8] is None

    def test_promotion_ignored_for_non_pawns(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        a1, a7 = parse_square("a1"), parse_square("a7")
        pos.make_move(Move(a1, a7, PieceKind.QUEEN))
        assert pos.board[a7] == Piece(Side.WHITE, PieceKind.ROOK)

    def test_check_flag_for_next_side(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        move = Move(parse_square("a1"), parse_square("a8"))
        pos.make_move(move)
        assert pos.side_to_move == Side.BLACK
        assert pos.in_check
        pos.unmake_move(move)
        assert not pos.in_check

    def test_king_cache_follows_king(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        move = Move(parse_square("e1"), parse_square("d2"))
        pos.make_move(move)
        assert pos.board.king_square(Side.WHITE) == parse_square("d2")
        pos.unmake_move(move)
        assert pos.board.king_square(Side.WHITE) == parse_square("e1")

    def test_make_move_never_sets_terminal(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        pos.make_move(Move(parse_square("a1"), parse_square("a8")))
        assert not pos.terminal


class TestCopy:
    def test_copy_is_independent(self) -> None:
        pos = Position()
        clone = pos.copy()
        clone.make_move(Move(E2, E4))
        assert pos.board[E2] is not None
        assert pos.side_to_move == Side.WHITE

    def test_copy_keeps_flags(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        pos.mark_terminal()
        clone = pos.copy()
        assert clone.in_check
        assert clone.terminal
