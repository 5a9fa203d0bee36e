"""Move legality: per-piece rules, declaration protocol and self-check guard."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessdev.core.attacks import is_in_check
from chessdev.core.board import Board
from chessdev.core.enums import PROMOTION_KINDS, PieceKind, Side
from chessdev.core.move import Move, MoveRequest
from chessdev.core.piece import Piece
from chessdev.core.types import Square, col_of, row_of

if TYPE_CHECKING:
    from chessdev.core.position import Position

GeometryRule = Callable[[Board, Side, Square, Square], bool]


# -- Geometry rules (one per piece kind) -------------------------------------


def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Cells strictly between two squares on a straight line are empty."""
    dr = row_of(to_sq) - row_of(from_sq)
    dc = col_of(to_sq) - col_of(from_sq)
    step = (dr > 0) - (dr < 0)
    step = step * 8 + ((dc > 0) - (dc < 0))
    sq = from_sq + step
    while sq != to_sq:
        if board[sq] is not None:
            return False
        sq += step
    return True


def _slider_rule(*, orthogonal: bool, diagonal: bool) -> GeometryRule:
    def rule(board: Board, _side: Side, from_sq: Square, to_sq: Square) -> bool:
        dr = abs(row_of(to_sq) - row_of(from_sq))
        dc = abs(col_of(to_sq) - col_of(from_sq))
        on_line = (orthogonal and (dr == 0) != (dc == 0)) or (
            diagonal and dr == dc != 0
        )
        return on_line and _path_clear(board, from_sq, to_sq)

    return rule


def _knight_rule(_board: Board, _side: Side, from_sq: Square, to_sq: Square) -> bool:
    dr = abs(row_of(to_sq) - row_of(from_sq))
    dc = abs(col_of(to_sq) - col_of(from_sq))
    return (dr, dc) in ((1, 2), (2, 1))


def _king_rule(_board: Board, _side: Side, from_sq: Square, to_sq: Square) -> bool:
    dr = abs(row_of(to_sq) - row_of(from_sq))
    dc = abs(col_of(to_sq) - col_of(from_sq))
    return max(dr, dc) == 1


def _pawn_rule(board: Board, side: Side, from_sq: Square, to_sq: Square) -> bool:
    dr = row_of(to_sq) - row_of(from_sq)
    dc = col_of(to_sq) - col_of(from_sq)
    forward = side.forward
    target = board[to_sq]

    # Single step onto an empty cell
    if dc == 0 and dr == forward:
        return target is None
    # Double step from the home row; both cells must be empty
    if dc == 0 and dr == 2 * forward and row_of(from_sq) == side.home_row:
        return target is None and board[from_sq + 8 * forward] is None
    # Diagonal capture
    if abs(dc) == 1 and dr == forward:
        return target is not None and target.side != side
    return False


_RULES: dict[PieceKind, GeometryRule] = {
    PieceKind.PAWN: _pawn_rule,
    PieceKind.KNIGHT: _knight_rule,
    PieceKind.BISHOP: _slider_rule(orthogonal=False, diagonal=True),
    PieceKind.ROOK: _slider_rule(orthogonal=True, diagonal=False),
    PieceKind.QUEEN: _slider_rule(orthogonal=True, diagonal=True),
    PieceKind.KING: _king_rule,
}


def promotes(piece: Piece, to_sq: Square) -> bool:
    """Does *piece* arriving on *to_sq* have to promote?"""
    return piece.kind == PieceKind.PAWN and row_of(to_sq) == piece.side.far_row


# -- Validator ---------------------------------------------------------------


class MoveValidator:
    """Checks moves against a :class:`Position`.

    Two entry points share the same rule table and self-check guard:

    * :meth:`validate` / :meth:`explain` for declared :class:`MoveRequest`
      objects, where captures and promotions must be spelled out;
    * :meth:`is_legal` for bare (origin, destination) pairs, where capture
      is implied by an enemy piece on the destination and promotion is
      automatic.

    The board is probed internally but always restored before returning.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Declared requests --------------------------------------------------

    def validate(self, request: MoveRequest) -> bool:
        """Is *request* a legal, correctly declared move?"""
        return self.explain(request) is None

    def explain(self, request: MoveRequest) -> str | None:
        """Return why *request* is illegal, or ``None`` when it is legal."""
        board = self._board
        piece = board[request.from_sq]
        if piece is None:
            return "no piece on origin square"
        if piece != request.piece:
            return f"origin holds {piece.label}, not {request.piece.label}"
        if request.from_sq == request.to_sq:
            return "origin and destination are the same square"
        if not self._geometry_ok(piece, request.from_sq, request.to_sq):
            return f"{piece.kind.name.lower()} cannot move that way"

        reason = self._declaration_error(piece, request)
        if reason is not None:
            return reason

        placed = piece
        if request.promotion is not None:
            placed = request.promotion
        if self._exposes_king(piece, placed, request.from_sq, request.to_sq):
            return "move leaves own king in check"
        return None

    # -- Implicit (CPU / search) legality -----------------------------------

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Legality of moving whatever stands on *from_sq* to *to_sq*."""
        piece = self._board[from_sq]
        if piece is None or from_sq == to_sq:
            return False
        if not self._geometry_ok(piece, from_sq, to_sq):
            return False
        return not self._exposes_king(piece, piece, from_sq, to_sq)

    def generate_legal_moves(
        self,
        side: Side | None = None,
        promotion: PieceKind = PieceKind.QUEEN,
    ) -> list[Move]:
        """Every legal (origin, destination) pair for *side*.

        Promoting pawn moves carry *promotion* as their promotion kind.
        """
        if side is None:
            side = self._pos.side_to_move
        legal: list[Move] = []
        for from_sq in self._board.all_pieces(side):
            piece = self._board[from_sq]
            assert piece is not None
            for to_sq in range(64):
                if self.is_legal(from_sq, to_sq):
                    promo = promotion if promotes(piece, to_sq) else None
                    legal.append(Move(from_sq, to_sq, promo))
        return legal

    def has_legal_move(self, side: Side | None = None) -> bool:
        """Whether *side* has at least one legal move (stops at the first)."""
        if side is None:
            side = self._pos.side_to_move
        for from_sq in self._board.all_pieces(side):
            for to_sq in range(64):
                if self.is_legal(from_sq, to_sq):
                    return True
        return False

    # -- Internals ----------------------------------------------------------

    def _geometry_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        target = self._board[to_sq]
        if target is not None and target.side == piece.side:
            return False
        return _RULES[piece.kind](self._board, piece.side, from_sq, to_sq)

    def _declaration_error(self, piece: Piece, request: MoveRequest) -> str | None:
        target = self._board[request.to_sq]
        if target is None and request.capture is not None:
            return "capture declared on an empty square"
        if target is not None and request.capture != target:
            return f"capture of {target.label} not declared"

        if promotes(piece, request.to_sq):
            promo = request.promotion
            if promo is None:
                return "promotion required"
            if promo.side != piece.side or promo.kind not in PROMOTION_KINDS:
                return f"invalid promotion to {promo.label}"
        elif request.promotion is not None:
            return "promotion declared on a non-promoting move"
        return None

    def _exposes_king(
        self, piece: Piece, placed: Piece, from_sq: Square, to_sq: Square
    ) -> bool:
        """Self-check guard: would the mover's king be attacked afterwards?"""
        board = self._board
        with board.probe(from_sq, to_sq, placed):
            return is_in_check(board, piece.side)
