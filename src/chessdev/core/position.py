"""Position — board + side to move + check/terminal flags, with make/unmake."""

from __future__ import annotations

from dataclasses import dataclass

from chessdev.core.attacks import is_square_attacked
from chessdev.core.board import Board
from chessdev.core.enums import PieceKind, Side
from chessdev.core.move import Move
from chessdev.core.piece import Piece


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    moved_piece: Piece
    captured_piece: Piece | None
    in_check: bool


class Position:
    """Authoritative game position.

    ``in_check`` is true iff the side to move is currently attacked.
    ``terminal`` is set once checkmate has been recognised and never
    cleared; a finished game is replaced by a fresh :class:`Position`.

    :meth:`make_move` is the only mutator of the board once a game runs.
    It trusts its caller: moves must have been validated beforehand.
    """

    __slots__ = ("board", "side_to_move", "in_check", "terminal", "_history")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Side = Side.WHITE,
        in_check: bool | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        if in_check is None:
            in_check = self._side_to_move_attacked()
        self.in_check = in_check
        self.terminal = False
        self._history: list[_PositionState] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Apply *move* and return the captured piece, if any."""
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = board[move.to_sq]
        self._history.append(
            _PositionState(
                moved_piece=piece,
                captured_piece=captured,
                in_check=self.in_check,
            )
        )

        placed = piece
        if piece.kind == PieceKind.PAWN and move.promotion is not None:
            placed = Piece(piece.side, move.promotion)

        board[move.from_sq] = None
        board[move.to_sq] = placed

        self.side_to_move = self.side_to_move.opposite
        self.in_check = self._side_to_move_attacked()
        return captured

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`."""
        state = self._history.pop()
        self.board[move.to_sq] = state.captured_piece
        self.board[move.from_sq] = state.moved_piece
        self.side_to_move = self.side_to_move.opposite
        self.in_check = state.in_check

    def mark_terminal(self) -> None:
        self.terminal = True

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy without history."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            in_check=self.in_check,
        )
        pos.terminal = self.terminal
        return pos

    @property
    def ply_count(self) -> int:
        """Number of moves made on this position object."""
        return len(self._history)

    def _side_to_move_attacked(self) -> bool:
        board = self.board
        if not board.has_king(self.side_to_move):
            return False
        return is_square_attacked(
            board, board.king_square(self.side_to_move), self.side_to_move
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, in_check={self.in_check}, "
            f"terminal={self.terminal})\n{self.board!r}"
        )
