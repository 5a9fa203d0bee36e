"""High-level chess rules: check and checkmate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessdev.core.attacks import is_in_check
from chessdev.core.enums import GameStatus, Side
from chessdev.core.validator import MoveValidator

if TYPE_CHECKING:
    from chessdev.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    All queries are read-only: candidate moves are probed on the board
    and reverted before the next one is tried.
    """

    @staticmethod
    def is_in_check(position: Position, side: Side | None = None) -> bool:
        if side is None:
            side = position.side_to_move
        return is_in_check(position.board, side)

    @staticmethod
    def is_checkmate(position: Position, side: Side | None = None) -> bool:
        """*side* is attacked and no move of any of its pieces escapes."""
        if side is None:
            side = position.side_to_move
        if not Rules.is_in_check(position, side):
            return False
        return not MoveValidator(position).has_legal_move(side)

    @staticmethod
    def classify(position: Position) -> GameStatus:
        """Classify the position for the side to move."""
        if not Rules.is_in_check(position):
            return GameStatus.IN_PROGRESS
        if MoveValidator(position).has_legal_move():
            return GameStatus.CHECK
        return GameStatus.CHECKMATE
