"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessdev.core import MoveValidator, Position, Rules

    pos = Position()
    for move in MoveValidator(pos).generate_legal_moves():
        print(move)
"""

from chessdev.core.attacks import is_in_check, is_square_attacked
from chessdev.core.board import Board
from chessdev.core.enums import (
    PROMOTION_KINDS,
    GameStatus,
    PieceKind,
    PromotionPolicy,
    Side,
)
from chessdev.core.move import Move, MoveRequest
from chessdev.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessdev.core.piece import EMPTY_LABEL, Piece
from chessdev.core.position import Position
from chessdev.core.rules import Rules
from chessdev.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)
from chessdev.core.validator import MoveValidator

__all__ = [
    # Enums
    "GameStatus",
    "PROMOTION_KINDS",
    "PieceKind",
    "PromotionPolicy",
    "Side",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "EMPTY_LABEL",
    "Move",
    "MoveRequest",
    "MoveValidator",
    "Piece",
    "Position",
    "Rules",
    # Attack detection
    "is_in_check",
    "is_square_attacked",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
