"""FEN-style import/export of piece placement and side to move.

Castling and en-passant do not exist in this game, so only the first two
FEN fields carry meaning. Any further fields are accepted and ignored so
that standard FEN strings can be pasted in.
"""

from __future__ import annotations

from chessdev.core.board import Board
from chessdev.core.enums import Side
from chessdev.core.piece import Piece
from chessdev.core.position import Position
from chessdev.core.types import make_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    placement, side_part = parts[:2]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    king_count = {Side.WHITE: 0, Side.BLACK: 0}
    for rank_idx, rank_text in enumerate(ranks):
        row = 7 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch)
                if ch in "Kk":
                    king_count[piece.side] += 1
                board[make_square(row, col)] = piece
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for side, count in king_count.items():
        if count != 1:
            raise ValueError(f"FEN must contain exactly one {side.name} king: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Side.WHITE
    elif side_part == "b":
        side = Side.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    return Position(board=board, side_to_move=side)


def position_to_fen(position: Position) -> str:
    """Serialise placement and side to move (castling/en-passant are ``-``)."""
    board = position.board
    ranks: list[str] = []
    for row in range(7, -1, -1):
        text = ""
        empty = 0
        for col in range(8):
            piece = board[make_square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)

    side = "w" if position.side_to_move == Side.WHITE else "b"
    return f"{'/'.join(ranks)} {side} - - 0 1"
