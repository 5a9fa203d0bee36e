"""Attack detection: is a square attacked by the opponent of a given side?"""

from __future__ import annotations

from chessdev.core.board import Board
from chessdev.core.enums import PieceKind, Side
from chessdev.core.piece import Piece
from chessdev.core.types import Square, make_square, on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_DIAGONAL_SLIDERS = (PieceKind.BISHOP, PieceKind.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceKind.ROOK, PieceKind.QUEEN)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        row, col = sq >> 3, sq & 7
        targets.append(
            tuple(
                make_square(row + dr, col + dc)
                for dr, dc in offsets
                if on_board(row + dr, col + dc)
            )
        )
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        row, col = sq >> 3, sq & 7
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r, c = row + dr, col + dc
            ray: list[Square] = []
            while on_board(r, c):
                ray.append(make_square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attackers() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """[defender][sq] -> squares from which an enemy pawn hits *sq*.

    Enemy pawns advance against the defender, so they capture onto *sq*
    from the row one step further along the defender's own forward
    direction.
    """
    per_side: list[tuple[tuple[Square, ...], ...]] = []
    for defender in Side:
        squares: list[tuple[Square, ...]] = []
        for sq in range(64):
            row, col = sq >> 3, sq & 7
            r = row + defender.forward
            squares.append(
                tuple(make_square(r, c) for c in (col - 1, col + 1) if on_board(r, c))
            )
        per_side.append(tuple(squares))
    return tuple(per_side)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
_PAWN_ATTACKERS = _build_pawn_attackers()


# -- Public API -------------------------------------------------------------


def is_square_attacked(board: Board, sq: Square, by_opponent_of: Side) -> bool:
    """Is *sq* attacked by any piece of the opponent of *by_opponent_of*?

    Read-only; never mutates *board*.
    """
    attacker = by_opponent_of.opposite

    if _slider_hits(board, BISHOP_RAYS[sq], attacker, _DIAGONAL_SLIDERS):
        return True
    if _slider_hits(board, ROOK_RAYS[sq], attacker, _ORTHOGONAL_SLIDERS):
        return True

    knight = Piece(attacker, PieceKind.KNIGHT)
    if any(board[from_sq] == knight for from_sq in KNIGHT_TARGETS[sq]):
        return True

    pawn = Piece(attacker, PieceKind.PAWN)
    pawn_squares = _PAWN_ATTACKERS[by_opponent_of][sq]
    if any(board[from_sq] == pawn for from_sq in pawn_squares):
        return True

    king = Piece(attacker, PieceKind.KING)
    return any(board[from_sq] == king for from_sq in KING_TARGETS[sq])


def is_in_check(board: Board, side: Side) -> bool:
    """Is *side*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(side), side)


def _slider_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    attacker: Side,
    kinds: tuple[PieceKind, ...],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.side == attacker and piece.kind in kinds:
                return True
            break
    return False
