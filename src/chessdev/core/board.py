"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from chessdev.core.enums import PieceKind, Side
from chessdev.core.piece import EMPTY_LABEL, Piece
from chessdev.core.types import BOARD_SIZE, Square, make_square

_SIDE_COUNT = 2
_BACK_ROW: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 64-square board with a cached king square per side."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [side] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _SIDE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq]
        if old_piece == piece:
            return

        if (
            old_piece is not None
            and old_piece.kind == PieceKind.KING
            and self._king_squares[old_piece.side] == sq
        ):
            self._king_squares[old_piece.side] = None

        self._squares[sq] = piece

        if piece is not None and piece.kind == PieceKind.KING:
            self._king_squares[piece.side] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, side: Side) -> list[Square]:
        """All squares occupied by *side*, in ascending square order."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.side == side
        ]

    def king_square(self, side: Side) -> Square:
        """Return the cached king square for *side*."""
        sq = self._king_squares[side]
        if sq is None:
            raise ValueError(f"No {side.name} king on board")
        return sq

    def has_king(self, side: Side) -> bool:
        return self._king_squares[side] is not None

    # -- Tentative placement ------------------------------------------------

    @contextmanager
    def probe(self, origin: Square, dest: Square, placed: Piece) -> Iterator[None]:
        """Temporarily move *placed* from *origin* to *dest*.

        Both cells (and the king cache) are restored on exit, whatever
        happens inside the ``with`` block.
        """
        saved_origin = self._squares[origin]
        saved_dest = self._squares[dest]
        saved_kings = self._king_squares.copy()
        self[origin] = None
        self[dest] = placed
        try:
            yield
        finally:
            self._squares[origin] = saved_origin
            self._squares[dest] = saved_dest
            self._king_squares = saved_kings

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None] * _SIDE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting array."""
        b = cls()
        for col in range(BOARD_SIZE):
            b[make_square(Side.WHITE.home_row, col)] = Piece(Side.WHITE, PieceKind.PAWN)
            b[make_square(Side.BLACK.home_row, col)] = Piece(Side.BLACK, PieceKind.PAWN)

        for col, kind in enumerate(_BACK_ROW):
            b[make_square(0, col)] = Piece(Side.WHITE, kind)
            b[make_square(7, col)] = Piece(Side.BLACK, kind)
        return b

    # -- Rendering ----------------------------------------------------------

    def labels(self) -> list[list[str]]:
        """8 rows (row 0 first) of 8 two-character cell labels."""
        return [
            [
                piece.label if piece is not None else EMPTY_LABEL
                for piece in self._squares[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]
            ]
            for row in range(BOARD_SIZE)
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self._king_squares == other._king_squares
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[make_square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
