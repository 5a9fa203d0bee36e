"""Move value objects: resolved moves and declared move requests."""

from __future__ import annotations

from dataclasses import dataclass

from chessdev.core.enums import PieceKind, Side
from chessdev.core.piece import Piece
from chessdev.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A resolved move: origin, destination and the promotion kind if any."""

    from_sq: Square
    to_sq: Square
    promotion: PieceKind | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += f"={self.promotion.letter}"
        return base


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """A move as declared by the human side.

    Args:
        side: Side the caller claims to move for.
        kind: Piece kind the caller claims stands on *from_sq*.
        from_sq: Origin square.
        to_sq: Destination square.
        capture: Declared captured piece (side and kind), or ``None``.
        promotion: Declared promotion piece (side and kind), or ``None``.
    """

    side: Side
    kind: PieceKind
    from_sq: Square
    to_sq: Square
    capture: Piece | None = None
    promotion: Piece | None = None

    @property
    def capture_declared(self) -> bool:
        return self.capture is not None

    @property
    def piece(self) -> Piece:
        """The piece the caller claims to move."""
        return Piece(self.side, self.kind)

    @property
    def move(self) -> Move:
        """Resolved move carrying the declared promotion kind."""
        promotion = self.promotion.kind if self.promotion is not None else None
        return Move(self.from_sq, self.to_sq, promotion)

    def __str__(self) -> str:
        text = (
            f"{self.piece.label}{square_name(self.from_sq)}"
            f"-{square_name(self.to_sq)}"
        )
        if self.capture is not None:
            text += f"x{self.capture.label}"
        if self.promotion is not None:
            text += f"y{self.promotion.label}"
        return text
