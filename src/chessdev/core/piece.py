"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessdev.core.enums import PieceKind, Side

EMPTY_LABEL = "**"


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    side: Side
    kind: PieceKind

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = self.kind.letter
        return char if self.side is Side.WHITE else char.lower()

    @property
    def label(self) -> str:
        """Two-character board label, e.g. ``WR`` or ``BN``."""
        return self.side.letter + self.kind.letter

    @classmethod
    def from_label(cls, label: str) -> Piece:
        """Create piece from a two-character label, e.g. 'BQ' → black queen."""
        if len(label) != 2:
            raise ValueError(f"Invalid piece label: {label!r}")
        return cls(Side.from_letter(label[0]), PieceKind.from_letter(label[1]))

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if len(char) != 1 or not char.isalpha():
            raise ValueError(f"Invalid piece character: {char!r}")
        side = Side.WHITE if char.isupper() else Side.BLACK
        try:
            kind = PieceKind.from_letter(char.upper())
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, kind)
