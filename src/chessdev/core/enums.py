"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """One of the two competing sides. WHITE always moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a single pawn step."""
        return 1 if self is Side.WHITE else -1

    @property
    def home_row(self) -> int:
        """Row the side's pawns start on."""
        return 1 if self is Side.WHITE else 6

    @property
    def far_row(self) -> int:
        """Row on which the side's pawns promote."""
        return 7 if self is Side.WHITE else 0

    @property
    def letter(self) -> str:
        return "W" if self is Side.WHITE else "B"

    @classmethod
    def from_letter(cls, letter: str) -> Side:
        if letter == "W":
            return cls.WHITE
        if letter == "B":
            return cls.BLACK
        raise ValueError(f"Invalid side letter: {letter!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        return _KIND_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceKind:
        try:
            return _LETTER_KINDS[letter]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


_KIND_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
_LETTER_KINDS: dict[str, PieceKind] = {v: k for k, v in _KIND_LETTERS.items()}

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.ROOK,
    PieceKind.QUEEN,
)


class PromotionPolicy(IntEnum):
    """How the CPU side picks the piece a promoting pawn becomes."""

    QUEEN = 0
    RANDOM = 1


class GameStatus(IntEnum):
    """Classification of a position for the side to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
