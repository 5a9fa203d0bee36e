"""Session state — the live position plus who plays which side."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessdev.core.enums import Side
from chessdev.core.move import Move
from chessdev.core.notation import position_from_fen
from chessdev.core.position import Position
from chessdev.game.interfaces import GamePhase


@dataclass
class GameState:
    """One game between a human side and the CPU side.

    This is a pure data class — no threading, no I/O. The CPU always
    plays the complement of :attr:`human_side`.
    """

    human_side: Side = Side.WHITE
    position: Position = field(default_factory=Position)
    phase: GamePhase = GamePhase.AWAITING_MOVE
    last_move: Move | None = field(default=None, init=False)

    @classmethod
    def new(cls, human_side: Side, fen: str | None = None) -> GameState:
        """Standard opening array (or *fen*), WHITE to move."""
        position = position_from_fen(fen) if fen is not None else Position()
        return cls(human_side=human_side, position=position)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def cpu_side(self) -> Side:
        return self.human_side.opposite

    @property
    def side_to_move(self) -> Side:
        return self.position.side_to_move

    @property
    def terminal(self) -> bool:
        return self.position.terminal

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        return self.position.ply_count

    def render(self) -> list[list[str]]:
        """8 rows (row 0 first) of two-character cell labels."""
        return self.position.board.labels()
