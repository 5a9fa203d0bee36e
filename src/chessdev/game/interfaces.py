"""Game-layer enums and the move outcome value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessdev.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Outcomes ─────────────────────────────────────────────────────────────────


class OutcomeKind(IntEnum):
    """What happened to a submitted move."""

    EXECUTED = auto()
    EXECUTED_CHECK = auto()
    EXECUTED_CHECKMATE = auto()
    REJECTED = auto()


class RejectReason(IntEnum):
    """Why a submission was rejected. The board is untouched in every case."""

    NO_GAME = auto()
    GAME_OVER = auto()
    OUT_OF_TURN = auto()
    INVALID_FORMAT = auto()
    ILLEGAL_MOVE = auto()
    NO_LEGAL_MOVE = auto()


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a move submission."""

    kind: OutcomeKind
    reason: RejectReason | None = None
    move: Move | None = None
    detail: str = ""

    @classmethod
    def rejected(cls, reason: RejectReason, detail: str = "") -> MoveOutcome:
        return cls(OutcomeKind.REJECTED, reason=reason, detail=detail)

    @property
    def executed(self) -> bool:
        return self.kind != OutcomeKind.REJECTED
