"""GameController — the central orchestrator of a human-vs-CPU game.

Coordinates: GameState, MoveValidator, Rules and the CPU engine.
Emits events via simple callbacks so transports / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessdev.core.enums import PROMOTION_KINDS, Side
from chessdev.core.move import Move, MoveRequest
from chessdev.core.rules import Rules
from chessdev.core.validator import MoveValidator, promotes
from chessdev.engine.random_search import RandomMoveEngine
from chessdev.engine.search import IEngine
from chessdev.game.interfaces import (
    GamePhase,
    MoveOutcome,
    OutcomeKind,
    RejectReason,
)
from chessdev.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, MoveOutcome, GameState], None]
GameOverCallback = Callable[[Side], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs one game at a time: guards turns, validates and executes moves,
    classifies the resulting position and notifies listeners.

    Every call runs to completion before the next one is accepted; the
    controller is meant to be driven from a single thread.
    """

    __slots__ = ("_state", "_engine", "events")

    def __init__(self, engine: IEngine | None = None) -> None:
        self._state: GameState | None = None
        self._engine: IEngine = engine if engine is not None else RandomMoveEngine()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState | None:
        return self._state

    @property
    def has_game(self) -> bool:
        return self._state is not None

    @property
    def phase(self) -> GamePhase:
        if self._state is None:
            return GamePhase.NOT_STARTED
        return self._state.phase

    @property
    def engine(self) -> IEngine:
        return self._engine

    # ── Session lifecycle ────────────────────────────────────────────────

    def new_game(self, human_side: Side, fen: str | None = None) -> GameState:
        """Replace any running game with a fresh one."""
        self._state = GameState.new(human_side, fen)
        _LOGGER.info(
            "New game: human plays %s, CPU plays %s", human_side, human_side.opposite
        )
        self._emit_phase(GamePhase.AWAITING_MOVE)
        return self._state

    def end_game(self) -> RejectReason | None:
        """Abandon the running game on the human's turn.

        Returns the rejection reason, or ``None`` when the game was ended.
        """
        reason = self._guard(self._human_side())
        if reason is not None:
            return reason
        self._state = None
        _LOGGER.info("Game ended by the human side")
        self._emit_phase(GamePhase.NOT_STARTED)
        return None

    # ── Moves ────────────────────────────────────────────────────────────

    def submit_move(self, request: MoveRequest) -> MoveOutcome:
        """Validate and execute a human move request."""
        reason = self._guard(self._human_side())
        if reason is not None:
            return MoveOutcome.rejected(reason)

        state = self._state
        assert state is not None
        if request.side != state.side_to_move:
            return MoveOutcome.rejected(RejectReason.OUT_OF_TURN)

        detail = MoveValidator(state.position).explain(request)
        if detail is not None:
            _LOGGER.debug("Rejected %s: %s", request, detail)
            return MoveOutcome.rejected(RejectReason.ILLEGAL_MOVE, detail)

        return self._execute(request.move)

    def submit_cpu_move(self) -> MoveOutcome:
        """Let the engine pick and play a move for the CPU side."""
        reason = self._guard(self._cpu_side())
        if reason is not None:
            return MoveOutcome.rejected(reason)

        state = self._state
        assert state is not None
        result = self._engine.search(state.position)
        if result.best_move is None:
            _LOGGER.info("CPU (%s) has no legal move", state.cpu_side)
            return MoveOutcome.rejected(RejectReason.NO_LEGAL_MOVE)

        _LOGGER.info(
            "CPU picked %s out of %d moves", result.best_move, result.candidates
        )
        return self._execute(result.best_move)

    def apply_cpu_move(self, move: Move) -> MoveOutcome:
        """Play a CPU move computed elsewhere (e.g. by a Qt worker)."""
        reason = self._guard(self._cpu_side())
        if reason is not None:
            return MoveOutcome.rejected(reason)

        state = self._state
        assert state is not None
        position = state.position
        piece = position.board[move.from_sq]
        if (
            piece is None
            or piece.side != state.cpu_side
            or not MoveValidator(position).is_legal(move.from_sq, move.to_sq)
        ):
            return MoveOutcome.rejected(RejectReason.ILLEGAL_MOVE)
        if promotes(piece, move.to_sq):
            if move.promotion not in PROMOTION_KINDS:
                return MoveOutcome.rejected(RejectReason.ILLEGAL_MOVE)
        elif move.promotion is not None:
            return MoveOutcome.rejected(RejectReason.ILLEGAL_MOVE)
        return self._execute(move)

    def render_board(self) -> list[list[str]] | None:
        """Board labels of the running game, or ``None`` without a game."""
        if self._state is None:
            return None
        return self._state.render()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _human_side(self) -> Side | None:
        return self._state.human_side if self._state is not None else None

    def _cpu_side(self) -> Side | None:
        return self._state.cpu_side if self._state is not None else None

    def _guard(self, side: Side | None) -> RejectReason | None:
        """Sequencing checks that run before any validation."""
        state = self._state
        if state is None:
            return RejectReason.NO_GAME
        if state.terminal:
            return RejectReason.GAME_OVER
        if state.side_to_move != side:
            return RejectReason.OUT_OF_TURN
        return None

    def _execute(self, move: Move) -> MoveOutcome:
        state = self._state
        assert state is not None
        position = state.position
        mover = position.side_to_move

        position.make_move(move)
        state.last_move = move

        if not position.in_check:
            kind = OutcomeKind.EXECUTED
        elif Rules.is_checkmate(position):
            kind = OutcomeKind.EXECUTED_CHECKMATE
        else:
            kind = OutcomeKind.EXECUTED_CHECK

        outcome = MoveOutcome(kind, move=move)
        _LOGGER.debug("%s played %s (%s)", mover, move, kind.name)
        if kind == OutcomeKind.EXECUTED_CHECKMATE:
            position.mark_terminal()
            state.phase = GamePhase.GAME_OVER
            _LOGGER.info("Checkmate: %s wins", mover)

        self._emit_move(move, outcome)
        if state.is_game_over:
            self._emit_game_over(mover)
        return outcome

    def _emit_move(self, move: Move, outcome: MoveOutcome) -> None:
        assert self._state is not None
        for cb in self.events.on_move:
            cb(move, outcome, self._state)

    def _emit_game_over(self, winner: Side) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
