"""Tests for GameState."""

from chessdev.core.board import Board
from chessdev.core.enums import Side
from chessdev.game.interfaces import GamePhase, MoveOutcome, OutcomeKind, RejectReason
from chessdev.game.state import GameState


class TestGameState:
    def test_new_standard(self) -> None:
        state = GameState.new(Side.WHITE)
        assert state.position.board == Board.initial()
        assert state.side_to_move == Side.WHITE
        assert state.phase == GamePhase.AWAITING_MOVE
        assert state.last_move is None
        assert not state.is_game_over

    def test_new_from_fen(self) -> None:
        state = GameState.new(Side.BLACK, "4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert state.side_to_move == Side.BLACK
        assert state.cpu_side == Side.WHITE

    def test_render(self) -> None:
        rows = GameState.new(Side.WHITE).render()
        assert rows[1][0] == "WP"
        assert rows[3][3] == "**"


class TestMoveOutcome:
    def test_rejected(self) -> None:
        outcome = MoveOutcome.rejected(RejectReason.OUT_OF_TURN)
        assert outcome.kind == OutcomeKind.REJECTED
        assert not outcome.executed
        assert outcome.move is None

    def test_executed(self) -> None:
        assert MoveOutcome(OutcomeKind.EXECUTED_CHECK).executed
