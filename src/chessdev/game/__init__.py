"""Game management layer — controller, session state, outcomes.

Quick start::

    from chessdev.core import Side
    from chessdev.game import GameController

    ctrl = GameController()
    ctrl.new_game(Side.WHITE)
    outcome = ctrl.submit_cpu_move()  # rejected: it is WHITE's turn
"""

from chessdev.game.controller import GameController, GameEvents
from chessdev.game.interfaces import (
    GamePhase,
    MoveOutcome,
    OutcomeKind,
    RejectReason,
)
from chessdev.game.state import GameState

__all__ = [
    "GameController",
    "GameEvents",
    "GamePhase",
    "GameState",
    "MoveOutcome",
    "OutcomeKind",
    "RejectReason",
]
