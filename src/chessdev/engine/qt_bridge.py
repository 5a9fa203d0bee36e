"""Qt bridge to run the CPU move search in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessdev.core.enums import PromotionPolicy
from chessdev.core.position import Position
from chessdev.engine.random_search import RandomMoveEngine
from chessdev.engine.search import IEngine


class CpuWorker(QObject):
    """Thread-affine worker that computes CPU moves on demand.

    The worker searches a private copy of the position it is handed; the
    chosen move is applied by whoever owns the game (see
    :meth:`chessdev.game.controller.GameController.apply_cpu_move`).
    """

    move_ready = pyqtSignal(int, object, int)
    no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    def __init__(
        self,
        engine: IEngine | None = None,
        *,
        promotion_policy: PromotionPolicy = PromotionPolicy.QUEEN,
    ) -> None:
        super().__init__()
        self._engine: IEngine = (
            engine
            if engine is not None
            else RandomMoveEngine(promotion_policy=promotion_policy)
        )

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Pick a move for the side to move in *position_obj* and emit it."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "CPU received invalid position")
            return

        try:
            result = self._engine.search(position_obj.copy())
        except ValueError as exc:
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(request_id, result.best_move, result.candidates)
