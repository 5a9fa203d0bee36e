"""One-ply CPU player: uniform random choice among legal moves."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from chessdev.core.enums import PROMOTION_KINDS, PieceKind, PromotionPolicy
from chessdev.core.position import Position
from chessdev.core.validator import MoveValidator
from chessdev.engine.search import IEngine, SearchResult

_LOGGER = logging.getLogger(__name__)


class RandomMoveEngine(IEngine):
    """Picks one legal (origin, destination) pair uniformly at random.

    Captures are implied by an enemy piece on the destination and pawns
    reaching the far row always promote. The promotion kind is chosen
    after the pair has been drawn, so every pair stays equally likely.

    Args:
        rng: Random source; a fresh system-seeded generator by default.
        promotion_policy: ``QUEEN`` always queens, ``RANDOM`` draws
            uniformly among knight, bishop, rook and queen.
    """

    __slots__ = ("_rng", "_promotion_policy")

    def __init__(
        self,
        rng: random.Random | None = None,
        promotion_policy: PromotionPolicy = PromotionPolicy.QUEEN,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._promotion_policy = promotion_policy

    @property
    def promotion_policy(self) -> PromotionPolicy:
        return self._promotion_policy

    def search(self, position: Position) -> SearchResult:
        candidates = MoveValidator(position).generate_legal_moves()
        _LOGGER.debug(
            "%d legal moves for %s", len(candidates), position.side_to_move
        )
        if not candidates:
            return SearchResult(best_move=None, candidates=0)

        move = candidates[self._rng.randrange(len(candidates))]
        if move.promotion is not None:
            move = replace(move, promotion=self._promotion_kind())
        return SearchResult(best_move=move, candidates=len(candidates))

    def _promotion_kind(self) -> PieceKind:
        if self._promotion_policy == PromotionPolicy.RANDOM:
            return self._rng.choice(PROMOTION_KINDS)
        return PieceKind.QUEEN
