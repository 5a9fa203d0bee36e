"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessdev.core.move import Move
    from chessdev.core.position import Position


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine search."""

    best_move: Move | None
    candidates: int


class IEngine(Protocol):
    """Protocol for engines that pick the CPU side's move."""

    def search(self, position: Position) -> SearchResult: ...
