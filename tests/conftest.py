"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Iterator

import pytest

from chessdev.core.move import Move
from chessdev.core.position import Position
from chessdev.engine.search import SearchResult

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class ScriptedEngine:
    """Engine that replays a fixed list of moves, then reports no move."""

    def __init__(self, moves: list[Move]) -> None:
        self._moves = list(moves)
        self.calls = 0

    def search(self, position: Position) -> SearchResult:
        del position
        self.calls += 1
        if not self._moves:
            return SearchResult(best_move=None, candidates=0)
        return SearchResult(best_move=self._moves.pop(0), candidates=1)


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240601)


@pytest.fixture
def scripted_engine() -> type[ScriptedEngine]:
    """Factory for engines that replay a fixed list of CPU moves."""
    return ScriptedEngine
