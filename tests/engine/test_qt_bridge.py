"""Tests for the Qt CPU worker."""

from __future__ import annotations

import random

import pytest
from PyQt6.QtTest import QSignalSpy

from chessdev.core.move import Move
from chessdev.core.notation import position_from_fen, position_to_fen
from chessdev.core.position import Position
from chessdev.core.types import parse_square as sq
from chessdev.engine.qt_bridge import CpuWorker
from chessdev.engine.random_search import RandomMoveEngine
from chessdev.engine.search import SearchResult

ONE_MOVE_FEN = "7k/8/7p/7P/8/8/8/K5R1 b - - 0 1"
MATED_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w - - 1 3"


class _FailingEngine:
    def search(self, _position: Position) -> SearchResult:
        raise ValueError("No BLACK king on board")


@pytest.mark.usefixtures("qapp")
class TestCpuWorker:
    def test_emits_move_ready(self) -> None:
        position = position_from_fen(ONE_MOVE_FEN)
        worker = CpuWorker(RandomMoveEngine(rng=random.Random(1)))

        ready = QSignalSpy(worker.move_ready)
        no_move = QSignalSpy(worker.no_move)

        worker.request_move(position, 3)

        assert len(ready) == 1
        assert ready[0][0] == 3
        assert ready[0][1] == Move(sq("h8"), sq("h7"))
        assert ready[0][2] == 1
        assert len(no_move) == 0

    def test_searches_a_copy(self) -> None:
        position = position_from_fen(ONE_MOVE_FEN)
        worker = CpuWorker()
        worker.request_move(position, 1)
        assert position_to_fen(position) == ONE_MOVE_FEN

    def test_emits_no_move_when_mated(self) -> None:
        worker = CpuWorker()

        no_move = QSignalSpy(worker.no_move)
        ready = QSignalSpy(worker.move_ready)

        worker.request_move(position_from_fen(MATED_FEN), 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(ready) == 0

    def test_rejects_invalid_position(self) -> None:
        worker = CpuWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a position", 5)

        assert len(errors) == 1
        assert errors[0][0] == 5

    def test_reports_engine_error(self) -> None:
        worker = CpuWorker(_FailingEngine())
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Position(), 9)

        assert len(errors) == 1
        assert errors[0][0] == 9
        assert "king" in errors[0][1]
