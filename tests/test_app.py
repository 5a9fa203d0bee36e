"""Tests for settings and the console loop."""

from __future__ import annotations

import io
import logging

import pytest

from chessdev.app import build_device, parse_settings, run
from chessdev.config import AppSettings
from chessdev.core.enums import PromotionPolicy, Side


class TestAppSettings:
    def test_defaults(self) -> None:
        s = AppSettings()
        assert s.human_side == Side.WHITE
        assert s.promotion_policy == PromotionPolicy.QUEEN
        assert s.seed is None
        assert s.log_level_value == logging.WARNING

    def test_log_level_normalised(self) -> None:
        assert AppSettings(log_level="debug").log_level_value == logging.DEBUG

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="log level"):
            AppSettings(log_level="chatty")


class TestParseSettings:
    def test_defaults(self) -> None:
        assert parse_settings([]) == AppSettings()

    def test_options(self) -> None:
        s = parse_settings(
            ["--side", "B", "--promotion", "random", "--seed", "5"]
            + ["--log-level", "info"]
        )
        assert s.human_side == Side.BLACK
        assert s.promotion_policy == PromotionPolicy.RANDOM
        assert s.seed == 5
        assert s.log_level == "INFO"

    def test_bad_side(self) -> None:
        with pytest.raises(SystemExit):
            parse_settings(["--side", "X"])


class TestRun:
    def test_session(self) -> None:
        device = build_device(AppSettings(seed=1))
        out = io.StringIO()
        run(device, ["00W\n", "\n", "02WPe2-e4\n", "03\n", "04\n", "01\n"], out)
        assert out.getvalue().split("\n")[:3] == ["OK", "OK", "OK"]
        assert out.getvalue().endswith("NOGAME\n")

    def test_bare_new_game_uses_default_side(self) -> None:
        device = build_device(AppSettings(seed=1))
        run(device, ["00"], io.StringIO(), Side.BLACK)
        assert device.controller.state is not None
        assert device.controller.state.human_side == Side.BLACK

    def test_seed_is_reproducible(self) -> None:
        replies = []
        for _ in range(2):
            device = build_device(AppSettings(seed=42))
            out = io.StringIO()
            run(device, ["00B", "03", "01"], out)
            replies.append(out.getvalue())
        assert replies[0] == replies[1]
