"""Application settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessdev.core.enums import PromotionPolicy, Side

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    human_side: Side = Side.WHITE

    # CPU
    promotion_policy: PromotionPolicy = PromotionPolicy.QUEEN
    seed: int | None = None  # None: system entropy

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level)
        assert isinstance(level, int)
        return level
