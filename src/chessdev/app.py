"""Console entry point: one command per line on stdin, one reply on stdout."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Iterable
from typing import TextIO

from chessdev.config import AppSettings
from chessdev.core.enums import PromotionPolicy, Side
from chessdev.engine.random_search import RandomMoveEngine
from chessdev.game.controller import GameController
from chessdev.protocol.device import ChessDevice

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessdev",
        description="Human vs CPU chess over a line-oriented command protocol.",
    )
    parser.add_argument(
        "--side",
        choices=("W", "B"),
        default="W",
        help="side played by the human when a bare '00' starts a game",
    )
    parser.add_argument(
        "--promotion",
        choices=[p.name.lower() for p in PromotionPolicy],
        default=PromotionPolicy.QUEEN.name.lower(),
        help="piece chosen when a CPU pawn promotes",
    )
    parser.add_argument("--seed", type=int, default=None, help="CPU random seed")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def parse_settings(argv: list[str] | None = None) -> AppSettings:
    """Build :class:`AppSettings` from command-line arguments."""
    args = _build_parser().parse_args(argv)
    return AppSettings(
        human_side=Side.from_letter(args.side),
        promotion_policy=PromotionPolicy[args.promotion.upper()],
        seed=args.seed,
        log_level=args.log_level,
    )


def build_device(settings: AppSettings) -> ChessDevice:
    engine = RandomMoveEngine(
        rng=random.Random(settings.seed),
        promotion_policy=settings.promotion_policy,
    )
    return ChessDevice(GameController(engine))


def run(
    device: ChessDevice,
    lines: Iterable[str],
    out: TextIO,
    default_side: Side = Side.WHITE,
) -> None:
    """Feed *lines* to *device*, writing every reply to *out*."""
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line == "00":
            line += default_side.letter
        out.write(device.handle(line))
        out.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the console loop until stdin is exhausted."""
    settings = parse_settings(argv)
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    _LOGGER.info("Starting with %s", settings)
    run(build_device(settings), sys.stdin, sys.stdout, settings.human_side)
    return 0


if __name__ == "__main__":
    sys.exit(main())
