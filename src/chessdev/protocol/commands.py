"""Line-oriented command grammar and status tokens.

A command line is a two-digit code followed by an optional body::

    00W              new game, human plays WHITE (00B: human plays BLACK)
    01               show the board
    02WPe2-e4        human move: side, piece, origin, '-', destination
    02WQh5-f7xBP     ... declaring the captured piece after 'x'
    02WPe7-e8yWQ     ... declaring the promotion piece after 'y'
    03               CPU move
    04               end the running game
"""

from __future__ import annotations

import re
from enum import Enum

from chessdev.core.enums import PieceKind, Side
from chessdev.core.move import MoveRequest
from chessdev.core.piece import Piece
from chessdev.core.types import parse_square
from chessdev.game.interfaces import MoveOutcome, OutcomeKind, RejectReason

_MOVE_RE = re.compile(
    r"(?P<side>[WB])(?P<kind>[PNBRQK])"
    r"(?P<from>[a-h][1-8])-(?P<to>[a-h][1-8])"
    r"(?:x(?P<capture>[WB][PNBRQK]))?"
    r"(?:y(?P<promotion>[WB][PNBRQK]))?"
)


class CommandFormatError(ValueError):
    """A command line does not follow the grammar."""


class CommandCode(Enum):
    NEW_GAME = "00"
    SHOW_BOARD = "01"
    MOVE = "02"
    CPU_MOVE = "03"
    END_GAME = "04"


OK = "OK"

_EXECUTED_TOKENS: dict[OutcomeKind, str] = {
    OutcomeKind.EXECUTED: OK,
    OutcomeKind.EXECUTED_CHECK: "CHECK",
    OutcomeKind.EXECUTED_CHECKMATE: "MATE",
}

_REJECT_TOKENS: dict[RejectReason, str] = {
    RejectReason.NO_GAME: "NOGAME",
    RejectReason.GAME_OVER: "MATE",
    RejectReason.OUT_OF_TURN: "OOT",
    RejectReason.INVALID_FORMAT: "INVFMT",
    RejectReason.ILLEGAL_MOVE: "ILLMOVE",
    RejectReason.NO_LEGAL_MOVE: "NOMOVE",
}


# ── Parsing ──────────────────────────────────────────────────────────────────


def split_command(line: str) -> tuple[CommandCode, str]:
    """Split *line* into its command code and (stripped) body."""
    text = line.strip()
    try:
        code = CommandCode(text[:2])
    except ValueError:
        raise CommandFormatError(f"Unknown command: {text[:2]!r}") from None
    return code, text[2:].strip()


def parse_side(body: str) -> Side:
    """Parse the body of a new-game command (``W`` or ``B``)."""
    try:
        return Side.from_letter(body)
    except ValueError as exc:
        raise CommandFormatError(str(exc)) from None


def parse_move_request(body: str) -> MoveRequest:
    """Parse the body of a move command into a :class:`MoveRequest`."""
    match = _MOVE_RE.fullmatch(body)
    if match is None:
        raise CommandFormatError(f"Invalid move format: {body!r}")

    capture = match.group("capture")
    promotion = match.group("promotion")
    return MoveRequest(
        side=Side.from_letter(match.group("side")),
        kind=PieceKind.from_letter(match.group("kind")),
        from_sq=parse_square(match.group("from")),
        to_sq=parse_square(match.group("to")),
        capture=Piece.from_label(capture) if capture else None,
        promotion=Piece.from_label(promotion) if promotion else None,
    )


# ── Formatting ───────────────────────────────────────────────────────────────


def status_token(outcome: MoveOutcome) -> str:
    """Map a move outcome to its status token."""
    if outcome.kind == OutcomeKind.REJECTED:
        assert outcome.reason is not None
        return reject_token(outcome.reason)
    return _EXECUTED_TOKENS[outcome.kind]


def reject_token(reason: RejectReason) -> str:
    return _REJECT_TOKENS[reason]


def format_board(rows: list[list[str]]) -> str:
    """One text line per row, labels separated by single spaces."""
    return "\n".join(" ".join(cells) for cells in rows)
