"""Text transport: command grammar, status tokens and the device endpoint."""

from chessdev.protocol.commands import (
    CommandCode,
    CommandFormatError,
    format_board,
    parse_move_request,
    parse_side,
    split_command,
    status_token,
)
from chessdev.protocol.device import ChessDevice

__all__ = [
    "ChessDevice",
    "CommandCode",
    "CommandFormatError",
    "format_board",
    "parse_move_request",
    "parse_side",
    "split_command",
    "status_token",
]
