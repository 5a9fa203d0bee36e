"""ChessDevice — write a command, read back the reply."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessdev.game.controller import GameController
from chessdev.game.interfaces import RejectReason
from chessdev.protocol.commands import (
    OK,
    CommandCode,
    CommandFormatError,
    format_board,
    parse_move_request,
    parse_side,
    reject_token,
    split_command,
    status_token,
)

_LOGGER = logging.getLogger(__name__)

MAX_COMMAND_LENGTH = 255


class ChessDevice:
    """Command endpoint wrapping a single :class:`GameController`.

    :meth:`write` processes one command line and stores its reply;
    :meth:`read` hands the stored reply out once. Replies are
    newline-terminated.
    """

    __slots__ = ("_controller", "_message", "_handlers")

    def __init__(self, controller: GameController | None = None) -> None:
        self._controller = controller if controller is not None else GameController()
        self._message = ""
        self._handlers: dict[CommandCode, Callable[[str], str]] = {
            CommandCode.NEW_GAME: self._new_game,
            CommandCode.SHOW_BOARD: self._show_board,
            CommandCode.MOVE: self._move,
            CommandCode.CPU_MOVE: self._cpu_move,
            CommandCode.END_GAME: self._end_game,
        }

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Buffer interface ─────────────────────────────────────────────────

    def write(self, data: str) -> int:
        """Process one command; returns the number of characters consumed."""
        line = data[:MAX_COMMAND_LENGTH]
        _LOGGER.debug("Chess command: %r", line)
        try:
            code, body = split_command(line)
            reply = self._handlers[code](body)
        except CommandFormatError as exc:
            _LOGGER.debug("Malformed command %r: %s", line, exc)
            reply = reject_token(RejectReason.INVALID_FORMAT)
        self._message = reply + "\n"
        return len(line)

    def read(self) -> str:
        """Return the pending reply, then an empty string until the next write."""
        message, self._message = self._message, ""
        return message

    def handle(self, line: str) -> str:
        """Write *line* and read the reply."""
        self.write(line)
        return self.read()

    # ── Command handlers ─────────────────────────────────────────────────

    def _new_game(self, body: str) -> str:
        self._controller.new_game(parse_side(body))
        return OK

    def _show_board(self, _body: str) -> str:
        ctrl = self._controller
        if ctrl.state is None:
            return reject_token(RejectReason.NO_GAME)
        if ctrl.state.terminal:
            return reject_token(RejectReason.GAME_OVER)
        return format_board(ctrl.state.render())

    def _move(self, body: str) -> str:
        ctrl = self._controller
        # Sequencing is checked before the body is parsed.
        reason = self._human_turn_error()
        if reason is not None:
            return reject_token(reason)
        return status_token(ctrl.submit_move(parse_move_request(body)))

    def _cpu_move(self, _body: str) -> str:
        return status_token(self._controller.submit_cpu_move())

    def _end_game(self, _body: str) -> str:
        reason = self._controller.end_game()
        return OK if reason is None else reject_token(reason)

    def _human_turn_error(self) -> RejectReason | None:
        state = self._controller.state
        if state is None:
            return RejectReason.NO_GAME
        if state.terminal:
            return RejectReason.GAME_OVER
        if state.side_to_move != state.human_side:
            return RejectReason.OUT_OF_TURN
        return None
