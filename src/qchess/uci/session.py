"""Line-oriented UCI front end driving a :class:`Game`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from qchess import __version__
from qchess.game.state import Game
from qchess.uci.commands import CommandKind, UciCommand, UciError, parse_command

_LOGGER = logging.getLogger(__name__)

ENGINE_NAME = "qchess"
ENGINE_AUTHOR = "qchess developers"


class UciSession:
    """Reads protocol commands one at a time and writes replies to *output*."""

    def __init__(self, output: TextIO) -> None:
        self._out = output
        self.game = Game()
        self.debug = False
        self.running = True

    # ── Main loop ────────────────────────────────────────────────────────

    def run(self, lines: Iterable[str]) -> None:
        """Process *lines* until ``quit`` or end of input."""
        for line in lines:
            self.handle_line(line)
            if not self.running:
                break

    def handle_line(self, line: str) -> None:
        """Parse and execute one line; bad commands are logged and skipped."""
        line = line.strip()
        if not line:
            return
        _LOGGER.debug("<< %s", line)
        try:
            command = parse_command(line)
        except UciError as exc:
            _LOGGER.warning("Rejected command %r: %s", line, exc)
            return
        self.handle(command)

    def handle(self, command: UciCommand) -> None:
        kind = command.kind
        if kind == CommandKind.UCI:
            self._reply(f"id name {ENGINE_NAME} {__version__}")
            self._reply(f"id author {ENGINE_AUTHOR}")
            self._reply("uciok")
        elif kind == CommandKind.IS_READY:
            self._reply("readyok")
        elif kind == CommandKind.DEBUG:
            self._set_debug(command.debug)
        elif kind == CommandKind.NEW_GAME:
            self.game = Game()
        elif kind == CommandKind.POSITION:
            assert command.game is not None
            self.game = command.game
            _LOGGER.debug("Position set: %s", self.game.fen)
        elif kind == CommandKind.DISPLAY:
            self._reply(self.game.position.board.render())
            self._reply(f"Fen: {self.game.fen}")
        elif kind == CommandKind.STOP:
            pass
        elif kind == CommandKind.QUIT:
            self.running = False

    # ── Helpers ──────────────────────────────────────────────────────────

    def _set_debug(self, enabled: bool) -> None:
        self.debug = enabled
        logging.getLogger("qchess").setLevel(
            logging.DEBUG if enabled else logging.NOTSET
        )

    def _reply(self, text: str) -> None:
        _LOGGER.debug(">> %s", text)
        print(text, file=self._out, flush=True)
