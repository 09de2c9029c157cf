"""Parsing of UCI protocol input lines into commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from qchess.core.errors import ChessError, FenError, IllegalMoveError, MoveParseError
from qchess.game.state import Game

_FEN_FIELDS = 6


class UciError(ChessError, ValueError):
    """Unrecognised or malformed protocol command."""


class CommandKind(Enum):
    UCI = auto()
    DEBUG = auto()
    IS_READY = auto()
    NEW_GAME = auto()
    POSITION = auto()
    STOP = auto()
    QUIT = auto()
    DISPLAY = auto()


_NO_ARG_COMMANDS: dict[str, CommandKind] = {
    "uci": CommandKind.UCI,
    "isready": CommandKind.IS_READY,
    "ucinewgame": CommandKind.NEW_GAME,
    "stop": CommandKind.STOP,
    "quit": CommandKind.QUIT,
    "d": CommandKind.DISPLAY,
}


@dataclass(frozen=True, slots=True)
class UciCommand:
    """One parsed input line.

    ``debug`` is meaningful for :attr:`CommandKind.DEBUG`, ``game`` for
    :attr:`CommandKind.POSITION`.
    """

    kind: CommandKind
    debug: bool = False
    game: Game | None = None


def parse_command(line: str) -> UciCommand:
    """Parse a single input line; raises :class:`UciError`."""
    words = line.split()
    if not words:
        raise UciError("No command found")
    first, args = words[0], words[1:]

    kind = _NO_ARG_COMMANDS.get(first)
    if kind is not None:
        if args:
            raise UciError(f"`{first}` takes no arguments: {line!r}")
        return UciCommand(kind)

    if first == "debug":
        if args == ["on"]:
            return UciCommand(CommandKind.DEBUG, debug=True)
        if args == ["off"]:
            return UciCommand(CommandKind.DEBUG, debug=False)
        raise UciError("Must be `debug [on|off]`")

    if first == "position" and args:
        return UciCommand(CommandKind.POSITION, game=game_from_position_args(args))

    if first == "go":
        # TODO: hand the position to a search worker once one exists.
        raise UciError("`go` is not supported yet")

    raise UciError(f"Invalid command: {line!r}")


def game_from_position_args(args: list[str]) -> Game:
    """Build a :class:`Game` from the words after ``position``.

    Accepts ``startpos`` or ``fen <6 fields>``, optionally followed by
    ``moves m1 m2 ...``.  Each move is classified against the position as it
    stands just before that move, then applied.
    """
    if args[0] == "startpos":
        game = Game()
        leftover = args[1:]
    elif args[0] == "fen" and len(args) >= 1 + _FEN_FIELDS:
        fen = " ".join(args[1 : 1 + _FEN_FIELDS])
        try:
            game = Game.from_fen(fen)
        except FenError as exc:
            raise UciError(f"Invalid position: {exc}") from exc
        leftover = args[1 + _FEN_FIELDS :]
    else:
        raise UciError(f"Invalid position: {' '.join(args)!r}")

    if not leftover:
        return game
    if leftover[0] != "moves":
        raise UciError(f"Invalid option after position: {leftover[0]!r}")

    for text in leftover[1:]:
        try:
            game.push_uci(text)
        except (MoveParseError, IllegalMoveError, NotImplementedError) as exc:
            raise UciError(f"Invalid move: {text!r} ({exc})") from exc
    return game
