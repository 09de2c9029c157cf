"""UCI protocol front end."""

from qchess.uci.commands import (
    CommandKind,
    UciCommand,
    UciError,
    game_from_position_args,
    parse_command,
)
from qchess.uci.session import UciSession

__all__ = [
    "CommandKind",
    "UciCommand",
    "UciError",
    "UciSession",
    "game_from_position_args",
    "parse_command",
]
