"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Files and ranks are plain ints 0–7.  Constructors reject out-of-range
values instead of wrapping them.
"""

from __future__ import annotations

from typing import TypeAlias

from qchess.core.enums import Color

Square: TypeAlias = int  # 0–63

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


def _check_coord(value: int, what: str) -> int:
    if not 0 <= value < 8:
        raise ValueError(f"{what} out of range: {value!r}")
    return value


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return _check_coord(rank, "Rank") * 8 + _check_coord(file, "File")


def square_from_index(index: int) -> Square:
    """Validate a raw 0–63 index."""
    if not is_valid_square(index):
        raise ValueError(f"Square index out of range: {index!r}")
    return index


def file_name(file: int) -> str:
    return FILE_NAMES[_check_coord(file, "File")]


def rank_name(rank: int) -> str:
    return RANK_NAMES[_check_coord(rank, "Rank")]


def parse_file(char: str) -> int:
    """Parse 'a'–'h' into 0–7."""
    if len(char) != 1 or char not in FILE_NAMES:
        raise ValueError(f"Invalid file: {char!r}")
    return FILE_NAMES.index(char)


def parse_rank(char: str) -> int:
    """Parse '1'–'8' into 0–7."""
    if len(char) != 1 or char not in RANK_NAMES:
        raise ValueError(f"Invalid rank: {char!r}")
    return RANK_NAMES.index(char)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    square_from_index(sq)
    return FILE_NAMES[file_of(sq)] + RANK_NAMES[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(parse_file(name[0]), parse_rank(name[1]))


# ── Stepping ────────────────────────────────────────────────────────────────


def offset(sq: Square, df: int, dr: int) -> Square | None:
    """Square *df* files and *dr* ranks away, or None when off the board."""
    f = file_of(sq) + df
    r = rank_of(sq) + dr
    if 0 <= f < 8 and 0 <= r < 8:
        return r * 8 + f
    return None


def forward(color: Color) -> int:
    """Rank delta of one step toward *color*'s opponent."""
    return 1 if color == Color.WHITE else -1


def relative_rank(rank: int, color: Color) -> int:
    """Rank as seen from *color*'s side (0 = own back rank)."""
    return rank if color == Color.WHITE else 7 - rank


def up(sq: Square, color: Color) -> Square | None:
    """One step toward the opponent's back rank."""
    return offset(sq, 0, forward(color))


def down(sq: Square, color: Color) -> Square | None:
    """One step toward *color*'s own back rank."""
    return offset(sq, 0, -forward(color))


def left(sq: Square, color: Color) -> Square | None:
    """One file to the left from *color*'s point of view."""
    return offset(sq, -forward(color), 0)


def right(sq: Square, color: Color) -> Square | None:
    """One file to the right from *color*'s point of view."""
    return offset(sq, forward(color), 0)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
