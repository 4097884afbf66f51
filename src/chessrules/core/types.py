"""Square type and coordinate helpers.

Board layout (row-major, black's back rank first):
    row 0 = rank 8 (a8 ... h8)
    row 7 = rank 1 (a1 ... h1)
    file 0 = 'a', file 7 = 'h'
"""

from __future__ import annotations

from typing import NamedTuple

_FILES = "abcdefgh"


class Square(NamedTuple):
    """Board coordinate as a ``(row, file)`` pair, both in ``0..7``."""

    row: int
    file: int

    def __str__(self) -> str:
        return square_name(self)

    def offset(self, d_row: int, d_file: int) -> Square | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        row = self.row + d_row
        file = self.file + d_file
        if 0 <= row < 8 and 0 <= file < 8:
            return Square(row, file)
        return None


def is_on_board(row: int, file: int) -> bool:
    """Check whether a coordinate pair lies on the board."""
    return 0 <= row < 8 and 0 <= file < 8


def rank_label(sq: Square) -> int:
    """Rank number 1–8 as printed on a board."""
    return 8 - sq.row


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(7, 0)`` → 'a1'."""
    return _FILES[sq.file] + str(8 - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), _FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, file) for row in range(8) for file in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
