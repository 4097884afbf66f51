"""Zobrist hashing keys for repetition detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board

DEFAULT_SEED: Final = 0xA5B3C7D9E1F23412
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF

_PIECE_KEY_COUNT: Final = 2 * 6 * 64
_CASTLING_FLAGS: Final = (
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


@dataclass(frozen=True, slots=True)
class ZobristTable:
    """Read-only set of random keys; build once, then share freely."""

    piece_keys: tuple[int, ...]
    side_to_move_key: int
    castling_keys: tuple[int, ...]
    en_passant_keys: tuple[int, ...]

    @classmethod
    def from_seed(cls, seed: int = DEFAULT_SEED) -> ZobristTable:
        def nth_key(index: int) -> int:
            return _splitmix64((seed + index) & _MASK_64)

        base = _PIECE_KEY_COUNT
        return cls(
            piece_keys=tuple(nth_key(i) for i in range(base)),
            side_to_move_key=nth_key(base),
            castling_keys=tuple(nth_key(base + 1 + i) for i in range(4)),
            en_passant_keys=tuple(nth_key(base + 5 + i) for i in range(8)),
        )

    def piece_key(self, piece: Piece, sq: Square) -> int:
        """Hash key for a specific piece on a square."""
        idx = (int(piece.color) * 6 + int(piece.piece_type) - 1) * 64
        return self.piece_keys[idx + sq.row * 8 + sq.file]

    def castling_key(self, castling: CastlingRights) -> int:
        """XOR of the keys of every right still held."""
        key = 0
        for flag, flag_key in zip(_CASTLING_FLAGS, self.castling_keys):
            if castling & flag:
                key ^= flag_key
        return key

    def en_passant_key(self, ep_square: Square) -> int:
        """Hash key for the file of an en passant target."""
        return self.en_passant_keys[ep_square.file]

    def hash_position(
        self,
        board: Board,
        side_to_move: Color,
        castling: CastlingRights,
        en_passant: Square | None,
    ) -> int:
        """Signature of every game-relevant feature, computed from scratch."""
        key = self.castling_key(castling)
        if side_to_move == Color.BLACK:
            key ^= self.side_to_move_key
        if en_passant is not None:
            key ^= self.en_passant_key(en_passant)
        for sq, piece in board:
            key ^= self.piece_key(piece, sq)
        return key


DEFAULT_ZOBRIST: Final = ZobristTable.from_seed()
