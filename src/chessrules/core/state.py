"""GameState: immutable snapshot of a game, and the move applier."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Final

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.notation.san import move_to_san
from chessrules.core.types import Square
from chessrules.core.zobrist import DEFAULT_ZOBRIST, ZobristTable

THREEFOLD_COUNT: Final = 3

# Losing the rook on (or moving it off) a corner revokes that corner's right.
_ROOK_CORNERS: Final[dict[Square, CastlingRights]] = {
    Square(7, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(7, 7): CastlingRights.WHITE_KINGSIDE,
    Square(0, 0): CastlingRights.BLACK_QUEENSIDE,
    Square(0, 7): CastlingRights.BLACK_KINGSIDE,
}
_KING_RIGHTS: Final[dict[Color, CastlingRights]] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}


@dataclass(frozen=True, slots=True)
class GameState:
    """Full game snapshot: board, side to move, rights, clocks, history.

    Never modified after construction; :meth:`apply_move` builds the
    successor state.
    """

    board: Board
    turn: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant_target: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    last_move: Move | None = None
    move_history: tuple[str, ...] = ()
    position_counts: Mapping[int, int] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    threefold_available: bool = False
    zobrist_hash: int = 0
    zobrist: ZobristTable = field(
        default=DEFAULT_ZOBRIST, repr=False, compare=False, hash=False
    )

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_board(
        cls,
        board: Board,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant_target: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        zobrist: ZobristTable = DEFAULT_ZOBRIST,
    ) -> GameState:
        """Start a game from an arbitrary placement with a fresh history."""
        key = zobrist.hash_position(board, turn, castling, en_passant_target)
        return cls(
            board=board,
            turn=turn,
            castling=castling,
            en_passant_target=en_passant_target,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
            position_counts=MappingProxyType({key: 1}),
            zobrist_hash=key,
            zobrist=zobrist,
        )

    # ── Castling rights as booleans ──────────────────────────────────────

    @property
    def white_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> GameState:
        """Return the state after *move*. Legality is the caller's job.

        Raises:
            EmptySquareError: nothing stands on ``move.from_sq``.
        """
        piece = self.board[move.from_sq]
        board, captured = self.board.with_move(move)
        assert piece is not None  # with_move raised otherwise

        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~_KING_RIGHTS[piece.color]
        for sq in (move.from_sq, move.to_sq):
            if sq in _ROOK_CORNERS:
                castling &= ~_ROOK_CORNERS[sq]

        en_passant: Square | None = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.row - move.from_sq.row) == 2
        ):
            en_passant = Square(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.file
            )

        if piece.piece_type == PieceType.PAWN or captured is not None:
            halfmove_clock = 0
        else:
            halfmove_clock = self.halfmove_clock + 1

        fullmove_number = self.fullmove_number
        if self.turn == Color.BLACK:
            fullmove_number += 1

        turn = self.turn.opposite
        key = self.zobrist.hash_position(board, turn, castling, en_passant)
        counts = dict(self.position_counts)
        counts[key] = counts.get(key, 0) + 1

        after = replace(
            self,
            board=board,
            turn=turn,
            castling=castling,
            en_passant_target=en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
            last_move=move,
            position_counts=MappingProxyType(counts),
            threefold_available=counts[key] >= THREEFOLD_COUNT,
            zobrist_hash=key,
        )
        san = move_to_san(self, move, after)
        return replace(after, move_history=(*self.move_history, san))

    # ── Queries ──────────────────────────────────────────────────────────

    def repetition_count(self) -> int:
        """How many times the current position occurred in this game."""
        return self.position_counts.get(self.zobrist_hash, 0)

    @property
    def ply_count(self) -> int:
        return len(self.move_history)


def create_initial_state(zobrist: ZobristTable = DEFAULT_ZOBRIST) -> GameState:
    """Standard starting position, white to move, all rights available."""
    return GameState.from_board(
        Board.initial(), castling=CastlingRights.ALL, zobrist=zobrist
    )
