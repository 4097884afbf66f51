"""High-level chess rules: check, checkmate, stalemate, draws, material."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from chessrules.core.enums import Color, GameResult, GameStatus, PieceType
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.state import GameState

FIFTY_MOVE_HALFMOVES: Final = 100  # 100 half-moves = 50 full moves

PIECE_VALUES: Final[dict[PieceType, int]] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


@dataclass(frozen=True, slots=True)
class StatusReport:
    """Result of :meth:`Rules.game_status` for the side to move."""

    status: GameStatus
    winner: Color | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (
            GameStatus.CHECKMATE,
            GameStatus.STALEMATE,
            GameStatus.DRAW_FIFTY_MOVES,
        )

    @property
    def result(self) -> GameResult:
        """The report expressed as a :class:`GameResult`."""
        if self.winner == Color.WHITE:
            return GameResult.WHITE_WINS
        if self.winner == Color.BLACK:
            return GameResult.BLACK_WINS
        if self.is_terminal:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS


@dataclass(frozen=True, slots=True)
class Material:
    """Summed piece values per side."""

    white: int
    black: int

    @property
    def balance(self) -> int:
        """White minus black."""
        return self.white - self.black


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Product policy:
    # - Checkmate and stalemate end the game.
    # - The fifty-move rule is reported as a draw status.
    # - Threefold repetition is only claimable (see GameState.threefold_available).

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return MoveGenerator(state).is_in_check(state.turn)

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        gen = MoveGenerator(state)
        return gen.is_in_check(state.turn) and not gen.has_legal_move(state.turn)

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        gen = MoveGenerator(state)
        return not gen.is_in_check(state.turn) and not gen.has_legal_move(state.turn)

    @staticmethod
    def is_fifty_move_rule(state: GameState) -> bool:
        return state.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def is_threefold_repetition(state: GameState) -> bool:
        return state.threefold_available

    @staticmethod
    def is_claimable_draw(state: GameState) -> bool:
        """Whether the side to move may claim a draw by rule."""
        return Rules.is_fifty_move_rule(state) or Rules.is_threefold_repetition(state)

    @staticmethod
    def game_status(state: GameState) -> StatusReport:
        """Classify *state* for the side to move.

        Checkmate and stalemate win over the fifty-move draw, which wins
        over plain check.
        """
        gen = MoveGenerator(state)
        in_check = gen.is_in_check(state.turn)

        if not gen.has_legal_move(state.turn):
            if in_check:
                return StatusReport(GameStatus.CHECKMATE, state.turn.opposite)
            return StatusReport(GameStatus.STALEMATE)

        if Rules.is_fifty_move_rule(state):
            return StatusReport(GameStatus.DRAW_FIFTY_MOVES)

        if in_check:
            return StatusReport(GameStatus.CHECK)

        return StatusReport(GameStatus.ONGOING)

    @staticmethod
    def calculate_material(board: Board) -> Material:
        """Standard piece values (P=1, N=B=3, R=5, Q=9, K=0) per side."""
        totals = {Color.WHITE: 0, Color.BLACK: 0}
        for _, piece in board:
            totals[piece.color] += PIECE_VALUES[piece.piece_type]
        return Material(white=totals[Color.WHITE], black=totals[Color.BLACK])
