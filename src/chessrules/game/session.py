"""Game session: lifecycle and undo on top of immutable game states."""

from __future__ import annotations

import logging

from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.rules import Rules, StatusReport
from chessrules.core.state import GameState, create_initial_state
from chessrules.core.types import Square, square_name
from chessrules.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


class GameSession:
    """Manages phase, result and the stack of states for one game.

    This is a pure data/logic class with no threading or UI. Every played
    move pushes a new :class:`GameState`; undo pops it.
    """

    __slots__ = ("_states", "_phase", "_result")

    def __init__(self) -> None:
        self._states: list[GameState] = [create_initial_state()]
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS

    # ── Initialisation ───────────────────────────────────────────────────

    def new_game(self, state: GameState | None = None) -> None:
        """Initialise (or reset) the game, optionally from a saved state."""
        self._states = [state if state is not None else create_initial_state()]
        self._phase = GamePhase.AWAITING_MOVE
        self._result = GameResult.IN_PROGRESS
        _LOGGER.debug("New game, %s to move", self.state.turn)
        self._check_game_over()

    # ── Moves ────────────────────────────────────────────────────────────

    def play(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> GameState:
        """Play the legal move matching a from/to request.

        Castling and en passant need no flags; they are taken from the
        matching legal move.

        Raises:
            IllegalMoveError: the game is over, or no such legal move exists.
        """
        if self.is_game_over:
            raise IllegalMoveError("Game is over")

        state = self.state
        piece = state.board[from_sq]
        move: Move | None = None
        if piece is not None and piece.color == state.turn:
            move = MoveGenerator(state).find_legal_move(from_sq, to_sq, promotion)
        if move is None:
            raise IllegalMoveError(
                f"Illegal move: {square_name(from_sq)}{square_name(to_sq)}"
            )
        return self.apply_move(move)

    def apply_move(self, move: Move) -> GameState:
        """Apply an already validated move and return the new state."""
        if self._phase == GamePhase.NOT_STARTED:
            self._phase = GamePhase.AWAITING_MOVE
        after = self.state.apply_move(move)
        self._states.append(after)
        _LOGGER.debug("Played %s (%s)", after.move_history[-1], move)
        self._check_game_over()
        return after

    def undo(self) -> GameState | None:
        """Undo the last move. Returns the restored state, or None if refused.

        A finished game is never reopened; start a new one instead.
        """
        if self.is_game_over or len(self._states) == 1:
            return None

        undone = self._states.pop()
        _LOGGER.debug("Undid %s", undone.last_move)
        return self.state

    # ── Resignation / draw / flag ────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self._finish(_win_for(color.opposite), f"{color} resigned")

    def claim_draw(self) -> bool:
        """Claim a fifty-move or threefold-repetition draw if available."""
        if self.is_game_over or not Rules.is_claimable_draw(self.state):
            return False
        self._finish(GameResult.DRAW, "draw claimed")
        return True

    def flag_fall(self, color: Color) -> None:
        """Time ran out for *color*."""
        self._finish(_win_for(color.opposite), f"{color} flag fell")

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._states[-1]

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def status(self) -> StatusReport:
        return Rules.game_status(self.state)

    @property
    def side_to_move(self) -> Color:
        return self.state.turn

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def can_claim_draw(self) -> bool:
        return not self.is_game_over and Rules.is_claimable_draw(self.state)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played in this session."""
        return len(self._states) - 1

    def legal_targets(self, square: Square) -> list[Square]:
        """Destinations to highlight for the piece on *square*."""
        state = self.state
        piece = state.board[square]
        if self.is_game_over or piece is None or piece.color != state.turn:
            return []
        targets: list[Square] = []
        for move in MoveGenerator(state).generate_legal_moves(square):
            if move.to_sq not in targets:
                targets.append(move.to_sq)
        return targets

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        report = Rules.game_status(self.state)
        if report.is_terminal:
            self._finish(report.result, str(report.status))

    def _finish(self, result: GameResult, reason: str) -> None:
        self._result = result
        self._phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s (%s)", result.name, reason)


def _win_for(color: Color) -> GameResult:
    return GameResult.WHITE_WINS if color == Color.WHITE else GameResult.BLACK_WINS
