"""Function-style entry points for presentation code.

Each function is a thin, side-effect-free wrapper around the object API
(:class:`MoveGenerator`, :class:`GameState`, :class:`Rules`).
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.rules import Material, Rules, StatusReport
from chessrules.core.state import GameState, create_initial_state
from chessrules.core.types import Square

__all__ = [
    "apply_move",
    "calculate_material",
    "create_initial_state",
    "get_all_legal_moves",
    "get_game_status",
    "get_legal_moves",
    "get_pseudo_legal_moves",
    "is_in_check",
    "is_square_attacked",
]


def get_legal_moves(state: GameState, square: Square) -> list[Move]:
    """Legal moves of the piece on *square*; empty list for an empty square."""
    return MoveGenerator(state).generate_legal_moves(square)


def get_pseudo_legal_moves(state: GameState, square: Square) -> list[Move]:
    return MoveGenerator(state).generate_pseudo_legal_moves(square)


def get_all_legal_moves(state: GameState, color: Color) -> list[Move]:
    return MoveGenerator(state).generate_all_legal_moves(color)


def apply_move(state: GameState, move: Move) -> GameState:
    """New state after *move*; raises ``EmptySquareError`` on an empty origin."""
    return state.apply_move(move)


def is_in_check(state: GameState, color: Color) -> bool:
    return MoveGenerator(state).is_in_check(color)


def is_square_attacked(state: GameState, square: Square, color: Color) -> bool:
    return MoveGenerator(state).is_square_attacked(square, color)


def get_game_status(state: GameState) -> StatusReport:
    return Rules.game_status(state)


def calculate_material(board: Board) -> Material:
    return Rules.calculate_material(board)
