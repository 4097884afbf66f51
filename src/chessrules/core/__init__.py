"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import create_initial_state, get_legal_moves, parse_square

    state = create_initial_state()
    for move in get_legal_moves(state, parse_square("g1")):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.engine import (
    apply_move,
    calculate_material,
    create_initial_state,
    get_all_legal_moves,
    get_game_status,
    get_legal_moves,
    get_pseudo_legal_moves,
    is_in_check,
    is_square_attacked,
)
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    GameStatus,
    PieceType,
)
from chessrules.core.errors import ChessRulesError, EmptySquareError, IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_san,
    state_from_dict,
    state_to_dict,
    state_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Material, Rules, StatusReport
from chessrules.core.state import GameState
from chessrules.core.types import Square, parse_square, square_name
from chessrules.core.zobrist import DEFAULT_ZOBRIST, ZobristTable

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Errors
    "ChessRulesError",
    "EmptySquareError",
    "IllegalMoveError",
    # Domain objects
    "Board",
    "GameState",
    "Material",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "StatusReport",
    "ZobristTable",
    "DEFAULT_ZOBRIST",
    # Functional API
    "apply_move",
    "calculate_material",
    "create_initial_state",
    "get_all_legal_moves",
    "get_game_status",
    "get_legal_moves",
    "get_pseudo_legal_moves",
    "is_in_check",
    "is_square_attacked",
    # Notation
    "STARTING_FEN",
    "move_to_san",
    "state_from_dict",
    "state_to_dict",
    "state_to_fen",
]
