"""Chess rules engine: legal moves, move application and game status."""

from chessrules.core import (
    Board,
    CastlingRights,
    Color,
    EmptySquareError,
    GameState,
    GameStatus,
    IllegalMoveError,
    Move,
    Piece,
    PieceType,
    Square,
    apply_move,
    calculate_material,
    create_initial_state,
    get_all_legal_moves,
    get_game_status,
    get_legal_moves,
    get_pseudo_legal_moves,
    is_in_check,
    is_square_attacked,
    parse_square,
    square_name,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "CastlingRights",
    "Color",
    "EmptySquareError",
    "GameState",
    "GameStatus",
    "IllegalMoveError",
    "Move",
    "Piece",
    "PieceType",
    "Square",
    "apply_move",
    "calculate_material",
    "create_initial_state",
    "get_all_legal_moves",
    "get_game_status",
    "get_legal_moves",
    "get_pseudo_legal_moves",
    "is_in_check",
    "is_square_attacked",
    "parse_square",
    "square_name",
]
