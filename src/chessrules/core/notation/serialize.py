"""JSON-compatible snapshots of a game state for persistence.

The presentation layer stores these (e.g. in local storage) and hands them
back to :func:`state_from_dict` to resume a game.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.move import Move
from chessrules.core.piece import Piece, piece_letter, piece_type_from_letter
from chessrules.core.types import Square, parse_square, square_name
from chessrules.core.zobrist import DEFAULT_ZOBRIST, ZobristTable

if TYPE_CHECKING:
    from chessrules.core.state import GameState

_COLOR_CODES: dict[Color, str] = {Color.WHITE: "w", Color.BLACK: "b"}
_COLOR_CODES_REV: dict[str, Color] = {v: k for k, v in _COLOR_CODES.items()}

_CASTLING_KEYS: dict[str, CastlingRights] = {
    "white_kingside": CastlingRights.WHITE_KINGSIDE,
    "white_queenside": CastlingRights.WHITE_QUEENSIDE,
    "black_kingside": CastlingRights.BLACK_KINGSIDE,
    "black_queenside": CastlingRights.BLACK_QUEENSIDE,
}


# ── Encoding ─────────────────────────────────────────────────────────────────


def _piece_code(piece: Piece | None) -> str | None:
    if piece is None:
        return None
    return _COLOR_CODES[piece.color] + piece_letter(piece.piece_type).upper()


def _move_to_dict(move: Move) -> dict[str, Any]:
    return {
        "from": square_name(move.from_sq),
        "to": square_name(move.to_sq),
        "promotion": piece_letter(move.promotion) if move.promotion else None,
        "en_passant": move.is_en_passant,
        "castling": move.is_castling,
    }


def state_to_dict(state: GameState) -> dict[str, Any]:
    """Plain-data snapshot of *state* (safe for ``json.dumps``)."""
    return {
        "board": [[_piece_code(p) for p in row] for row in state.board.rows()],
        "turn": _COLOR_CODES[state.turn],
        "castling": {
            name: bool(state.castling & flag) for name, flag in _CASTLING_KEYS.items()
        },
        "en_passant_target": (
            square_name(state.en_passant_target)
            if state.en_passant_target is not None
            else None
        ),
        "halfmove_clock": state.halfmove_clock,
        "fullmove_number": state.fullmove_number,
        "last_move": _move_to_dict(state.last_move) if state.last_move else None,
        "move_history": list(state.move_history),
        "position_counts": {str(k): v for k, v in state.position_counts.items()},
    }


# ── Decoding ─────────────────────────────────────────────────────────────────


def _parse_piece(code: str | None) -> Piece | None:
    if code is None:
        return None
    if not isinstance(code, str) or len(code) != 2 or code[0] not in _COLOR_CODES_REV:
        raise ValueError(f"Invalid piece code: {code!r}")
    return Piece(_COLOR_CODES_REV[code[0]], piece_type_from_letter(code[1]))


def _parse_board(rows: Any) -> Board:
    if not isinstance(rows, list) or len(rows) != 8:
        raise ValueError("Snapshot board must have 8 rows")
    placement: dict[Square, Piece | None] = {}
    for r, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != 8:
            raise ValueError(f"Snapshot board row {r} must have 8 cells")
        for f, code in enumerate(row):
            placement[Square(r, f)] = _parse_piece(code)
    return Board.empty().with_pieces(placement)


def _parse_move(data: Mapping[str, Any]) -> Move:
    promotion = data.get("promotion")
    return Move(
        parse_square(data["from"]),
        parse_square(data["to"]),
        promotion=piece_type_from_letter(promotion) if promotion else None,
        is_en_passant=bool(data.get("en_passant", False)),
        is_castling=bool(data.get("castling", False)),
    )


def state_from_dict(
    data: Mapping[str, Any], zobrist: ZobristTable = DEFAULT_ZOBRIST
) -> GameState:
    """Rebuild a :class:`GameState` from :func:`state_to_dict` output.

    Raises:
        ValueError: the snapshot is malformed.
    """
    from chessrules.core.state import THREEFOLD_COUNT, GameState

    try:
        board = _parse_board(data["board"])
        turn = _COLOR_CODES_REV[data["turn"]]
        castling = CastlingRights.NONE
        for name, flag in _CASTLING_KEYS.items():
            if data["castling"].get(name):
                castling |= flag
        ep_name = data.get("en_passant_target")
        en_passant = parse_square(ep_name) if ep_name else None
        halfmove_clock = int(data.get("halfmove_clock", 0))
        fullmove_number = int(data.get("fullmove_number", 1))
        last_move = _parse_move(data["last_move"]) if data.get("last_move") else None
        history = tuple(str(san) for san in data.get("move_history", ()))
        counts = {int(k): int(v) for k, v in data.get("position_counts", {}).items()}
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed state snapshot: {exc}") from exc

    key = zobrist.hash_position(board, turn, castling, en_passant)
    if key not in counts:
        counts[key] = 1
    return GameState(
        board=board,
        turn=turn,
        castling=castling,
        en_passant_target=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
        last_move=last_move,
        move_history=history,
        position_counts=MappingProxyType(counts),
        threefold_available=counts[key] >= THREEFOLD_COUNT,
        zobrist_hash=key,
        zobrist=zobrist,
    )
