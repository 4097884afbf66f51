"""FEN-style export of a game state (export only, no parser)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color
from chessrules.core.types import square_name

if TYPE_CHECKING:
    from chessrules.core.state import GameState

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def board_to_fen(state: GameState) -> str:
    """Piece-placement field, rank 8 (row 0) first."""
    ranks: list[str] = []
    for row in state.board.rows():
        text = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)


def castling_to_fen(state: GameState) -> str:
    rights = ""
    if state.white_kingside:
        rights += "K"
    if state.white_queenside:
        rights += "Q"
    if state.black_kingside:
        rights += "k"
    if state.black_queenside:
        rights += "q"
    return rights or "-"


def state_to_fen(state: GameState) -> str:
    """Serialize *state* as a FEN string for display or clipboard export."""
    side = "w" if state.turn == Color.WHITE else "b"
    ep = (
        square_name(state.en_passant_target)
        if state.en_passant_target is not None
        else "-"
    )
    return (
        f"{board_to_fen(state)} {side} {castling_to_fen(state)} {ep} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )
