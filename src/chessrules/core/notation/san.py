"""SAN (Standard Algebraic Notation) rendering for move history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.errors import EmptySquareError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square, rank_label, square_name

if TYPE_CHECKING:
    from chessrules.core.state import GameState

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def _file_letter(sq: Square) -> str:
    return chr(ord("a") + sq.file)


def move_to_san(before: GameState, move: Move, after: GameState) -> str:
    """Render *move* given the states before and after it was played."""
    board = before.board
    piece = board[move.from_sq]
    if piece is None:
        raise EmptySquareError(f"No piece on {square_name(move.from_sq)}")

    if move.is_castling and piece.piece_type == PieceType.KING:
        san = "O-O" if move.to_sq.file > move.from_sq.file else "O-O-O"
    else:
        san = ""
        is_capture = board[move.to_sq] is not None or move.is_en_passant

        if piece.piece_type == PieceType.PAWN:
            if is_capture:
                san += _file_letter(move.from_sq)
        else:
            san += _SAN_PIECE[piece.piece_type]

            # Disambiguation
            gen = MoveGenerator(before)
            rivals = [
                sq
                for sq, other in board.pieces(piece.color)
                if sq != move.from_sq
                and other.piece_type == piece.piece_type
                and any(m.to_sq == move.to_sq for m in gen.generate_legal_moves(sq))
            ]
            if rivals:
                same_file = any(sq.file == move.from_sq.file for sq in rivals)
                same_rank = any(sq.row == move.from_sq.row for sq in rivals)
                if not same_file:
                    san += _file_letter(move.from_sq)
                elif not same_rank:
                    san += str(rank_label(move.from_sq))
                else:
                    san += square_name(move.from_sq)

        if is_capture:
            san += "x"

        san += square_name(move.to_sq)

        if move.promotion is not None:
            san += "=" + _SAN_PIECE[move.promotion]

    # Check / checkmate suffix
    gen_after = MoveGenerator(after)
    if gen_after.is_in_check(after.turn):
        san += "+" if gen_after.has_legal_move(after.turn) else "#"

    return san
