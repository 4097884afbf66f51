"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.state import GameState
from chessrules.core.types import Square, parse_square

StateFactory = Callable[..., GameState]


def build_state(
    placement: str,
    turn: Color = Color.WHITE,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: str | None = None,
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
) -> GameState:
    """State from a FEN piece-placement field (rank 8 first)."""
    ranks = placement.split("/")
    assert len(ranks) == 8, placement
    pieces: dict[Square, Piece] = {}
    for row, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                file += int(ch)
            else:
                pieces[Square(row, file)] = Piece.from_char(ch)
                file += 1
        assert file == 8, placement
    return GameState.from_board(
        Board.from_mapping(pieces),
        turn=turn,
        castling=castling,
        en_passant_target=parse_square(en_passant) if en_passant else None,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )


@pytest.fixture
def make_state() -> StateFactory:
    """Factory building a :class:`GameState` from a placement string."""
    return build_state


@pytest.fixture
def play() -> Callable[..., GameState]:
    """Apply a sequence of ``"e2e4"``-style moves, resolving flags legally."""
    from chessrules.core.move_generator import MoveGenerator

    def _play(state: GameState, *moves: str) -> GameState:
        for text in moves:
            from_sq, to_sq = parse_square(text[:2]), parse_square(text[2:4])
            candidates = [
                m
                for m in MoveGenerator(state).generate_legal_moves(from_sq)
                if m.to_sq == to_sq and str(m) == text
            ]
            assert len(candidates) == 1, f"{text} is not legal here"
            state = state.apply_move(candidates[0])
        return state

    return _play
