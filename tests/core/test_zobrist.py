"""Tests for Zobrist tables and position hashing."""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.state import create_initial_state
from chessrules.core.types import parse_square
from chessrules.core.zobrist import DEFAULT_ZOBRIST, ZobristTable


class TestZobristTable:
    def test_same_seed_same_keys(self) -> None:
        assert ZobristTable.from_seed(7) == ZobristTable.from_seed(7)

    def test_different_seed_different_keys(self) -> None:
        assert ZobristTable.from_seed(7).piece_keys != ZobristTable.from_seed(8).piece_keys

    def test_table_sizes(self) -> None:
        assert len(DEFAULT_ZOBRIST.piece_keys) == 2 * 6 * 64
        assert len(DEFAULT_ZOBRIST.castling_keys) == 4
        assert len(DEFAULT_ZOBRIST.en_passant_keys) == 8

    def test_keys_are_distinct(self) -> None:
        keys = (
            *DEFAULT_ZOBRIST.piece_keys,
            DEFAULT_ZOBRIST.side_to_move_key,
            *DEFAULT_ZOBRIST.castling_keys,
            *DEFAULT_ZOBRIST.en_passant_keys,
        )
        assert len(set(keys)) == len(keys)


class TestHashPosition:
    def _hash(self, **overrides) -> int:
        fields = {
            "board": Board.initial(),
            "side_to_move": Color.WHITE,
            "castling": CastlingRights.ALL,
            "en_passant": None,
        }
        fields.update(overrides)
        return DEFAULT_ZOBRIST.hash_position(**fields)

    def test_reproducible(self) -> None:
        assert self._hash() == self._hash()
        assert self._hash() == create_initial_state().zobrist_hash

    def test_each_feature_matters(self) -> None:
        base = self._hash()
        assert self._hash(side_to_move=Color.BLACK) != base
        assert self._hash(castling=CastlingRights.WHITE_BOTH) != base
        assert self._hash(en_passant=parse_square("e3")) != base
        assert self._hash(board=Board.initial().with_pieces({parse_square("e2"): None})) != base

    def test_en_passant_keyed_by_file(self) -> None:
        assert self._hash(en_passant=parse_square("e3")) == self._hash(
            en_passant=parse_square("e6")
        )
        assert self._hash(en_passant=parse_square("e3")) != self._hash(
            en_passant=parse_square("d3")
        )

    def test_custom_table_flows_to_successors(self, play) -> None:
        table = ZobristTable.from_seed(1234)
        start = create_initial_state(table)
        after = play(start, "e2e4")
        assert after.zobrist is table
        assert after.zobrist_hash == table.hash_position(
            after.board, after.turn, after.castling, after.en_passant_target
        )
        assert start.zobrist_hash != create_initial_state().zobrist_hash
