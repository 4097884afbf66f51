"""Tests for Rules: check, checkmate, stalemate, draws, material."""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, GameStatus
from chessrules.core.rules import Material, Rules, StatusReport
from chessrules.core.state import create_initial_state

BACK_RANK_MATE = "4R1k1/5ppp/8/8/8/8/8/K7"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(create_initial_state())

    def test_rook_check_with_escape(self, make_state) -> None:
        state = make_state("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(state)
        assert not Rules.is_checkmate(state)
        assert Rules.game_status(state) == StatusReport(GameStatus.CHECK)


class TestCheckmate:
    def test_back_rank_mate(self, make_state) -> None:
        state = make_state(BACK_RANK_MATE, turn=Color.BLACK)
        assert Rules.is_checkmate(state)
        report = Rules.game_status(state)
        assert report.status == GameStatus.CHECKMATE
        assert report.winner == Color.WHITE
        assert report.result == GameResult.WHITE_WINS

    def test_king_and_rook_mate(self, make_state) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        state = make_state("R2k4/8/3K4/8/8/8/8/8", turn=Color.BLACK)
        assert Rules.game_status(state).winner == Color.WHITE

    def test_fools_mate(self, play) -> None:
        state = play(create_initial_state(), "f2f3", "e7e5", "g2g4", "d8h4")
        report = Rules.game_status(state)
        assert report.status == GameStatus.CHECKMATE
        assert report.winner == Color.BLACK
        assert report.is_terminal


class TestStalemate:
    def test_king_trapped(self, make_state) -> None:
        state = make_state(STALEMATE, turn=Color.BLACK)
        assert Rules.is_stalemate(state)
        report = Rules.game_status(state)
        assert report.status == GameStatus.STALEMATE
        assert report.winner is None
        assert report.result == GameResult.DRAW

    def test_not_stalemate_when_has_moves(self, make_state) -> None:
        state = make_state("7k/8/5K2/8/8/8/8/8", turn=Color.BLACK)
        assert not Rules.is_stalemate(state)
        assert Rules.game_status(state).status == GameStatus.ONGOING


class TestFiftyMoveRule:
    def test_not_triggered_below_100(self, make_state) -> None:
        state = make_state("4k3/8/8/8/8/8/4K2R/7r", halfmove_clock=99)
        assert not Rules.is_fifty_move_rule(state)
        assert Rules.game_status(state).status == GameStatus.ONGOING

    def test_triggered_at_100(self, make_state) -> None:
        state = make_state("4k3/8/8/8/8/8/4K2R/7r", halfmove_clock=100)
        assert Rules.is_fifty_move_rule(state)
        assert Rules.is_claimable_draw(state)
        report = Rules.game_status(state)
        assert report.status == GameStatus.DRAW_FIFTY_MOVES
        assert report.winner is None

    def test_reached_by_quiet_moves(self, make_state, play) -> None:
        state = make_state("4k3/8/8/8/8/8/8/4K3", halfmove_clock=98)
        state = play(state, "e1d1", "e8d8")
        assert state.halfmove_clock == 100
        assert Rules.game_status(state).status == GameStatus.DRAW_FIFTY_MOVES


class TestStatusPrecedence:
    def test_checkmate_beats_fifty_moves(self, make_state) -> None:
        state = make_state(BACK_RANK_MATE, turn=Color.BLACK, halfmove_clock=100)
        assert Rules.game_status(state).status == GameStatus.CHECKMATE

    def test_stalemate_beats_fifty_moves(self, make_state) -> None:
        state = make_state(STALEMATE, turn=Color.BLACK, halfmove_clock=120)
        assert Rules.game_status(state).status == GameStatus.STALEMATE

    def test_fifty_moves_beats_check(self, make_state) -> None:
        state = make_state("4k3/8/8/8/8/8/8/r3K3", halfmove_clock=100)
        assert Rules.game_status(state).status == GameStatus.DRAW_FIFTY_MOVES


class TestRepetitionClaim:
    def test_threefold_is_claimable_not_terminal(self, play) -> None:
        shuffle = ("g1f3", "g8f6", "f3g1", "f6g8")
        state = play(create_initial_state(), *shuffle, *shuffle)
        assert Rules.is_threefold_repetition(state)
        assert Rules.is_claimable_draw(state)
        assert Rules.game_status(state).status == GameStatus.ONGOING


class TestMaterial:
    def test_starting_material(self) -> None:
        assert Rules.calculate_material(Board.initial()) == Material(white=39, black=39)

    def test_after_capture(self, play) -> None:
        state = play(create_initial_state(), "e2e4", "d7d5", "e4d5")
        material = Rules.calculate_material(state.board)
        assert material == Material(white=39, black=38)
        assert material.balance == 1

    def test_kings_are_worth_nothing(self) -> None:
        assert Rules.calculate_material(Board()) == Material(0, 0)


class TestGameStatus:
    def test_ongoing_at_start(self) -> None:
        report = Rules.game_status(create_initial_state())
        assert report == StatusReport(GameStatus.ONGOING)
        assert report.result == GameResult.IN_PROGRESS
        assert str(report.status) == "ongoing"
