"""Pseudo-legal and legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.state import GameState


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# White advances toward row 0, black toward row 7.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_PAWN_LAST_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
_EN_PASSANT_ROW: dict[Color, int] = {Color.WHITE: 3, Color.BLACK: 4}

_KING_HOME: dict[Color, Square] = {Color.WHITE: Square(7, 4), Color.BLACK: Square(0, 4)}
_KINGSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_KINGSIDE,
    Color.BLACK: CastlingRights.BLACK_KINGSIDE,
}
_QUEENSIDE_RIGHT: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_QUEENSIDE,
    Color.BLACK: CastlingRights.BLACK_QUEENSIDE,
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves = (sq.offset(dr, df) for dr, df in offsets)
        targets[sq] = tuple(to_sq for to_sq in moves if to_sq is not None)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ray: list[Square] = []
            to_sq = sq.offset(dr, df)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


def _build_pawn_attackers() -> dict[Color, dict[Square, tuple[Square, ...]]]:
    # A pawn attacks from one row behind the target, relative to its advance.
    attackers: dict[Color, dict[Square, tuple[Square, ...]]] = {}
    for color, direction in _PAWN_DIRECTION.items():
        per_square: dict[Square, tuple[Square, ...]] = {}
        for sq in ALL_SQUARES:
            origins = (sq.offset(-direction, df) for df in (-1, 1))
            per_square[sq] = tuple(o for o in origins if o is not None)
        attackers[color] = per_square
    return attackers


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_PAWN_ATTACKERS = _build_pawn_attackers()

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS: dict[PieceType, dict[Square, tuple[tuple[Square, ...], ...]]] = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


# -- Attack detection (board level) ----------------------------------------


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    pawn = Piece(by_color, PieceType.PAWN)
    for origin in _PAWN_ATTACKERS[by_color][sq]:
        if board[origin] == pawn:
            return True

    knight = Piece(by_color, PieceType.KNIGHT)
    for origin in _KNIGHT_TARGETS[sq]:
        if board[origin] == knight:
            return True

    king = Piece(by_color, PieceType.KING)
    for origin in _KING_TARGETS[sq]:
        if board[origin] == king:
            return True

    for ray in _BISHOP_RAYS[sq]:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in (
                PieceType.BISHOP,
                PieceType.QUEEN,
            ):
                return True
            break

    for ray in _ROOK_RAYS[sq]:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in (
                PieceType.ROOK,
                PieceType.QUEEN,
            ):
                return True
            break

    return False


def is_king_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? A board without that king is never in check."""
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)


class MoveGenerator:
    """Generates moves for a given :class:`GameState`.

    States are immutable, so legality is tested by playing each candidate
    on a scratch board and asking whether the mover's king is attacked.
    """

    __slots__ = ("_state", "_board")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._board = state.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, sq: Square) -> list[Move]:
        """Strictly legal moves for the piece on *sq* (empty if none)."""
        piece = self._board[sq]
        if piece is None:
            return []

        legal: list[Move] = []
        for move in self.generate_pseudo_legal_moves(sq):
            if move.is_castling and not self._is_castling_safe(move, piece.color):
                continue
            after, _ = self._board.with_move(move)
            if not is_king_in_check(after, piece.color):
                legal.append(move)
        return legal

    def generate_all_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Legal moves of every *color* piece, in row-major scan order."""
        if color is None:
            color = self._state.turn
        moves: list[Move] = []
        for sq, _ in self._board.pieces(color):
            moves.extend(self.generate_legal_moves(sq))
        return moves

    def has_legal_move(self, color: Color | None = None) -> bool:
        """Whether *color* can move at all; stops at the first legal move."""
        if color is None:
            color = self._state.turn
        return any(self.generate_legal_moves(sq) for sq, _ in self._board.pieces(color))

    def find_legal_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> Move | None:
        """The legal move matching a from/to request, flags filled in."""
        for move in self.generate_legal_moves(from_sq):
            if move.to_sq == to_sq and move.promotion == promotion:
                return move
        return None

    def generate_pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves for the piece on *sq* (may leave own king in check)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, _KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.KING:
            self._gen_steps(sq, piece.color, _KING_TARGETS[sq], moves)
            self._gen_castling(sq, piece.color, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDER_RAYS[ptype][sq], moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_king_in_check(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._board, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        direction = _PAWN_DIRECTION[color]
        last_row = _PAWN_LAST_ROW[color]

        one_step = sq.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, last_row, moves)
            if sq.row == _PAWN_HOME_ROW[color]:
                two_step = Square(sq.row + 2 * direction, sq.file)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        en_passant = self._state.en_passant_target
        for df in (-1, 1):
            cap_sq = sq.offset(direction, df)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                self._add_pawn_move(sq, cap_sq, last_row, moves)
            if cap_sq == en_passant and sq.row == _EN_PASSANT_ROW[color]:
                moves.append(Move(sq, cap_sq, is_en_passant=True))

    @staticmethod
    def _add_pawn_move(
        sq: Square, to_sq: Square, last_row: int, moves: list[Move]
    ) -> None:
        if to_sq.row == last_row:
            for pt in PROMOTION_TYPES:
                moves.append(Move(sq, to_sq, promotion=pt))
        else:
            moves.append(Move(sq, to_sq))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        # Candidates only; check safety is applied by generate_legal_moves.
        if king_sq != _KING_HOME[color]:
            return

        board = self._board
        castling = self._state.castling
        row = king_sq.row
        rook = Piece(color, PieceType.ROOK)

        if (
            castling & _KINGSIDE_RIGHT[color]
            and board.is_empty(Square(row, 5))
            and board.is_empty(Square(row, 6))
            and board[Square(row, 7)] == rook
        ):
            moves.append(Move(king_sq, Square(row, 6), is_castling=True))

        if (
            castling & _QUEENSIDE_RIGHT[color]
            and board.is_empty(Square(row, 1))
            and board.is_empty(Square(row, 2))
            and board.is_empty(Square(row, 3))
            and board[Square(row, 0)] == rook
        ):
            moves.append(Move(king_sq, Square(row, 2), is_castling=True))

    def _is_castling_safe(self, move: Move, color: Color) -> bool:
        """King not in check, and neither the passed nor landing square attacked."""
        if self.is_in_check(color):
            return False
        opponent = color.opposite
        step = 1 if move.to_sq.file > move.from_sq.file else -1
        passed = Square(move.from_sq.row, move.from_sq.file + step)
        return not self.is_square_attacked(
            passed, opponent
        ) and not self.is_square_attacked(move.to_sq, opponent)
