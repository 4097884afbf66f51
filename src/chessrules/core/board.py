"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import EmptySquareError
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square, square_name

if TYPE_CHECKING:
    from chessrules.core.move import Move

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(sq: Square) -> int:
    return sq.row * 8 + sq.file


class Board:
    """Immutable 64-square board.

    Every "mutation" returns a fresh :class:`Board`; two boards never share
    mutable cells, so a board may be handed to any number of states.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Piece | None] | None = None) -> None:
        squares = tuple(cells) if cells is not None else (None,) * 64
        if len(squares) != 64:
            raise ValueError(f"Board needs 64 cells, got {len(squares)}")
        self._cells: tuple[Piece | None, ...] = squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[_index(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self._cells[_index(sq)] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order."""
        for sq, piece in zip(ALL_SQUARES, self._cells):
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All of *color*'s pieces, scanned row by row, then file by file."""
        return [(sq, piece) for sq, piece in self if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when the board has none."""
        for sq, piece in self:
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """The grid as eight rows, row 0 (rank 8) first."""
        cells = self._cells
        return tuple(cells[r * 8 : r * 8 + 8] for r in range(8))

    # -- Derived boards -----------------------------------------------------

    def with_pieces(self, changes: Mapping[Square, Piece | None]) -> Board:
        """Copy of this board with *changes* applied."""
        cells = list(self._cells)
        for sq, piece in changes.items():
            cells[_index(sq)] = piece
        return Board(cells)

    def with_move(self, move: Move) -> tuple[Board, Piece | None]:
        """Play *move* on a copy of the board.

        Returns the new board and the captured piece (``None`` for quiet
        moves). Only piece placement is handled here; rights, clocks and
        hashing belong to :class:`~chessrules.core.state.GameState`.
        """
        piece = self[move.from_sq]
        if piece is None:
            raise EmptySquareError(f"No piece on {square_name(move.from_sq)}")

        cells = list(self._cells)
        captured = cells[_index(move.to_sq)]

        # En passant: the captured pawn stays on the mover's starting row
        if move.is_en_passant:
            victim_idx = _index(Square(move.from_sq.row, move.to_sq.file))
            captured = cells[victim_idx]
            cells[victim_idx] = None

        # Slide the rook for castling
        if move.is_castling and piece.piece_type == PieceType.KING:
            row = move.from_sq.row
            if move.to_sq.file == 6:
                rook_from, rook_to = Square(row, 7), Square(row, move.to_sq.file - 1)
            else:
                rook_from, rook_to = Square(row, 0), Square(row, move.to_sq.file + 1)
            cells[_index(rook_to)] = cells[_index(rook_from)]
            cells[_index(rook_from)] = None

        placed = piece
        if move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        cells[_index(move.to_sq)] = placed
        cells[_index(move.from_sq)] = None
        return Board(cells), captured

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        placement: dict[Square, Piece | None] = {}
        for f, pt in enumerate(_BACK_RANK):
            placement[Square(0, f)] = Piece(Color.BLACK, pt)
            placement[Square(1, f)] = Piece(Color.BLACK, PieceType.PAWN)
            placement[Square(6, f)] = Piece(Color.WHITE, PieceType.PAWN)
            placement[Square(7, f)] = Piece(Color.WHITE, pt)
        return cls().with_pieces(placement)

    @classmethod
    def from_mapping(cls, placement: Mapping[Square, Piece]) -> Board:
        """Board holding exactly the pieces in *placement*."""
        return cls().with_pieces(placement)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self.rows()):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - row_idx} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
