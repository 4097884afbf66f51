"""Notation package: SAN rendering, FEN export and state snapshots."""

from chessrules.core.notation.fen import STARTING_FEN, state_to_fen
from chessrules.core.notation.san import move_to_san
from chessrules.core.notation.serialize import state_from_dict, state_to_dict

__all__ = [
    "STARTING_FEN",
    "move_to_san",
    "state_from_dict",
    "state_to_dict",
    "state_to_fen",
]
