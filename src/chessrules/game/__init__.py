"""Game management layer: session, clock and phase machine.

Quick start::

    from chessrules.game import GameSession
    from chessrules.core import parse_square

    session = GameSession()
    session.new_game()
    session.play(parse_square("e2"), parse_square("e4"))
"""

from chessrules.game.clock import Clock
from chessrules.game.interfaces import GamePhase, IClock, TimeControl
from chessrules.game.session import GameSession

__all__ = [
    # Interfaces
    "GamePhase",
    "IClock",
    "TimeControl",
    # Concrete
    "Clock",
    "GameSession",
]
