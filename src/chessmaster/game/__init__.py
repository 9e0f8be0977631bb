"""Game management layer — move application over a position.

Quick start::

    from chessmaster.core import Move
    from chessmaster.game import Game

    game = Game()
    game.apply_move(Move.parse("e2e4"))
    print(game.fen())
"""

from chessmaster.game.state import Game

__all__ = ["Game"]
