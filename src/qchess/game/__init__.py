"""Game session layer.

Quick start::

    from qchess.game import Game

    game = Game()
    game.push_uci("e2e4")
    game.undo_move()
"""

from qchess.game.state import Game

__all__ = ["Game"]
