from .board import Board, GameState, IllegalMoveError
from .random_play import make_rng, random_game, random_games

__all__ = ['Board', 'GameState', 'IllegalMoveError', 'make_rng', 'random_game', 'random_games']
