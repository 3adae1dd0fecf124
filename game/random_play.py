"""
Random game generation.
Plays uniformly random legal moves from the empty board until the game ends.
"""
import random
from typing import Iterator, List, Optional

from .board import Board


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Seeded RNG. Without a seed one is drawn, and kept on `rng.seed_value` so a run can be replayed."""
    if seed is None:
        seed = random.SystemRandom().getrandbits(32)
    rng = random.Random(seed)
    rng.seed_value = seed
    return rng


def random_game(rng: random.Random) -> List[Board]:
    """Play one random game and return every position, empty board first, terminal position last."""
    board = Board()
    games = [board]
    while not board.is_game_over():
        moves = board.get_legal_moves()
        board = board.play(rng.choice(moves))
        games.append(board)
    return games


def random_games(rng: random.Random, trials: int) -> Iterator[List[Board]]:
    for _ in range(trials):
        yield random_game(rng)
