"""
Exact outcome solver for Ultimate Tic-Tac-Toe with a tiered result cache.
"""
from .outcome import Move, Outcome, Solution, Tie, Unknown, Win
from .comparator import best, compare, rank
from .exact import ExactSolver, SolverInvariantError, solve
from .transposition_table import CacheDevice, CompressedDevice, MemoryDevice, Stack, make_stack

__all__ = [
    'Move', 'Outcome', 'Solution', 'Tie', 'Unknown', 'Win',
    'best', 'compare', 'rank',
    'ExactSolver', 'SolverInvariantError', 'solve',
    'CacheDevice', 'CompressedDevice', 'MemoryDevice', 'Stack', 'make_stack',
]
