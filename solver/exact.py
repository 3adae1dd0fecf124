"""
Exact depth-limited solver.

Plain minimax without pruning: every legal move is searched to the given
depth, and the outcome is only resolved where the search actually reaches
the end of the game.
"""
from game import Board, GameState
from .comparator import best
from .outcome import Solution, Tie, Unknown, Win


class SolverInvariantError(RuntimeError):
    """A position broke a rule the solver relies on. Not recoverable."""


class ExactSolver:
    def __init__(self):
        self.stats = {
            "nodes": 0,     # solve calls
            "terminal": 0,  # finished games reached
            "horizon": 0,   # unfinished positions at depth 0
        }

    def solve(self, board: Board, depth: int, stack=None) -> Solution:
        """
        Solve `board` looking `depth` plies ahead.

        Args:
            board: Position to solve (not modified)
            depth: Search budget in plies, >= 0
            stack: Optional tiered cache. Child positions are looked up
                   through it, so overlapping subtrees are solved once.

        Returns:
            Solution with the best move for the player to move (None at
            depth 0 or when the game is over) and its outcome.
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")

        self.stats["nodes"] += 1
        solution = self._classify(board)
        if solution.outcome.is_resolved:
            return solution
        if depth == 0:
            self.stats["horizon"] += 1
            return solution

        moves = board.get_legal_moves()
        if not moves:
            raise SolverInvariantError(
                f"ongoing position has no legal moves: {board!r}"
            )

        player = board.next_player()
        move, outcome = best(player, (
            (m, self._solve_child(board.play(m), depth - 1, stack).outcome.later())
            for m in moves
        ))
        return Solution(move, outcome)

    def _solve_child(self, child: Board, depth: int, stack) -> Solution:
        if stack is not None:
            return stack.get_or_compute(child, depth)
        return self.solve(child, depth)

    def _classify(self, board: Board) -> Solution:
        """Depth-0 result: what the position already is, without looking ahead."""
        state = board.state()
        if state == GameState.WON:
            self.stats["terminal"] += 1
            return Solution(None, Win(board.winner, 0))
        if state == GameState.TIED:
            self.stats["terminal"] += 1
            return Solution(None, Tie(0))
        return Solution(None, Unknown(0))

    def reset_stats(self):
        for key in self.stats:
            self.stats[key] = 0


def solve(board: Board, depth: int, stack=None) -> Solution:
    """Solve with a fresh solver, or through the stack (root included) when one is given."""
    if stack is not None:
        return stack.get_or_compute(board, depth)
    return ExactSolver().solve(board, depth)
