"""Plain-text rendering of boards and solver results, plus the matching board parser."""
from typing import Optional

from game import Board
from solver import Outcome, Solution, Tie, Unknown, Win

SYMBOLS = {0: '.', 1: 'X', 2: 'O'}
PLAYERS = {1: 'X', 2: 'O'}
_CELLS = {'.': 0, 'X': 1, 'O': 2}
_IGNORED = set(' \t\r\n|-+')


def show_board(board: Board) -> str:
    lines = []
    for r in range(9):
        if r in (3, 6):
            lines.append('------+-------+------')
        row = [SYMBOLS[board.boards[r][c]] for c in range(9)]
        lines.append(' | '.join(' '.join(row[i:i + 3]) for i in (0, 3, 6)))
    return '\n'.join(lines)


def show_move(move) -> str:
    if move is None:
        return '-'
    r, c = move
    return f'({r},{c})'


def show_outcome(outcome: Outcome) -> str:
    if isinstance(outcome, Win):
        return f'Win {PLAYERS[outcome.player]} in {outcome.turns}'
    if isinstance(outcome, Tie):
        return f'Tie in {outcome.turns}'
    if isinstance(outcome, Unknown):
        return f'Unknown at depth {outcome.depth}'
    raise TypeError(f'Not an outcome: {outcome!r}')


def show_solution(solution: Solution) -> str:
    return f'{show_outcome(solution.outcome)} (play {show_move(solution.move)})'


def result_str(winner) -> str:
    if winner == 1:
        return 'X wins'
    if winner == 2:
        return 'O wins'
    return '  tie '


def parse_board(text: str, last_move=None, current_player: Optional[int] = None) -> Board:
    """
    Build a position from 81 cells in row-major order.

    Cells are 'X', 'O' or '.'; spaces, newlines and the '|', '-', '+'
    separators produced by show_board() are skipped. Sub-board status and
    the winner are derived from the cells. Without `current_player`, X moves
    when both sides have the same number of pieces.
    """
    cells = [ch for ch in text if ch not in _IGNORED]
    if len(cells) != 81:
        raise ValueError(f'Expected 81 cells, got {len(cells)}')

    board = Board()
    for i, ch in enumerate(cells):
        if ch not in _CELLS:
            raise ValueError(f'Unknown cell symbol {ch!r} at index {i}')
        board.boards[i // 9][i % 9] = _CELLS[ch]

    if last_move is not None:
        r, c = last_move
        if not (0 <= r < 9 and 0 <= c < 9) or board.boards[r][c] == 0:
            raise ValueError(f'Last move {last_move} is not an occupied cell')
        board.last_move = (r, c)

    if current_player is None:
        x_count = cells.count('X')
        o_count = cells.count('O')
        current_player = 1 if x_count <= o_count else 2
    elif current_player not in (1, 2):
        raise ValueError(f'current_player must be 1 or 2, got {current_player}')
    board.current_player = current_player

    board.recompute()
    return board
