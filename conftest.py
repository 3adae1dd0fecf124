"""Shared positions for the test suites."""
import pytest

from game import make_rng, random_game
from utils import parse_board

# X owns the top row of sub-boards.
WON_BY_X = """
X X X | X X X | X X X
O O . | O O . | . . .
. . . | . . . | . . .
------+-------+------
. . O | . . . | . . .
. . . | . O . | . . .
. . . | . . . | . . .
------+-------+------
O O . | . . . | . . .
. . . | . . . | . O .
. . . | . . . | . . .
"""

# Every sub-board is taken and neither side has three in a row of them.
TIED = """
X X X | O O O | X X X
. . . | . . . | . . .
. . . | . . . | . . .
------+-------+------
X X X | O O O | O O O
. . . | . . . | . . .
. . . | . . . | . . .
------+-------+------
O O O | X X X | X X X
. . . | . . . | . . .
. . . | . . . | . . .
"""

# X must play in the top-right sub-board; (0, 8) wins the game.
WIN_IN_ONE = """
X X X | X X X | X X .
O O . | O O . | . . .
. . . | . . . | . . .
------+-------+------
. . O | . . . | . . .
. . . | . . . | . . .
. . . | . . . | . . .
------+-------+------
O O . | . . . | . . .
. . . | . . . | . O .
. . . | . . . | . . .
"""

# O's only move, (3, 5), fills the centre and sends X to the winning sub-board.
LOSS_IN_TWO = """
X X X | X X X | X X .
O O . | O O . | . . .
. . . | . . . | . . .
------+-------+------
. . . | O X . | . . .
. X . | X X O | . . .
. . . | O O X | . . .
------+-------+------
O O . | . . . | . . .
. . . | . . . | . O .
. . . | . . . | . . O
"""

# X is sent to the centre sub-board, which has one empty cell left.
SINGLE_MOVE = """
X . . | . . . | . . .
. O . | . . . | . . .
. . . | . . . | . . .
------+-------+------
. . . | X O X | . . .
. . . | X O O | . . .
. . . | O X . | . . .
------+-------+------
. . . | . . . | . . .
. . . | . . . | . . .
. . . | . . . | . . .
"""


@pytest.fixture
def won_board():
    return parse_board(WON_BY_X, last_move=(0, 8), current_player=2)


@pytest.fixture
def tied_board():
    return parse_board(TIED, last_move=(6, 8), current_player=2)


@pytest.fixture
def win_in_one_board():
    return parse_board(WIN_IN_ONE, last_move=(3, 2), current_player=1)


@pytest.fixture
def loss_in_two_board():
    return parse_board(LOSS_IN_TWO, last_move=(4, 1))


@pytest.fixture
def single_move_board():
    return parse_board(SINGLE_MOVE, last_move=(1, 1))


@pytest.fixture
def endgame_boards():
    """The last few positions of several seeded random games."""
    boards = []
    rng = make_rng(1234)
    for _ in range(4):
        games = random_game(rng)
        boards.extend(games[-4:])
    return boards
