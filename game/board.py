from enum import Enum


class IllegalMoveError(ValueError):
    """Raised when a move cannot be applied to a position."""


class GameState(Enum):
    ONGOING = 0
    WON = 1
    TIED = 2


class Board:
    CHECKER = (
        ((0,0), (0,1), (0,2)),
        ((1,0), (1,1), (1,2)),
        ((2,0), (2,1), (2,2)),
        ((0,0), (1,0), (2,0)),
        ((0,1), (1,1), (2,1)),
        ((0,2), (1,2), (2,2)),
        ((0,0), (1,1), (2,2)),
        ((0,2), (1,1), (2,0))
    )

    # Bitmask win patterns for the meta board (position = r*3+c)
    WIN_MASKS = (
        0b111000000,  # row 0
        0b000111000,  # row 1
        0b000000111,  # row 2
        0b100100100,  # col 0
        0b010010010,  # col 1
        0b001001001,  # col 2
        0b100010001,  # diag
        0b001010100,  # anti-diag
    )

    def __init__(self):
        self.boards = [[0 for _ in range(9)] for _ in range(9)] # empty: 0, player 1: 1, player 2: 2
        self.completed_boards = [[0 for _ in range(3)] for _ in range(3)] # open: 0, player 1: 1, player 2: 2, draw: 3
        self.current_player = 1
        self.winner = None # None: ongoing, 1/2: won, 3: tied
        self.last_move = None

    def clone(self):
        """Copy only the mutable state."""
        new_board = Board.__new__(Board)
        new_board.boards = [row[:] for row in self.boards]
        new_board.completed_boards = [row[:] for row in self.completed_boards]
        new_board.current_player = self.current_player
        new_board.winner = self.winner
        new_board.last_move = self.last_move
        return new_board

    def key(self):
        """
        Structural identity of the position.

        Every cell is included, so two positions share a key only when they
        are the same position. Sub-board and game status are derived from the
        cells and are left out.
        """
        cells = tuple(cell for row in self.boards for cell in row)
        return (cells, self.last_move, self.current_player)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return f"Board(last_move={self.last_move}, current_player={self.current_player}, winner={self.winner})"

    def get_cell(self, r, c):
        return self.boards[r][c]

    def set_cell(self, r, c, value):
        """Raw cell edit for setting up positions. Re-derives sub-board and game status."""
        self.boards[r][c] = value
        self.recompute()

    def recompute(self):
        """Rebuild completed_boards and winner from the cells."""
        for board_r in range(3):
            for board_c in range(3):
                self.completed_boards[board_r][board_c] = self._sub_board_status(board_r, board_c)

        self.winner = None
        for player in (1, 2):
            if self._meta_line(player):
                self.winner = player
                return
        if all(self.completed_boards[r][c] != 0 for r in range(3) for c in range(3)):
            self.winner = 3

    def get_legal_moves(self):
        legal_moves = []
        if self.winner is not None:
            return legal_moves

        if self.last_move is None:
            for r in range(9):
                for c in range(9):
                    board_r, board_c = r // 3, c // 3
                    if self.boards[r][c] == 0 and self.completed_boards[board_r][board_c] == 0:
                        legal_moves.append((r, c))
        else:
            last_r, last_c = self.last_move
            target_board_r = last_r % 3
            target_board_c = last_c % 3

            if self.completed_boards[target_board_r][target_board_c] == 0:
                start_r, start_c = target_board_r * 3, target_board_c * 3
                for r in range(start_r, start_r + 3):
                    for c in range(start_c, start_c + 3):
                        if self.boards[r][c] == 0:
                            legal_moves.append((r, c))
            else:
                for r in range(9):
                    for c in range(9):
                        board_r, board_c = r // 3, c // 3
                        if self.boards[r][c] == 0 and self.completed_boards[board_r][board_c] == 0:
                            legal_moves.append((r, c))
        return legal_moves

    def _is_valid_move(self, r, c) -> bool:
        """Fast validation without computing all legal moves."""
        if self.winner is not None:
            return False

        if not (0 <= r < 9 and 0 <= c < 9):
            return False

        if self.boards[r][c] != 0: # already placed
            return False

        board_r, board_c = r // 3, c // 3
        if self.completed_boards[board_r][board_c] != 0: # completed
            return False

        if self.last_move is None:
            return True

        last_r, last_c = self.last_move
        target_board_r = last_r % 3
        target_board_c = last_c % 3

        if self.completed_boards[target_board_r][target_board_c] != 0:
            return True

        return board_r == target_board_r and board_c == target_board_c

    def make_move(self, r, c, validate=True):
        if validate and not self._is_valid_move(r, c):
            raise IllegalMoveError(f"Illegal move ({r}, {c})")

        self.boards[r][c] = self.current_player
        self.last_move = (r, c)

        self.update_completed_boards(r, c)
        self.check_winner()

        self.current_player = self.current_player % 2 + 1

    def play(self, move):
        """Return the position after `move`, leaving this one untouched."""
        r, c = move
        child = self.clone()
        child.make_move(r, c)
        return child

    def update_completed_boards(self, r, c):
        board_r, board_c = r // 3, c // 3
        start_r, start_c = board_r * 3, board_c * 3

        for pattern in Board.CHECKER:
            if all(self.boards[start_r + pr][start_c + pc] == self.current_player for pr, pc in pattern):
                self.completed_boards[board_r][board_c] = self.current_player
                return

        if all(self.boards[start_r + pr][start_c + pc] != 0 for pr in range(3) for pc in range(3)):
            self.completed_boards[board_r][board_c] = 3

    def check_winner(self):
        if self._meta_line(self.current_player):
            self.winner = self.current_player
            return

        if all(self.completed_boards[r][c] != 0 for r in range(3) for c in range(3)):
            self.winner = 3

    def _meta_line(self, player) -> bool:
        p_mask = 0
        for r in range(3):
            for c in range(3):
                if self.completed_boards[r][c] == player:
                    p_mask |= 1 << (8 - (r * 3 + c))
        return any((p_mask & mask) == mask for mask in Board.WIN_MASKS)

    def _sub_board_status(self, board_r, board_c) -> int:
        start_r, start_c = board_r * 3, board_c * 3
        for player in (1, 2):
            for pattern in Board.CHECKER:
                if all(self.boards[start_r + pr][start_c + pc] == player for pr, pc in pattern):
                    return player
        if all(self.boards[start_r + pr][start_c + pc] != 0 for pr in range(3) for pc in range(3)):
            return 3
        return 0

    def is_game_over(self):
        return self.winner is not None

    def state(self) -> GameState:
        if self.winner is None:
            return GameState.ONGOING
        if self.winner == 3:
            return GameState.TIED
        return GameState.WON

    def next_player(self):
        """Player to move, or None once the game is over."""
        if self.winner is not None:
            return None
        return self.current_player
