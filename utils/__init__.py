from .show import show_board, show_move, show_outcome, show_solution, result_str, parse_board
from .run_logger import log_header, log_solution, log_summary

__all__ = [
    'show_board', 'show_move', 'show_outcome', 'show_solution', 'result_str', 'parse_board',
    'log_header', 'log_solution', 'log_summary',
]
