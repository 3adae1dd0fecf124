"""
Outcome ranking from one player's point of view.

Best to worst for player P:
    1. win for P, fewer turns first
    2. tie, fewer turns first
    3. unknown (every depth ranks the same)
    4. win for the opponent, more turns first

An unresolved outcome ranks above a proven loss.
"""
from typing import Iterable, Optional, Tuple

from .outcome import Move, Outcome, Tie, Unknown, Win

_WIN = 3
_TIE = 2
_UNKNOWN = 1
_LOSS = 0


def rank(player: int, outcome: Outcome) -> Tuple[int, int]:
    """Sort key; a larger key is better for `player`."""
    if isinstance(outcome, Win):
        if outcome.player == player:
            return (_WIN, -outcome.turns)
        return (_LOSS, outcome.turns)
    if isinstance(outcome, Tie):
        return (_TIE, -outcome.turns)
    if isinstance(outcome, Unknown):
        return (_UNKNOWN, 0)
    raise TypeError(f"Not an outcome: {outcome!r}")


def compare(player: int, a: Outcome, b: Outcome) -> int:
    """1 if `a` is strictly better for `player` than `b`, -1 if strictly worse, 0 if they rank equal."""
    ra, rb = rank(player, a), rank(player, b)
    return (ra > rb) - (ra < rb)


def best(player: int, candidates: Iterable[Tuple[Move, Outcome]]) -> Optional[Tuple[Move, Outcome]]:
    """
    Best (move, outcome) pair for `player`.

    Only a strictly better candidate replaces the current choice, so among
    equally ranked candidates the first one seen is kept. Returns None for
    no candidates.
    """
    chosen = None
    for move, outcome in candidates:
        if chosen is None or compare(player, outcome, chosen[1]) > 0:
            chosen = (move, outcome)
    return chosen
