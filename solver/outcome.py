"""
Solver result vocabulary.

An outcome counts plies from the position it describes, assuming optimal
play by both sides:

    Win(player, turns)  `player` forces a win in exactly `turns` plies
    Tie(turns)          both sides force a draw in exactly `turns` plies
    Unknown(depth)      nothing proven within `depth` plies of search

turns == 0 means the position is already over. A player forcing a win from
their own move always has an odd count; a loser delaying defeat has an even
one.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

Move = Tuple[int, int]


def _check_count(name, value):
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Win:
    player: int
    turns: int

    def __post_init__(self):
        if self.player not in (1, 2):
            raise ValueError(f"player must be 1 or 2, got {self.player}")
        _check_count("turns", self.turns)

    @property
    def is_resolved(self) -> bool:
        return True

    def later(self) -> "Win":
        return Win(self.player, self.turns + 1)


@dataclass(frozen=True)
class Tie:
    turns: int

    def __post_init__(self):
        _check_count("turns", self.turns)

    @property
    def is_resolved(self) -> bool:
        return True

    def later(self) -> "Tie":
        return Tie(self.turns + 1)


@dataclass(frozen=True)
class Unknown:
    depth: int

    def __post_init__(self):
        _check_count("depth", self.depth)

    @property
    def is_resolved(self) -> bool:
        return False

    def later(self) -> "Unknown":
        return Unknown(self.depth + 1)


Outcome = Union[Win, Tie, Unknown]


@dataclass(frozen=True)
class Solution:
    """Recommended next move (None when there is nothing to recommend) and the resulting outcome."""
    move: Optional[Move]
    outcome: Outcome
