"""Outcome and Solution value types."""

import dataclasses

import pytest
from solver import Solution, Tie, Unknown, Win


class TestConstruction:

    def test_fields(self):
        assert Win(1, 3).player == 1
        assert Win(1, 3).turns == 3
        assert Tie(0).turns == 0
        assert Unknown(5).depth == 5

    @pytest.mark.parametrize("make", [
        lambda: Win(1, -1),
        lambda: Tie(-1),
        lambda: Unknown(-2),
    ])
    def test_negative_counts_rejected(self, make):
        with pytest.raises(ValueError):
            make()

    @pytest.mark.parametrize("player", [0, 3, None])
    def test_win_needs_a_player(self, player):
        with pytest.raises(ValueError):
            Win(player, 1)

    def test_frozen(self):
        outcome = Win(2, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.turns = 1
        solution = Solution((0, 0), outcome)
        with pytest.raises(dataclasses.FrozenInstanceError):
            solution.move = None


class TestEquality:

    def test_structural(self):
        assert Win(1, 2) == Win(1, 2)
        assert Win(1, 2) != Win(2, 2)
        assert Tie(2) != Unknown(2)
        assert Solution(None, Tie(0)) == Solution(None, Tie(0))
        assert Solution((1, 1), Tie(1)) != Solution((1, 2), Tie(1))

    def test_hashable(self):
        assert len({Win(1, 1), Win(1, 1), Tie(1), Unknown(1)}) == 3


class TestLater:

    def test_win_and_tie_add_a_turn(self):
        assert Win(2, 0).later() == Win(2, 1)
        assert Tie(3).later() == Tie(4)

    def test_unknown_adds_depth(self):
        assert Unknown(0).later() == Unknown(1)

    def test_resolved(self):
        assert Win(1, 0).is_resolved
        assert Tie(0).is_resolved
        assert not Unknown(0).is_resolved


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
