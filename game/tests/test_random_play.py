"""Tests for random game generation."""

import pytest
from game import Board, make_rng, random_game, random_games


class TestRandomGame:

    def test_starts_empty_and_ends_terminal(self):
        games = random_game(make_rng(7))
        assert games[0] == Board()
        assert games[-1].is_game_over()
        assert all(not board.is_game_over() for board in games[:-1])

    def test_consecutive_positions_differ_by_one_legal_move(self):
        games = random_game(make_rng(11))
        for before, after in zip(games, games[1:]):
            assert after.last_move in before.get_legal_moves()
            assert before.play(after.last_move) == after

    def test_length_bounded_by_cells(self):
        games = random_game(make_rng(3))
        assert 1 < len(games) <= 82

    def test_same_seed_same_game(self):
        assert random_game(make_rng(42)) == random_game(make_rng(42))

    def test_seed_is_recorded(self):
        assert make_rng(99).seed_value == 99
        assert isinstance(make_rng().seed_value, int)


class TestRandomGames:

    def test_count(self):
        assert len(list(random_games(make_rng(5), 3))) == 3

    def test_zero_trials(self):
        assert list(random_games(make_rng(5), 0)) == []


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
