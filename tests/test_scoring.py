"""Tests for end-of-game scoring."""

import pytest

from cho_dai_di.game.scoring import final_scores, hand_size_to_score, winner_index


class TestHandSizeToScore:
    """Tests for per-hand penalties."""

    @pytest.mark.parametrize(
        "size,expected",
        [(0, 0), (1, -1), (10, -10), (11, -22), (12, -24), (13, -39)],
    )
    def test_penalty(self, size, expected):
        assert hand_size_to_score(size) == expected

    @pytest.mark.parametrize("size", [-1, 14])
    def test_out_of_range(self, size):
        with pytest.raises(ValueError):
            hand_size_to_score(size)


class TestFinalScores:
    """Tests for final score table."""

    def test_winner_collects_penalties(self):
        assert final_scores([0, 7, 13, 2]) == [48, -7, -39, -2]

    def test_scores_sum_to_zero(self):
        assert sum(final_scores([5, 0, 11, 12])) == 0

    def test_winner_index(self):
        assert winner_index([3, 5, 0, 1]) == 2
        assert winner_index([3, 5, 2, 1]) is None
