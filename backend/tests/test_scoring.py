"""
Tests for score extraction and the passing threshold
"""
from certification_api.utils.scoring import extract_score, is_passing, PASSING_SCORE


class TestExtractScore:

    def test_score_with_feedback(self):
        assert extract_score("Score: 7/10\nFeedback: good") == 7

    def test_no_score(self):
        assert extract_score("no score here") == 0

    def test_no_whitespace_after_colon(self):
        assert extract_score("Score:10/10") == 10

    def test_score_inside_longer_text(self):
        text = "Here is my evaluation.\n\nScore: 3/10\n\nFeedback: needs work"
        assert extract_score(text) == 3

    def test_first_match_wins(self):
        assert extract_score("Score: 2/10 ... later Score: 9/10") == 2

    def test_other_denominator_is_ignored(self):
        assert extract_score("Score: 4/5") == 0

    def test_lowercase_label_is_ignored(self):
        assert extract_score("score: 6/10") == 0

    def test_out_of_range_value_is_not_clamped(self):
        assert extract_score("Score: 15/10") == 15

    def test_empty_text(self):
        assert extract_score("") == 0
        assert extract_score(None) == 0


class TestIsPassing:

    def test_threshold(self):
        assert PASSING_SCORE == 5

    def test_boundary(self):
        assert is_passing(5) is True
        assert is_passing(4) is False

    def test_extremes(self):
        assert is_passing(0) is False
        assert is_passing(10) is True
