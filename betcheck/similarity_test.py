"""Unit tests for edit distance and similarity."""

import pytest

from betcheck.similarity import edit_distance, is_similar_text, similarity


class TestEditDistance:

    def test_classic_example(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_identical(self):
        assert edit_distance("betano", "betano") == 0

    def test_against_empty(self):
        assert edit_distance("", "abc") == 3
        assert edit_distance("abc", "") == 3

    def test_single_substitution(self):
        assert edit_distance("bet.br", "bet.bz") == 1

    def test_symmetric(self):
        assert edit_distance("flaw", "lawn") == edit_distance("lawn", "flaw") == 2


class TestSimilarity:

    def test_both_empty(self):
        assert similarity("", "") == 1.0

    @pytest.mark.parametrize("value", ["a", "examplebet.bet.br", "www"])
    def test_self_similarity(self, value):
        assert similarity(value, value) == 1.0

    def test_symmetric(self):
        assert similarity("bet365", "bets365") == similarity("bets365", "bet365")

    def test_value(self):
        assert similarity("bet365", "bets365") == pytest.approx(1 - 1 / 7)

    def test_completely_different(self):
        assert similarity("abc", "xyz") == 0.0


class TestIsSimilarText:

    def test_containment(self):
        assert is_similar_text("examplebet", "examplebetapp")
        assert is_similar_text("examplebetapp", "examplebet")

    def test_small_typo(self):
        # threshold is min(2, floor(6 * 0.3)) = 1
        assert is_similar_text("betamo", "betano")

    def test_threshold_capped_at_two(self):
        assert is_similar_text("superbetano", "superbetxyz") is False
        assert is_similar_text("superbetano", "superbetaxo")

    def test_short_names_need_exact(self):
        assert is_similar_text("abc", "xbc") is False
