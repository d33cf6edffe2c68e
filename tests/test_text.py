"""
Tests for tokenizing and fuzzy matching.
"""
import pytest

from shop.domain.errors import EmptyQueryError
from shop.utils.text import clean_text, contains_keyword, fuzzy_score, normalize


class TestNormalize:

    def test_splits_and_lowercases(self):
        assert normalize("Gaming  Laptop\tASUS\nPro\r\n") == ["gaming", "laptop", "asus", "pro"]

    def test_empty_input(self):
        assert normalize("") == []
        assert normalize("   \t\n ") == []

    def test_idempotent(self):
        text = "  High-Performance   GAMING\tcomputer "
        once = normalize(text)
        assert normalize(" ".join(once)) == once

    def test_deterministic(self):
        assert normalize("A b C") == normalize("A b C")


class TestHelpers:

    def test_clean_text(self):
        assert clean_text("  MiXeD ") == "mixed"

    def test_contains_keyword(self):
        assert contains_keyword(["LAPTOP"], "Gaming laptop")
        assert not contains_keyword(["mouse"], "Gaming laptop")


class TestFuzzyScore:

    def test_exact_match(self):
        assert fuzzy_score("laptop", "laptop") == 1.0

    def test_partial_query_match(self):
        assert fuzzy_score("gaming computer", "Gaming Laptop ASUS") == 0.5

    def test_substring_containment(self):
        # "lap" jest podciagiem "laptop"
        assert fuzzy_score("lap", "Laptop") == 1.0

    def test_containment_is_one_directional(self):
        assert fuzzy_score("laptop", "lap") == 0.0

    def test_counts_every_containing_target_token(self):
        assert fuzzy_score("game", "game gamer games") == 3.0

    def test_no_match(self):
        assert fuzzy_score("keyboard", "Office Chair") == 0.0

    def test_empty_target(self):
        assert fuzzy_score("laptop", "") == 0.0

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_empty_query_raises(self, query):
        with pytest.raises(EmptyQueryError):
            fuzzy_score(query, "anything")
