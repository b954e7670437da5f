"""
Property-based tests for text normalization and fuzzy matching.

These tests verify universal properties that should hold across all valid
executions of the matching operations.
"""

import pytest
from hypothesis import given, settings, strategies as st, assume
from rapidfuzz.distance import Levenshtein

from listing_search.config import FuzzyConfig
from listing_search.matching import edit_distance, fuzzy_score, normalize, tokenize


# Strategy for lowercase ASCII words (already normalized)
plain_text = st.text(alphabet="abcdefgh", min_size=1, max_size=15)

# Strategy for short phrases with spaces
phrases = st.text(alphabet="abcde ", min_size=1, max_size=20)


@given(text=st.text(min_size=1, max_size=50))
@settings(max_examples=100)
def test_exact_match_scores_one(text):
    """
    **Feature: listing-search, Property 1: Exactness**

    For any non-empty string s, fuzzy_score(s, s) is exactly 1.0.
    """
    assert fuzzy_score(text, text) == 1.0


@given(
    query=plain_text,
    prefix=st.text(alphabet="abcdefgh ", max_size=10),
    suffix=st.text(alphabet="abcdefgh ", max_size=10)
)
@settings(max_examples=100)
def test_substring_scores_point_nine(query, prefix, suffix):
    """
    **Feature: listing-search, Property 2: Substring dominance**

    When the text contains the query and differs from it, the score is 0.9.
    """
    assume(prefix or suffix)
    text = prefix + query + suffix

    assert fuzzy_score(query, text) == 0.9


@given(query=phrases, text=phrases)
@settings(max_examples=200)
def test_levenshtein_fallback_respects_threshold(query, text):
    """
    **Feature: listing-search, Property 3: Monotonic threshold**

    Outside the exact/substring/prefix shortcuts the score is the
    Levenshtein ratio when it reaches the threshold and exactly 0 otherwise.
    """
    assume(query != text and query not in text)
    assume(not any(word.startswith(query) for word in text.split()))

    config = FuzzyConfig()
    ratio = 1 - edit_distance(query, text) / max(len(query), len(text))
    score = fuzzy_score(query, text, config)

    if ratio < config.threshold:
        assert score == 0
    else:
        assert score == pytest.approx(ratio)


@given(query=phrases, text=phrases, threshold=st.floats(min_value=0.0, max_value=1.0))
@settings(max_examples=100)
def test_score_is_zero_or_above_threshold(query, text, threshold):
    """A fuzzy score is never a small positive value below the threshold."""
    score = fuzzy_score(query, text, FuzzyConfig(threshold=threshold))

    assert 0.0 <= score <= 1.0
    assert score == 0 or score >= threshold or score in (0.8, 0.9, 1.0)


@given(a=st.text(max_size=15), b=st.text(max_size=15))
@settings(max_examples=100)
def test_edit_distance_is_symmetric_and_bounded(a, b):
    """Distance is symmetric and lies between the length gap and the longer length."""
    distance = edit_distance(a, b)

    assert distance == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= distance <= max(len(a), len(b))


@given(a=st.text(max_size=20))
def test_edit_distance_to_self_is_zero(a):
    assert edit_distance(a, a) == 0


@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("", "abc", 3),
    ("abc", "", 3),
    ("flaw", "lawn", 2),
    ("tomato", "tomatoes", 2),
])
def test_edit_distance_known_values(a, b, expected):
    assert edit_distance(a, b) == expected


def test_word_prefix_is_scored_as_substring():
    # A word prefix is always also a substring, so the substring score wins
    assert fuzzy_score("seed", "maize seeds") == 0.9
    assert fuzzy_score("gr", "green beans") == 0.9
    assert fuzzy_score("Maize", "Maize Seed") == 0.9


def test_case_and_accents_are_ignored_by_default():
    assert fuzzy_score("CAFE", "café") == 1.0
    assert fuzzy_score("jalapeno", "Jalapeño Peppers") == 0.9


def test_case_sensitive_config():
    config = FuzzyConfig(ignore_case=False, ignore_accents=False)

    assert fuzzy_score("cafe", "café", config) < 1.0
    assert fuzzy_score("Tomato", "tomato", config) != 1.0


def test_empty_inputs_score_zero():
    assert fuzzy_score("", "anything") == 0
    assert fuzzy_score("anything", "") == 0


def test_unrelated_text_scores_zero():
    assert fuzzy_score("tomato", "Maize Seed") == 0
    assert fuzzy_score("tomato", "Bulawayo, Matabeleland") == 0


def test_close_misspelling_scores_above_threshold():
    score = fuzzy_score("tomatos", "tomatoes")

    assert score == pytest.approx(1 - 1 / 8)


def test_normalize_strips_accents_and_case():
    assert normalize("Crème Brûlée") == "creme brulee"
    assert normalize("Crème", FuzzyConfig(ignore_accents=False)) == "crème"
    assert normalize("Crème", FuzzyConfig(ignore_case=False)) == "Creme"


def test_tokenize_drops_punctuation_and_short_tokens():
    assert tokenize("Fresh, organic tomatoes - 5 kg!") == ["fresh", "organic", "tomatoes", "kg"]
    assert tokenize("a b c") == []
    assert tokenize("") == []


@given(query=phrases, text=phrases)
@settings(max_examples=100)
def test_fallback_score_is_normalized_levenshtein_similarity(query, text):
    """The fallback ratio equals rapidfuzz's normalized Levenshtein similarity."""
    assume(query != text and query not in text)
    assume(not any(word.startswith(query) for word in text.split()))

    config = FuzzyConfig(threshold=0.0)
    expected = Levenshtein.normalized_similarity(query, text)

    assert fuzzy_score(query, text, config) == pytest.approx(expected)
