"""
Tests for text normalization and keyword patterns.
"""

import os
import re
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
from normalizer import (
    TextNormalizer,
    contains_whole_word,
    escape_pattern,
    normalize,
    whole_word_pattern,
)


class TestNormalize:
    """lower / cleaned views"""

    def test_lower_is_lowercased_and_trimmed(self):
        assert normalize("  What IS the Fee?  ").lower == "what is the fee?"

    def test_cleaned_drops_stop_words(self):
        assert normalize("What are your fees").cleaned == "fees"
        assert normalize("Where is the campus?").cleaned == "campus?"

    def test_stop_words_removed_only_as_whole_words(self):
        """'is' goes, 'this' stays"""
        assert normalize("this is it").cleaned == "this it"

    def test_whitespace_collapsed(self):
        assert normalize("tell   me about\tthe   fees").cleaned == "fees"

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t", None])
    def test_empty_input(self, raw):
        query = normalize(raw)
        assert query.lower == ""
        assert query.cleaned == ""
        assert query.is_empty

    @pytest.mark.parametrize("raw", [
        "Hello There",
        "  DO YOU OFFER A CYBERSECURITY COURSE?  ",
        "What's the (ISC)² exam?",
        "Tuition\tfees\n",
        "ÜBER Straße",
    ])
    def test_lower_is_idempotent(self, raw):
        once = normalize(raw).lower
        assert normalize(once).lower == once

    def test_custom_stop_words(self):
        normalizer = TextNormalizer(stop_words=["please"])
        query = normalizer.normalize("Fees please")
        assert query.cleaned == "fees"

    def test_no_stop_words(self):
        normalizer = TextNormalizer(stop_words=[])
        assert normalizer.normalize("What is it").cleaned == "what is it"

    def test_contains_checks_both_views(self):
        query = normalize("The fees")
        assert query.contains("the fees")
        assert query.contains("fees")
        assert not query.contains("cost")


class TestPatterns:
    """Escaping and whole-word tests"""

    @pytest.mark.parametrize("text", [
        "(isc)²", "c++", "[x]", "1.5*", "$^|?{}\\", "a+b (c)", "node.js",
    ])
    def test_escape_matches_literally(self, text):
        assert re.compile(escape_pattern(text)).fullmatch(text)

    def test_escaped_dot_is_not_a_wildcard(self):
        assert not re.search(escape_pattern("node.js"), "nodexjs")

    def test_whole_word(self):
        assert contains_whole_word("cc", "the cc exam")
        assert not contains_whole_word("cc", "accredited")
        assert contains_whole_word("fees", "fees?")

    def test_whole_word_is_case_insensitive(self):
        assert contains_whole_word("azure", "Learn AZURE today")

    def test_keyword_with_punctuation_edges(self):
        """Keywords that start or end with punctuation still match on their own"""
        assert contains_whole_word("(isc)²", "tell me about (isc)² exams")
        assert contains_whole_word("c++", "learn c++ today")
        assert not contains_whole_word("(isc)²", "tell me about x(isc)²y")

    def test_pattern_build_does_not_raise(self):
        for keyword in ["(", ")", "[", "*", "+", "?", "\\", "(isc)²", "a|b"]:
            whole_word_pattern(keyword)
