"""
Tests for the FAQ matcher.

Covers:
- the bundled FAQ set on typical visitor questions
- exact (word boundary) vs partial (substring) priority
- fallback phrases, thresholds, tie-breaking
- keywords with regex metacharacters
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
from engine import IntentEngine
from knowledge.base import FaqEntry
from knowledge.data import KNS_KNOWLEDGE
from matcher import FaqMatcher


def faq(keywords, question, answer="answer"):
    return FaqEntry(keywords=keywords, question=question, answer=answer)


class TestBundledFaqs:
    """resolve_faq against the KNS FAQ set"""

    def setup_method(self):
        self.engine = IntentEngine()

    def test_greeting(self):
        assert self.engine.resolve_faq("hi there").question == "Greeting"

    def test_fees(self):
        assert self.engine.resolve_faq("what are your fees").question == "What are the fees?"

    def test_apply(self):
        assert self.engine.resolve_faq("How do I apply?").question == "How do I apply for admission?"

    def test_location(self):
        assert self.engine.resolve_faq("Where are you located?").question == "Where is KNS College located?"

    def test_isc2_keyword_with_special_characters(self):
        entry = self.engine.resolve_faq("Tell me about (ISC)² exams")
        assert entry.question == "What (ISC)² certifications do you offer?"

    @pytest.mark.parametrize("message", [
        "hi there",
        "what are your fees",
        "How do I apply?",
        "Do you offer online learning?",
        "thanks a lot",
    ])
    def test_case_insensitive(self, message):
        assert self.engine.resolve_faq(message) == self.engine.resolve_faq(message.upper())

    @pytest.mark.parametrize("message", ["", "   ", "\t\n", None])
    def test_empty_input(self, message):
        assert self.engine.resolve_faq(message) is None

    def test_gibberish(self):
        assert self.engine.resolve_faq("qwertyuiop zxcvbnm") is None

    def test_score_all_covers_every_entry(self):
        candidates = self.engine.matcher.score_all("what are your fees")
        assert len(candidates) == len(KNS_KNOWLEDGE.faqs)
        assert all(c.score >= 0 for c in candidates)
        assert [c.index for c in candidates] == list(range(len(candidates)))

    def test_matching_does_not_mutate_knowledge(self):
        before = KNS_KNOWLEDGE.faqs
        self.engine.resolve_faq("what are your fees")
        assert KNS_KNOWLEDGE.faqs is before
        assert KNS_KNOWLEDGE.faqs == before


class TestScoring:

    def test_exact_beats_partial_regardless_of_score(self):
        exact = faq(["zeta"], "A")
        partial = faq(["alph", "alpha", "alphab", "alphabe", "alphabet", "betical"], "B")
        matcher = FaqMatcher([partial, exact])

        candidates = {c.entry.question: c for c in matcher.score_all("alphabetical zeta")}
        assert candidates["A"].score == 10
        assert candidates["A"].is_exact_match
        assert candidates["B"].score >= 40
        assert not candidates["B"].is_exact_match

        assert matcher.match("alphabetical zeta") is exact

    def test_weights(self):
        entry = faq(["online learning", "online"], "Learning modes")
        candidate = FaqMatcher([entry]).score_all("online learning")[0]
        # 10 + 10 for both keywords, 2 + 2 for the two parts of "online learning",
        # 2 * 2 multi-keyword bonus, 3 for "learning" in the question
        assert candidate.score == 10 + 10 + 2 + 2 + 4 + 3

    def test_partial_threshold(self):
        entry = faq(["alpha"], "Alpha")
        assert FaqMatcher([entry], fallback_phrases={}).match("alphabet") is entry
        strict = FaqMatcher([entry], config={"min_partial_score": 100}, fallback_phrases={})
        assert strict.match("alphabet") is None

    def test_zero_score_never_matches(self):
        entry = faq(["alpha"], "Alpha")
        assert FaqMatcher([entry], fallback_phrases={}).match("nothing here") is None

    def test_equal_exact_scores_keep_order(self):
        first = faq(["python"], "One")
        second = faq(["python"], "Two")
        assert FaqMatcher([first, second]).match("python") is first

    def test_higher_exact_score_wins(self):
        weak = faq(["python"], "One")
        strong = faq(["python", "course"], "Two")
        assert FaqMatcher([weak, strong]).match("python course") is strong

    def test_stop_words_do_not_block_matching(self):
        entry = faq(["fees"], "Money")
        assert FaqMatcher([entry]).match("what are the fees") is entry


class TestFallbackPhrases:

    def test_phrase_maps_to_question_label(self):
        greeting = faq(["unrelated"], "Greeting", "Hello!")
        matcher = FaqMatcher([greeting])
        assert matcher.match("hello there") is greeting

    def test_label_missing_from_set(self):
        matcher = FaqMatcher([faq(["unrelated"], "Something else")])
        assert matcher.match("hello there") is None

    def test_custom_phrases(self):
        entry = faq(["unrelated"], "Farewell")
        matcher = FaqMatcher([entry], fallback_phrases={"ciao": "Farewell"})
        assert matcher.match("ciao!") is entry


class TestSpecialCharacters:

    @pytest.mark.parametrize("keyword", ["(isc)²", "c++", "[beta]", "a|b", "node.js", "what?"])
    def test_keyword_matches_literally(self, keyword):
        entry = faq([keyword], "Special")
        candidates = FaqMatcher([entry]).score_all(f"tell me about {keyword} please")
        assert candidates[0].is_exact_match
        assert candidates[0].score >= 10

    def test_metacharacters_are_not_interpreted(self):
        entry = faq(["node.js"], "N")
        candidate = FaqMatcher([entry]).score_all("nodexjs")[0]
        assert candidate.score == 0
