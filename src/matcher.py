"""
FAQ matcher: weighted keyword scoring over the FAQ set.

Scoring per entry:
- keyword found in the message (raw or cleaned view):
    +10 on a word boundary ("exact"), +5 inside another word
- long parts of multi-word keywords found: +2 each
- more than one keyword matched: +2 per matched keyword
- long words of the question label found: +3 each

Selection:
1. Any exact entry -> highest score among exact entries
2. Otherwise the best overall entry if it reaches the minimum score
3. Otherwise the fallback phrases (greetings, thanks, bye, ok...)
4. Otherwise None
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from config import FALLBACK_PHRASES, MATCHER_CONFIG
from knowledge.base import FaqEntry
from normalizer import NormalizedQuery, TextNormalizer, contains_whole_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchCandidate:
    """One scored FAQ entry of a single matching pass"""
    entry: FaqEntry
    score: int
    is_exact_match: bool
    index: int              # position in the FAQ set


class FaqMatcher:
    """Picks the best FAQ entry for a message"""

    def __init__(
        self,
        faqs: Sequence[FaqEntry],
        config: Optional[Dict] = None,
        fallback_phrases: Optional[Dict[str, str]] = None,
        normalizer: Optional[TextNormalizer] = None,
    ):
        self.faqs = tuple(faqs)
        self.config = {**MATCHER_CONFIG, **(config or {})}
        self.fallback_phrases = dict(
            fallback_phrases if fallback_phrases is not None else FALLBACK_PHRASES
        )
        self.normalizer = normalizer or TextNormalizer()
        self._by_question = {faq.question: faq for faq in self.faqs}

    def score_entry(self, query: NormalizedQuery, entry: FaqEntry, index: int = 0) -> MatchCandidate:
        cfg = self.config
        min_len = cfg["min_part_length"]
        score = 0
        exact_found = False
        keyword_matches = 0

        for keyword in entry.keywords:
            keyword_lower = keyword.lower()

            if query.contains(keyword_lower):
                keyword_matches += 1
                if contains_whole_word(keyword_lower, query.lower) or \
                        contains_whole_word(keyword_lower, query.cleaned):
                    score += cfg["exact_keyword_score"]
                    exact_found = True
                else:
                    score += cfg["partial_keyword_score"]

            if len(keyword_lower) > min_len:
                parts = keyword_lower.split()
                if len(parts) > 1:
                    for part in parts:
                        if len(part) > min_len and query.contains(part):
                            score += cfg["keyword_part_score"]

        if keyword_matches > 1:
            score += keyword_matches * cfg["multi_keyword_factor"]

        for word in entry.question.lower().split():
            if len(word) > min_len and query.contains(word):
                score += cfg["question_word_score"]

        return MatchCandidate(entry=entry, score=score, is_exact_match=exact_found, index=index)

    def score_all(self, raw: Optional[str]) -> List[MatchCandidate]:
        """Candidates for every entry (score 0 included), in FAQ order"""
        query = self.normalizer.normalize(raw)
        if query.is_empty:
            return []
        return [self.score_entry(query, faq, i) for i, faq in enumerate(self.faqs)]

    def match(self, raw: Optional[str]) -> Optional[FaqEntry]:
        query = self.normalizer.normalize(raw)
        if query.is_empty:
            return None

        exact: List[MatchCandidate] = []
        best: Optional[MatchCandidate] = None

        for i, faq in enumerate(self.faqs):
            candidate = self.score_entry(query, faq, i)
            if candidate.is_exact_match:
                exact.append(candidate)
            if candidate.score > 0 and (best is None or candidate.score > best.score):
                best = candidate

        if exact:
            # sorted() is stable: equal scores keep FAQ order
            winner = sorted(exact, key=lambda c: c.score, reverse=True)[0]
            logger.debug("FAQ '%s': exact match, score %d", winner.entry.question, winner.score)
            return winner.entry

        if best is not None and best.score >= self.config["min_partial_score"]:
            logger.debug("FAQ '%s': partial match, score %d", best.entry.question, best.score)
            return best.entry

        return self.match_fallback_phrase(query)

    def match_fallback_phrase(self, query: NormalizedQuery) -> Optional[FaqEntry]:
        for phrase, question in self.fallback_phrases.items():
            if phrase in query.lower:
                entry = self._by_question.get(question)
                if entry is not None:
                    logger.debug("FAQ '%s': fallback phrase '%s'", question, phrase)
                    return entry
        return None
