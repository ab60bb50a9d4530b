"""
Text normalization for matching.

Produces two views of a visitor message:
- lower:   lowercased and trimmed
- cleaned: lower without stop words (question words, pronouns, articles,
           common prepositions), whitespace collapsed

Also holds the helpers that turn a keyword into a whole-word pattern. Keywords
are data, so every regex metacharacter in them has to be escaped.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional

from config import STOP_WORDS


@dataclass(frozen=True)
class NormalizedQuery:
    raw: str
    lower: str
    cleaned: str

    @property
    def is_empty(self) -> bool:
        return not self.lower

    def contains(self, fragment: str) -> bool:
        """Substring hit in either view"""
        return fragment in self.lower or fragment in self.cleaned


def escape_pattern(text: str) -> str:
    """Escape every regex metacharacter so text matches literally"""
    return re.escape(text)


@lru_cache(maxsize=2048)
def whole_word_pattern(keyword: str) -> re.Pattern:
    """
    Pattern matching keyword as a whole word (case-insensitive).

    Lookarounds instead of \\b so keywords that start or end with punctuation,
    like "(isc)²", still match where they stand on their own.
    """
    return re.compile(rf"(?<!\w){escape_pattern(keyword)}(?!\w)", re.IGNORECASE)


def contains_whole_word(keyword: str, text: str) -> bool:
    return whole_word_pattern(keyword).search(text) is not None


def build_word_stripper(words: Iterable[str]) -> re.Pattern:
    """One alternation pattern that removes any of the given whole words"""
    alternation = "|".join(escape_pattern(w) for w in words)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


class TextNormalizer:
    """Lowercase + stop word removal"""

    def __init__(self, stop_words: Optional[Iterable[str]] = None):
        self.stop_words = tuple(stop_words if stop_words is not None else STOP_WORDS)
        self._stop_re = build_word_stripper(self.stop_words) if self.stop_words else None

    def normalize(self, raw: Optional[str]) -> NormalizedQuery:
        raw = raw or ""
        lower = raw.lower().strip()
        if self._stop_re is not None:
            cleaned = collapse_whitespace(self._stop_re.sub("", lower))
        else:
            cleaned = collapse_whitespace(lower)
        return NormalizedQuery(raw=raw, lower=lower, cleaned=cleaned)


_default_normalizer = TextNormalizer()


def normalize(raw: Optional[str]) -> NormalizedQuery:
    """Normalize with the default stop word list"""
    return _default_normalizer.normalize(raw)
