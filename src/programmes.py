"""
Programme availability: "do you offer X?"

Architecture:
1. ProgrammeIntentDetector decides whether a message asks about a programme
   (phrase patterns + any catalog keyword in the text)
2. The detector extracts what the visitor asked for: a catalog name if one is
   mentioned, otherwise the message without the intent words
3. ProgrammeResolver finds the catalog entry: exact name -> containment ->
   weighted keywords
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

from config import AVAILABILITY_PATTERNS, QUERY_STRIP_WORDS, RESOLVER_CONFIG
from knowledge.base import ProgrammeEntry
from normalizer import build_word_stripper, collapse_whitespace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgrammeResolution:
    """
    Result of a programme-availability lookup.

    matched:
        True  -> entry is set
        False -> it was a programme question but nothing in the catalog fits;
                 attempted_query holds what was looked up
        None  -> not a programme question at all
    """
    matched: Optional[bool]
    entry: Optional[ProgrammeEntry] = None
    attempted_query: Optional[str] = None

    @classmethod
    def not_a_programme_query(cls) -> "ProgrammeResolution":
        return cls(matched=None)


def _name_mentioned(name_lower: str, text_lower: str, prefix_length: int) -> bool:
    if name_lower in text_lower:
        return True
    return len(name_lower) > prefix_length and name_lower[:prefix_length] in text_lower


class ProgrammeIntentDetector:
    """Is the visitor asking whether a programme is offered?"""

    def __init__(
        self,
        catalog: Sequence[ProgrammeEntry],
        patterns: Optional[Iterable[str]] = None,
        strip_words: Optional[Iterable[str]] = None,
        config: Optional[Dict] = None,
    ):
        self.catalog = tuple(catalog)
        self.config = {**RESOLVER_CONFIG, **(config or {})}
        self.patterns = [
            re.compile(p, re.IGNORECASE)
            for p in (patterns if patterns is not None else AVAILABILITY_PATTERNS)
        ]
        self._strip_re = build_word_stripper(
            strip_words if strip_words is not None else QUERY_STRIP_WORDS
        )
        # (keyword_lower, entry) in catalog order
        self._keywords = [
            (keyword.lower(), entry)
            for entry in self.catalog
            for keyword in entry.keywords
        ]

    def matches_pattern(self, raw: str) -> bool:
        return any(p.search(raw) for p in self.patterns)

    def find_catalog_keyword(self, text_lower: str) -> Optional[str]:
        """First catalog keyword contained in the text"""
        for keyword, _ in self._keywords:
            if keyword in text_lower:
                return keyword
        return None

    def is_availability_query(self, raw: Optional[str]) -> bool:
        if not raw or not raw.strip():
            return False
        if self.matches_pattern(raw):
            return True
        return self.find_catalog_keyword(raw.lower()) is not None

    def extract_query(self, raw: Optional[str]) -> Optional[str]:
        """
        What the visitor is asking for.

        Returns:
            None if this is not an availability question, otherwise a catalog
            name (when one is mentioned by name or keyword) or the message with
            the intent words stripped. Too-short residuals fall back to the
            whole message.
        """
        if not self.is_availability_query(raw):
            return None

        message = raw.strip()
        message_lower = message.lower()
        prefix_length = self.config["name_prefix_length"]

        for entry in self.catalog:
            if _name_mentioned(entry.name.lower(), message_lower, prefix_length):
                return entry.name
            for keyword in entry.keywords:
                if keyword.lower() in message_lower:
                    return entry.name

        residual = collapse_whitespace(self._strip_re.sub(" ", message))
        if len(residual) >= self.config["min_query_length"]:
            return residual
        return message


class ProgrammeResolver:
    """Finds the catalog entry for a query string"""

    def __init__(self, catalog: Sequence[ProgrammeEntry], config: Optional[Dict] = None):
        self.catalog = tuple(catalog)
        self.config = {**RESOLVER_CONFIG, **(config or {})}

    def resolve(self, query: Optional[str]) -> Optional[ProgrammeEntry]:
        query_lower = (query or "").lower().strip()
        if not query_lower:
            return None

        # 1. Exact name
        for entry in self.catalog:
            if entry.name.lower() == query_lower:
                logger.debug("Programme '%s': exact name match", entry.name)
                return entry

        # 2. Containment either way
        prefix_length = self.config["name_prefix_length"]
        for entry in self.catalog:
            name_lower = entry.name.lower()
            if query_lower in name_lower or _name_mentioned(name_lower, query_lower, prefix_length):
                logger.debug("Programme '%s': name containment", entry.name)
                return entry

        # 3. Keywords, longer keywords weigh more
        best_entry, best_score = self.keyword_scores(query_lower)
        if best_score > 0:
            logger.debug("Programme '%s': keyword score %d", best_entry.name, best_score)
            return best_entry
        return None

    def keyword_scores(self, query_lower: str):
        """(best_entry, best_score); ties keep the earlier entry"""
        best_entry = None
        best_score = 0
        for entry in self.catalog:
            score = 0
            for keyword in entry.keywords:
                keyword_lower = keyword.lower()
                if keyword_lower in query_lower or query_lower in keyword_lower:
                    score += len(keyword_lower)
            if score > best_score:
                best_score = score
                best_entry = entry
        return best_entry, best_score
