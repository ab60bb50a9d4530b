"""
Intent engine: the two entry points the rest of the bot uses.

    resolve_programme_intent(text) -> ProgrammeResolution
    resolve_faq(text)              -> FaqEntry | None

plus resolve(text), which runs one whole turn: programme question first,
FAQ otherwise. Everything here is a pure function of the knowledge base and
the message; an engine can be shared between sessions and threads.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from knowledge.base import FaqEntry, KnowledgeBase, ProgrammeEntry
from matcher import FaqMatcher
from programmes import ProgrammeIntentDetector, ProgrammeResolution, ProgrammeResolver

logger = logging.getLogger(__name__)


class ResolutionKind(str, Enum):
    PROGRAMME = "programme"
    PROGRAMME_NOT_FOUND = "programme_not_found"
    FAQ = "faq"
    NONE = "none"


@dataclass(frozen=True)
class Resolution:
    """Outcome of one turn, handed to the response composer"""
    kind: ResolutionKind
    programme: Optional[ProgrammeEntry] = None
    faq: Optional[FaqEntry] = None
    attempted_query: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.kind in (ResolutionKind.PROGRAMME, ResolutionKind.FAQ)


NO_MATCH = Resolution(kind=ResolutionKind.NONE)


class IntentEngine:
    """Programme detector + resolver + FAQ matcher over one knowledge base"""

    def __init__(
        self,
        knowledge: Optional[KnowledgeBase] = None,
        matcher_config: Optional[Dict] = None,
        resolver_config: Optional[Dict] = None,
    ):
        if knowledge is None:
            from knowledge.data import KNS_KNOWLEDGE
            knowledge = KNS_KNOWLEDGE

        self.knowledge = knowledge
        self.detector = ProgrammeIntentDetector(knowledge.programmes, config=resolver_config)
        self.resolver = ProgrammeResolver(knowledge.programmes, config=resolver_config)
        self.matcher = FaqMatcher(knowledge.faqs, config=matcher_config)

    def resolve_programme_intent(self, text: Optional[str]) -> ProgrammeResolution:
        query = self.detector.extract_query(text)
        if query is None:
            return ProgrammeResolution.not_a_programme_query()

        entry = self.resolver.resolve(query)
        if entry is None:
            logger.info("Programme query '%s' not found in catalog", query)
            return ProgrammeResolution(matched=False, attempted_query=query)
        return ProgrammeResolution(matched=True, entry=entry)

    def resolve_faq(self, text: Optional[str]) -> Optional[FaqEntry]:
        return self.matcher.match(text)

    def resolve(self, text: Optional[str]) -> Resolution:
        """One turn: programme availability first, then the FAQ set"""
        if not text or not text.strip():
            return NO_MATCH

        programme = self.resolve_programme_intent(text)
        if programme.matched is True:
            return Resolution(kind=ResolutionKind.PROGRAMME, programme=programme.entry)
        if programme.matched is False:
            return Resolution(
                kind=ResolutionKind.PROGRAMME_NOT_FOUND,
                attempted_query=programme.attempted_query,
            )

        faq = self.resolve_faq(text)
        if faq is not None:
            return Resolution(kind=ResolutionKind.FAQ, faq=faq)

        logger.info("No match for message: %r", text)
        return NO_MATCH
