"""
Knowledge base structure.

Two static collections, loaded once and never changed while the bot runs:
- programmes: catalog of diplomas and certificates (name, keywords, type,
  duration, mode)
- faqs: FAQ entries (trigger keywords, canonical question label, answer)

The question label of an FAQ entry doubles as its identifier for the
fallback phrases, so labels must be unique.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class KnowledgeBaseError(ValueError):
    """Knowledge base data violates an invariant (raised at construction)."""


class ProgrammeType(str, Enum):
    DIPLOMA = "diploma"
    CERTIFICATE = "certificate"

    @property
    def label(self) -> str:
        return "Diploma programme" if self is ProgrammeType.DIPLOMA else "Certificate programme"


@dataclass(frozen=True)
class ProgrammeEntry:
    """One programme of the catalog"""
    name: str                   # unique display name
    keywords: Tuple[str, ...]   # ("cybersecurity", "security", ...)
    type: ProgrammeType
    duration: str               # "2 Years", "16 Weeks"
    mode: str                   # "Online / Hybrid"

    def __post_init__(self):
        # Lists are accepted for convenience, stored as tuples
        object.__setattr__(self, "keywords", tuple(self.keywords))
        object.__setattr__(self, "type", ProgrammeType(self.type))


@dataclass(frozen=True)
class FaqEntry:
    """One FAQ entry"""
    keywords: Tuple[str, ...]   # trigger keywords
    question: str               # unique label
    answer: str                 # display text, may contain inline markup

    def __post_init__(self):
        object.__setattr__(self, "keywords", tuple(self.keywords))


@dataclass(frozen=True)
class KnowledgeBase:
    """The whole knowledge base"""
    institution_name: str
    programmes: Tuple[ProgrammeEntry, ...]
    faqs: Tuple[FaqEntry, ...]

    _faq_index: Dict[str, FaqEntry] = field(default=None, init=False, repr=False, compare=False)
    _programme_index: Dict[str, ProgrammeEntry] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "programmes", tuple(self.programmes))
        object.__setattr__(self, "faqs", tuple(self.faqs))
        self._validate()

        object.__setattr__(self, "_faq_index", {f.question: f for f in self.faqs})
        object.__setattr__(self, "_programme_index", {p.name.lower(): p for p in self.programmes})

    def _validate(self):
        seen_names = set()
        for programme in self.programmes:
            _check_keywords(programme.keywords, f"Programme '{programme.name}'")
            name = programme.name.strip().lower()
            if not name:
                raise KnowledgeBaseError("Programme with an empty name")
            if name in seen_names:
                raise KnowledgeBaseError(f"Duplicate programme name: '{programme.name}'")
            seen_names.add(name)

        seen_questions = set()
        for faq in self.faqs:
            _check_keywords(faq.keywords, f"FAQ '{faq.question}'")
            if not faq.question.strip():
                raise KnowledgeBaseError("FAQ entry with an empty question label")
            if faq.question in seen_questions:
                raise KnowledgeBaseError(f"Duplicate FAQ question label: '{faq.question}'")
            seen_questions.add(faq.question)

    def get_programme(self, name: str) -> Optional[ProgrammeEntry]:
        """Programme by name (case-insensitive)"""
        return self._programme_index.get(name.strip().lower())

    def get_programmes_by_type(self, programme_type: ProgrammeType) -> List[ProgrammeEntry]:
        """All programmes of a type, in catalog order"""
        return [p for p in self.programmes if p.type == programme_type]

    def get_faq(self, question: str) -> Optional[FaqEntry]:
        """FAQ entry by its exact question label"""
        return self._faq_index.get(question)


def _check_keywords(keywords: Tuple[str, ...], owner: str):
    if not keywords:
        raise KnowledgeBaseError(f"{owner} has no keywords")
    for keyword in keywords:
        if not isinstance(keyword, str) or not keyword.strip():
            raise KnowledgeBaseError(f"{owner} has a blank keyword")
