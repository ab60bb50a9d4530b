"""
Response composer: turns a Resolution into display messages.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from config import BOT_CONFIG, CONTACT, HELP_TOPICS, TIP_CATEGORIES, TIP_TEMPLATES
from engine import Resolution, ResolutionKind
from knowledge.base import FaqEntry, KnowledgeBase, ProgrammeEntry, ProgrammeType


class TipCategory(str, Enum):
    ADMISSIONS = "admissions"
    PROGRAMME = "programme"
    FEES = "fees"


@dataclass(frozen=True)
class BotMessage:
    """One chat bubble; delay is seconds after the previous one (display only)"""
    text: str
    delay: float = 0.0
    quick_questions: bool = False


def classify_tip_category(entry: Optional[FaqEntry],
                          categories: Optional[Dict[str, List[str]]] = None) -> Optional[TipCategory]:
    """First category whose keyword list contains one of the entry's keywords"""
    if entry is None:
        return None
    categories = categories if categories is not None else TIP_CATEGORIES
    keywords = {k.lower() for k in entry.keywords}
    for name, category_keywords in categories.items():
        if keywords.intersection(category_keywords):
            return TipCategory(name)
    return None


class ResponseComposer:
    def __init__(self, knowledge: KnowledgeBase, contact: Optional[Dict[str, str]] = None):
        self.knowledge = knowledge
        self.contact = {**CONTACT, **(contact or {})}
        self.followup_delay = BOT_CONFIG["followup_delay"]
        self.tip_delay = BOT_CONFIG["tip_delay"]

    def compose(self, resolution: Resolution) -> List[BotMessage]:
        if resolution.kind == ResolutionKind.PROGRAMME:
            return self.programme_found(resolution.programme)
        if resolution.kind == ResolutionKind.PROGRAMME_NOT_FOUND:
            return self.programme_not_found(resolution.attempted_query or "")
        if resolution.kind == ResolutionKind.FAQ:
            return self.faq_answer(resolution.faq)
        return self.no_match()

    def programme_found(self, entry: ProgrammeEntry) -> List[BotMessage]:
        return [
            BotMessage(
                f"Yes! We offer {entry.name}. This is a {entry.type.label} with a duration of "
                f"{entry.duration} and available in {entry.mode} mode. "
                f"Would you like more details about this programme?"
            ),
            BotMessage(
                f"💡 You can visit our programmes page or contact us at {self.contact['phone']} "
                f"for detailed information about {entry.name}.",
                delay=self.tip_delay,
            ),
        ]

    def programme_not_found(self, attempted_query: str) -> List[BotMessage]:
        diplomas = self._short_names(ProgrammeType.DIPLOMA)
        certificates = self._short_names(ProgrammeType.CERTIFICATE)
        return [
            BotMessage(f"I couldn't find a course matching \"{attempted_query}\" in our current offerings."),
            BotMessage(f"We offer Diploma programmes in: {diplomas}.", delay=self.followup_delay),
            BotMessage(f"We also offer Certificate programmes in: {certificates}.", delay=self.followup_delay),
            BotMessage(
                f"For a complete list, please visit our programmes page or contact us at "
                f"{self.contact['phone']}.",
                delay=self.followup_delay,
            ),
        ]

    def faq_answer(self, entry: FaqEntry) -> List[BotMessage]:
        messages = [BotMessage(entry.answer)]
        category = classify_tip_category(entry)
        if category is not None:
            messages.append(BotMessage(TIP_TEMPLATES[category.value].format(**self.contact),
                                       delay=self.tip_delay))
        return messages

    def no_match(self) -> List[BotMessage]:
        menu = "\n".join(f"• {topic}" for topic in HELP_TOPICS)
        return [
            BotMessage("I'm sorry, I couldn't find a specific answer to that question. "
                       "Here are some topics I can help with:"),
            BotMessage(menu, delay=self.followup_delay),
            BotMessage(
                "For more detailed assistance, please contact us:\n"
                f"📞 Phone/WhatsApp: {self.contact['phone']}\n"
                f"📧 Email: {self.contact['admissions_email']}\n\n"
                "Or try rephrasing your question!",
                delay=self.followup_delay,
            ),
            BotMessage("", delay=self.followup_delay, quick_questions=True),
        ]

    def _short_names(self, programme_type: ProgrammeType) -> str:
        names = []
        for entry in self.knowledge.get_programmes_by_type(programme_type):
            name = entry.name
            if programme_type == ProgrammeType.DIPLOMA and name.startswith("Diploma in "):
                name = name[len("Diploma in "):]
            names.append(name)
        return ", ".join(names)
