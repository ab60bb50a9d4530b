"""
KNS College knowledge base module.
"""

from .base import (
    FaqEntry,
    KnowledgeBase,
    KnowledgeBaseError,
    ProgrammeEntry,
    ProgrammeType,
)
from .data import KNS_KNOWLEDGE

__all__ = [
    "FaqEntry",
    "KnowledgeBase",
    "KnowledgeBaseError",
    "ProgrammeEntry",
    "ProgrammeType",
    "KNS_KNOWLEDGE",
]
