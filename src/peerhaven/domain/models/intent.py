"""
Intent and Composed Response Models

Transient values produced per user message. Never persisted.
"""

from dataclasses import dataclass, field
from typing import Optional

from peerhaven.domain.enums.matching import IntentKind, Urgency
from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.domain.models.emergency_contact import EmergencyContact
from peerhaven.domain.models.knowledge import KnowledgeEntry


@dataclass(frozen=True)
class Intent:
    """
    Classified purpose of a user message.
    
    Attributes:
        kind: Intent kind
        matched_category: Category for CATEGORY_TOPIC intents
        urgency: Severity flag
        matched_keywords: Category keywords found in the message
    """
    
    kind: IntentKind
    matched_category: Optional[SupportCategory] = None
    urgency: Urgency = Urgency.NONE
    matched_keywords: frozenset[str] = field(default_factory=frozenset)
    
    @property
    def is_crisis(self) -> bool:
        return self.kind == IntentKind.CRISIS
    
    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "matched_category": self.matched_category.value if self.matched_category else None,
            "urgency": self.urgency.label,
            "matched_keywords": sorted(self.matched_keywords),
        }


@dataclass(frozen=True)
class ComposedResponse:
    """
    Structured assistant reply.
    
    Always well-formed: text is never empty, collections may be.
    
    Attributes:
        text: Reply text
        knowledge: Up to 2 knowledge entries
        contacts: Up to 3 emergency contacts (more for triage replies)
        urgent: Whether the reply carries crisis urgency
    """
    
    text: str
    knowledge: tuple[KnowledgeEntry, ...] = field(default_factory=tuple)
    contacts: tuple[EmergencyContact, ...] = field(default_factory=tuple)
    urgent: bool = False
    
    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "knowledge": [k.to_dict() for k in self.knowledge],
            "contacts": [c.to_dict() for c in self.contacts],
            "urgent": self.urgent,
        }
