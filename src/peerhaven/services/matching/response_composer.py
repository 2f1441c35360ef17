"""
Response Composer

Turns a classified Intent into a structured reply: lead-in text,
up to two knowledge entries and up to three emergency contacts.

ARCHITECTURE: Store failures never reach the user. A store that
raises or times out is replaced by an empty collection and the
reply degrades to text only, always well-formed.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.matching import IntentKind, Urgency
from peerhaven.domain.enums.support_category import ContactCategory, SupportCategory
from peerhaven.domain.models.emergency_contact import EmergencyContact, contact_priority
from peerhaven.domain.models.intent import ComposedResponse, Intent
from peerhaven.domain.models.knowledge import KnowledgeEntry
from peerhaven.infrastructure.stores.base import (
    ContactStore,
    KnowledgeStore,
    fetch_or_empty,
    knowledge_search_order,
)

logger = get_logger(__name__)

MAX_KNOWLEDGE: int = 2
MAX_CONTACTS: int = 3


class ResponseComposer:
    """
    Composes replies for classified intents.
    
    Reply rules:
    - CRISIS: fixed safety message + up to 3 suicide contacts (24/7 first), urgent
    - CATEGORY_TOPIC: category lead-in + up to 2 matching knowledge entries;
      urgent intents also get up to 3 crisis contacts
    - VOICE_REQUEST: fixed invitation, nothing attached
    - GENERIC: supportive lead-in + the single most confident entry
    """
    
    CRISIS_TEXT: str = (
        "I'm very concerned about you. Your life has value and help is "
        "available right now. Please reach out to these crisis resources. "
        "You don't have to go through this alone."
    )
    
    VOICE_TEXT: str = (
        "I'd love to speak with you! Voice conversations can feel more "
        "personal and supportive. Turn on voice replies and we can keep "
        "talking whenever you're ready."
    )
    
    GENERIC_TEXT: str = (
        "Thank you for sharing that with me. Your feelings are valid, and "
        "seeking support shows strength. Here is some information that "
        "might be relevant to your situation."
    )
    
    CATEGORY_TEXT: Mapping[SupportCategory, str] = MappingProxyType({
        SupportCategory.MENTAL_HEALTH: (
            "I understand you're feeling anxious. Anxiety is very common and there "
            "are effective techniques to help manage it. Here are some evidence-based "
            "strategies for both immediate and long-term relief."
        ),
        SupportCategory.CAREER: (
            "Career challenges can feel overwhelming, but with the right strategies "
            "you can navigate them successfully. Here are some practical approaches "
            "that have helped many people in similar situations."
        ),
        SupportCategory.RELATIONSHIPS: (
            "Relationships take ongoing effort and good communication. Here are some "
            "proven techniques for building stronger, healthier connections."
        ),
        SupportCategory.LIFE_TRANSITIONS: (
            "Big changes can be unsettling, even when they're wanted. Here are some "
            "ways to stay steady while you adjust."
        ),
        SupportCategory.EDUCATION: (
            "Learning is easier with the right habits and support. Here are some "
            "study strategies that can help."
        ),
        SupportCategory.COMMUNITY: (
            "Feeling connected matters. Here are some ideas for building meaningful "
            "social connections."
        ),
    })
    
    # Topic vocabulary used to pick knowledge entries for a category,
    # in addition to the keywords the classifier matched
    CATEGORY_TOPIC_TERMS: Mapping[SupportCategory, frozenset[str]] = MappingProxyType({
        SupportCategory.MENTAL_HEALTH: frozenset({"anxiety", "panic", "stress", "breathing"}),
        SupportCategory.CAREER: frozenset({"career", "job", "interview", "resume", "networking"}),
        SupportCategory.RELATIONSHIPS: frozenset({"relationship", "communication", "dating", "trust"}),
        SupportCategory.LIFE_TRANSITIONS: frozenset({"change", "transition", "resilience", "coping"}),
        SupportCategory.EDUCATION: frozenset({"study", "learning", "exam", "test anxiety"}),
        SupportCategory.COMMUNITY: frozenset({"community", "friendship", "belonging", "social connections"}),
    })
    
    def __init__(
        self,
        knowledge_store: KnowledgeStore,
        contact_store: ContactStore,
        timeout_seconds: float = 2.0,
    ) -> None:
        """
        Initialize composer.
        
        Args:
            knowledge_store: Knowledge base access
            contact_store: Emergency contact access
            timeout_seconds: Upper bound for each store fetch
        """
        self._knowledge = knowledge_store
        self._contacts = contact_store
        self._timeout = timeout_seconds
    
    async def compose(self, intent: Intent) -> ComposedResponse:
        """
        Compose a reply for an intent.
        
        Args:
            intent: Classified intent
            
        Returns:
            ComposedResponse (never raises on store failure)
        """
        if intent.kind == IntentKind.CRISIS:
            contacts = await self._top_contacts(ContactCategory.SUICIDE)
            logger.warning("Crisis reply composed", contact_count=len(contacts))
            return ComposedResponse(text=self.CRISIS_TEXT, contacts=contacts, urgent=True)
        
        if intent.kind == IntentKind.CATEGORY_TOPIC and intent.matched_category is not None:
            return await self._compose_category(intent, intent.matched_category)
        
        if intent.kind == IntentKind.VOICE_REQUEST:
            return ComposedResponse(text=self.VOICE_TEXT)
        
        return ComposedResponse(text=self.GENERIC_TEXT, knowledge=await self._best_overall_entry())
    
    async def _compose_category(self, intent: Intent, category: SupportCategory) -> ComposedResponse:
        entries = await fetch_or_empty(
            "knowledge",
            self._knowledge.list_knowledge(category.value),
            self._timeout,
        )
        topic_terms = intent.matched_keywords | self.CATEGORY_TOPIC_TERMS[category]
        knowledge = select_topic_entries(entries, category, topic_terms)
        
        urgent = intent.urgency != Urgency.NONE
        contacts: tuple[EmergencyContact, ...] = ()
        if urgent:
            contacts = await self._top_contacts(ContactCategory.CRISIS)
        
        return ComposedResponse(
            text=self.CATEGORY_TEXT[category],
            knowledge=knowledge,
            contacts=contacts,
            urgent=urgent,
        )
    
    async def _top_contacts(self, category: ContactCategory) -> tuple[EmergencyContact, ...]:
        contacts = await fetch_or_empty(
            "contacts",
            self._contacts.list_contacts(category),
            self._timeout,
        )
        return select_top_contacts(contacts, category)
    
    async def _best_overall_entry(self) -> tuple[KnowledgeEntry, ...]:
        entries = await fetch_or_empty("knowledge", self._knowledge.list_knowledge(), self._timeout)
        if not entries:
            return ()
        return (min(entries, key=knowledge_search_order),)


def select_topic_entries(
    entries: Sequence[KnowledgeEntry],
    category: SupportCategory,
    topic_terms: frozenset[str],
    limit: int = MAX_KNOWLEDGE,
) -> tuple[KnowledgeEntry, ...]:
    """
    Pick knowledge entries for a category reply.
    
    Keeps entries of the category whose keywords intersect the
    topic terms, ordered by confidence descending then topic.
    
    The composer passes the keywords found in the message widened
    with the category's topic vocabulary on purpose, so a message
    about feeling anxious also reaches entries keyed on "breathing"
    or "stress".
    """
    terms = frozenset(t.lower() for t in topic_terms)
    matching = [
        entry for entry in entries
        if entry.category_id == category.value and entry.keyword_set() & terms
    ]
    return tuple(sorted(matching, key=knowledge_search_order)[:limit])


def select_top_contacts(
    contacts: Sequence[EmergencyContact],
    category: Optional[ContactCategory] = None,
    limit: Optional[int] = MAX_CONTACTS,
) -> tuple[EmergencyContact, ...]:
    """
    Order contacts 24/7-first then by name, optionally filtering
    by category and truncating to a limit.
    """
    selected = [c for c in contacts if category is None or c.category == category]
    ordered = sorted(selected, key=contact_priority)
    return tuple(ordered if limit is None else ordered[:limit])
