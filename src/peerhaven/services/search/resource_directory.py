"""
Emergency Resource Directory

Lookup, search and chat-style triage over emergency contacts.

SAFETY_NOTE: Suicide and crisis replies are always marked urgent.
Contacts are listed 24/7-first so the reachable line is on top.

LEGAL_REVIEW_REQUIRED: Contact data comes from the contact store
and must be verified per jurisdiction.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.support_category import ContactCategory
from peerhaven.domain.models.emergency_contact import EmergencyContact
from peerhaven.domain.models.intent import ComposedResponse
from peerhaven.infrastructure.metrics.prometheus_metrics import track_crisis_response
from peerhaven.infrastructure.stores.base import ContactStore, fetch_or_empty
from peerhaven.services.matching.contact_triage import ContactTriage
from peerhaven.services.matching.response_composer import select_top_contacts

logger = get_logger(__name__)

GLOBAL_COUNTRY = "Global"

GENERAL_PROMPT = (
    "I'm here to help you find the right support. Can you tell me more about "
    "what kind of help you need? You can also use the quick options below."
)

TRIAGE_TEXT: Mapping[ContactCategory, str] = MappingProxyType({
    ContactCategory.SUICIDE: (
        "I'm very concerned about you. Please reach out to these immediate "
        "resources. You matter, and help is available right now:"
    ),
    ContactCategory.CRISIS: (
        "I understand you're in crisis. Here are immediate support resources available 24/7:"
    ),
    ContactCategory.DOMESTIC_VIOLENCE: (
        "Your safety is the priority. Here are confidential resources for domestic violence support:"
    ),
    ContactCategory.SUBSTANCE_ABUSE: (
        "Recovery is possible. Here are resources for substance abuse support:"
    ),
    ContactCategory.MENTAL_HEALTH: (
        "Mental health support is important. Here are resources that can help:"
    ),
})

URGENT_CATEGORIES = frozenset({ContactCategory.SUICIDE, ContactCategory.CRISIS})


class ResourceDirectory:
    """
    Emergency contact directory.
    
    Usage:
        directory = ResourceDirectory(contact_store)
        reply = await directory.respond("I feel unsafe at home")
    """
    
    def __init__(
        self,
        contact_store: ContactStore,
        triage: Optional[ContactTriage] = None,
        timeout_seconds: float = 2.0,
    ) -> None:
        self._store = contact_store
        self._triage = triage or ContactTriage()
        self._timeout = timeout_seconds
    
    async def list_contacts(self, category: Optional[ContactCategory] = None) -> tuple[EmergencyContact, ...]:
        """All contacts (optionally of one category), 24/7-first then by name."""
        contacts = await fetch_or_empty("contacts", self._store.list_contacts(category), self._timeout)
        return select_top_contacts(contacts, category, limit=None)
    
    async def search(self, term: str, country: Optional[str] = None) -> tuple[EmergencyContact, ...]:
        """
        Search contacts by name, description or category.
        
        Args:
            term: Case-insensitive substring; empty matches everything
            country: Keep contacts of this country plus Global ones
        """
        needle = (term or "").strip().lower()
        wanted_country = (country or "").strip().lower()
        contacts = await self.list_contacts()
        
        def matches(contact: EmergencyContact) -> bool:
            if wanted_country and contact.country.lower() not in (wanted_country, GLOBAL_COUNTRY.lower()):
                return False
            if not needle:
                return True
            return (
                needle in contact.name.lower()
                or needle in contact.description.lower()
                or needle in contact.category.value.replace("_", " ")
            )
        
        return tuple(c for c in contacts if matches(c))
    
    async def respond(self, utterance: str) -> ComposedResponse:
        """
        Answer an emergency resources chat message.
        
        Crisis requests also include every 24/7 contact. Unmatched
        messages get the general prompt and no contacts.
        """
        category = self._triage.triage(utterance)
        if category is None:
            return ComposedResponse(text=GENERAL_PROMPT)
        
        if category == ContactCategory.CRISIS:
            everything = await self.list_contacts()
            contacts = tuple(
                c for c in everything
                if c.category == ContactCategory.CRISIS or c.available_24_7
            )
        else:
            contacts = await self.list_contacts(category)
        
        urgent = category in URGENT_CATEGORIES
        if urgent:
            track_crisis_response()
            logger.warning(
                "Urgent resource request",
                contact_category=category.value,
                contact_count=len(contacts),
                message_length=len(utterance),
            )
        
        return ComposedResponse(text=TRIAGE_TEXT[category], contacts=contacts, urgent=urgent)
