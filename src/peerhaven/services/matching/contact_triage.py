"""
Emergency Contact Triage

Maps a free-text request to the emergency contact category that
should answer it. Used by the emergency resources chat.

SAFETY_NOTE: Suicide language is checked first and cannot be
shadowed by any other rule. The rule order below is the priority
order.

CLINICAL_REVIEW_REQUIRED: Phrase lists are plain substring rules,
not a risk assessment.
"""

from typing import Collection, Optional

from peerhaven.domain.enums.support_category import ContactCategory
from peerhaven.services.matching.intent_classifier import IntentClassifier

TRIAGE_RULES: tuple[tuple[ContactCategory, Collection[str]], ...] = (
    (ContactCategory.SUICIDE, IntentClassifier.CRISIS_PHRASES),
    (ContactCategory.CRISIS, ("crisis", "emergency", "urgent")),
    (ContactCategory.DOMESTIC_VIOLENCE, ("domestic violence", "abuse", "unsafe")),
    (ContactCategory.SUBSTANCE_ABUSE, ("substance", "addiction", "drugs", "alcohol")),
    (ContactCategory.MENTAL_HEALTH, ("mental health", "depression", "anxiety")),
)


class ContactTriage:
    """Rule-ordered contact category selection."""
    
    def __init__(
        self,
        rules: tuple[tuple[ContactCategory, Collection[str]], ...] = TRIAGE_RULES,
    ) -> None:
        self._rules = rules
    
    def triage(self, utterance: str) -> Optional[ContactCategory]:
        """
        Pick the contact category for a request.
        
        Returns:
            First category whose phrases appear, or None when nothing
            matches (caller shows the general prompt)
        """
        text = IntentClassifier.normalize(utterance)
        if not text:
            return None
        
        for category, phrases in self._rules:
            if any(phrase in text for phrase in phrases):
                return category
        return None
