"""
Intent Classifier

Maps a free-text user message to a single Intent using
deterministic keyword matching with a fixed priority order:

    1. Crisis phrases   -> CRISIS / CRITICAL
    2. Voice requests   -> VOICE_REQUEST
    3. Category topics  -> CATEGORY_TOPIC (first category in priority order)
    4. Anything else    -> GENERIC

SAFETY-CRITICAL: The crisis check runs first and unconditionally.
No other keyword may shadow a crisis phrase.

CLINICAL_REVIEW_REQUIRED: Keyword lists should be reviewed by
mental health professionals before production use.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from peerhaven.domain.enums.matching import IntentKind, Urgency
from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.domain.models.intent import Intent


class IntentClassifier:
    """
    Keyword-based intent classifier.
    
    Stateless and safe to share between concurrent requests.
    Matching is case-insensitive substring matching on the
    trimmed message.
    """
    
    # SAFETY_CRITICAL: Any of these forces a CRISIS intent
    CRISIS_PHRASES: frozenset[str] = frozenset({
        "suicide", "suicidal",
        "kill myself", "end it all", "end my life",
        "want to die", "better off dead", "no reason to live",
        "self harm", "self-harm", "hurt myself",
    })
    
    VOICE_TRIGGERS: frozenset[str] = frozenset({"voice", "speak"})
    
    # Raise a category intent to ELEVATED urgency
    ESCALATION_TERMS: frozenset[str] = frozenset({"crisis", "emergency", "help"})
    
    # Iterated in SupportCategory order, which is the priority order
    CATEGORY_KEYWORDS: Mapping[SupportCategory, frozenset[str]] = MappingProxyType({
        SupportCategory.MENTAL_HEALTH: frozenset({
            "anxious", "anxiety", "panic", "depressed", "depression",
            "stress", "overwhelmed", "mental health",
        }),
        SupportCategory.CAREER: frozenset({
            "career", "job", "interview", "work", "resume", "promotion", "salary",
        }),
        SupportCategory.RELATIONSHIPS: frozenset({
            "relationship", "communication", "dating", "partner", "marriage", "breakup",
        }),
        SupportCategory.LIFE_TRANSITIONS: frozenset({
            "transition", "moving", "relocation", "divorce", "retirement", "grief",
        }),
        SupportCategory.EDUCATION: frozenset({
            "study", "exam", "school", "college", "university", "learning",
        }),
        SupportCategory.COMMUNITY: frozenset({
            "lonely", "loneliness", "community", "friends", "social", "belong",
        }),
    })
    
    def __init__(
        self,
        category_keywords: Optional[Mapping[SupportCategory, frozenset[str]]] = None,
    ) -> None:
        """
        Initialize classifier.
        
        Args:
            category_keywords: Optional replacement keyword table.
                Priority still follows SupportCategory order.
        """
        table = category_keywords if category_keywords is not None else self.CATEGORY_KEYWORDS
        self._category_keywords = {
            category: frozenset(k.lower() for k in table.get(category, frozenset()))
            for category in SupportCategory.priority_order()
        }
    
    def classify(self, utterance: str) -> Intent:
        """
        Classify a user message.
        
        Args:
            utterance: Raw user message
            
        Returns:
            Intent (GENERIC for empty input)
        """
        text = self.normalize(utterance)
        if not text:
            return Intent(kind=IntentKind.GENERIC)
        
        if self._find_keywords(text, self.CRISIS_PHRASES):
            return Intent(kind=IntentKind.CRISIS, urgency=Urgency.CRITICAL)
        
        if self._find_keywords(text, self.VOICE_TRIGGERS):
            return Intent(kind=IntentKind.VOICE_REQUEST)
        
        for category, keywords in self._category_keywords.items():
            matched = self._find_keywords(text, keywords)
            if matched:
                escalated = bool(self._find_keywords(text, self.ESCALATION_TERMS))
                return Intent(
                    kind=IntentKind.CATEGORY_TOPIC,
                    matched_category=category,
                    urgency=Urgency.ELEVATED if escalated else Urgency.NONE,
                    matched_keywords=matched,
                )
        
        return Intent(kind=IntentKind.GENERIC)
    
    def contains_crisis_language(self, utterance: str) -> bool:
        """Whether the message contains any crisis phrase."""
        return bool(self._find_keywords(self.normalize(utterance), self.CRISIS_PHRASES))
    
    @staticmethod
    def normalize(utterance: Optional[str]) -> str:
        return (utterance or "").strip().lower()
    
    @staticmethod
    def _find_keywords(text: str, keywords: frozenset[str]) -> frozenset[str]:
        """Keywords occurring as substrings of the lowercased text."""
        return frozenset(keyword for keyword in keywords if keyword in text)
