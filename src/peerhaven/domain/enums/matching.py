"""
Matching Enumerations

Intent kinds, urgency levels, helper availability and
helper sort keys used by the matching core.
"""

from enum import IntEnum, StrEnum
from typing import Optional


class IntentKind(StrEnum):
    """Classified purpose of a user message."""
    
    CRISIS = "crisis"
    """
    Self-harm or suicide language detected.
    
    SAFETY_NOTE: Always evaluated first. No other intent
    may shadow it.
    """
    
    CATEGORY_TOPIC = "category_topic"
    """Message relates to one of the support categories."""
    
    VOICE_REQUEST = "voice_request"
    """User asks to talk by voice."""
    
    GENERIC = "generic"
    """No specific intent recognised."""


class Urgency(IntEnum):
    """
    Severity attached to an intent.
    
    Ordered so that comparisons read naturally
    (Urgency.CRITICAL > Urgency.ELEVATED).
    """
    
    NONE = 0
    ELEVATED = 1
    CRITICAL = 2
    
    @property
    def label(self) -> str:
        return self.name.lower()


class AvailabilityStatus(StrEnum):
    """Helper presence."""
    
    ONLINE = "online"
    BUSY = "busy"
    OFFLINE = "offline"
    
    @classmethod
    def parse(cls, value: Optional[str]) -> "AvailabilityStatus":
        """Parse a status; anything unrecognised counts as offline."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.OFFLINE


class SortKey(StrEnum):
    """Helper result ordering."""
    
    RATING = "rating"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"
    EXPERIENCE = "experience"
    REVIEWS = "reviews"
    
    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SortKey"]:
        """
        Parse a sort key.
        
        Accepts the web client's legacy names ("price-low",
        "price-high") as aliases. Returns None when unknown.
        """
        if not value:
            return None
        aliases = {
            "price-low": cls.PRICE_ASC,
            "price-high": cls.PRICE_DESC,
        }
        if value in aliases:
            return aliases[value]
        try:
            return cls(value)
        except ValueError:
            return None
