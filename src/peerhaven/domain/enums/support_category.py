"""
Support and Emergency Contact Categories

Closed sets of the marketplace support areas and of the
emergency contact kinds. Definition order of SupportCategory
is the keyword-matching priority order.
"""

from enum import StrEnum
from typing import Optional


class SupportCategory(StrEnum):
    """
    Marketplace support areas.
    
    Member order is significant: when an utterance matches the
    keywords of several categories, the earliest member wins.
    """
    
    MENTAL_HEALTH = "mental-health"
    CAREER = "career"
    RELATIONSHIPS = "relationships"
    LIFE_TRANSITIONS = "life-transitions"
    EDUCATION = "education"
    COMMUNITY = "community"
    
    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SupportCategory"]:
        """
        Parse a category id.
        
        Unknown ids return None instead of falling back to a
        default category.
        """
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
    
    @classmethod
    def priority_order(cls) -> tuple["SupportCategory", ...]:
        """Categories in keyword-matching priority order."""
        return tuple(cls)


class ContactCategory(StrEnum):
    """Kinds of emergency contacts."""
    
    SUICIDE = "suicide"
    CRISIS = "crisis"
    MENTAL_HEALTH = "mental_health"
    DOMESTIC_VIOLENCE = "domestic_violence"
    SUBSTANCE_ABUSE = "substance_abuse"
    GENERAL = "general"
    
    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ContactCategory"]:
        """Parse a contact category; unknown values return None."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
