"""Domain models package."""

from peerhaven.domain.models.category import (
    CATEGORY_PROFILES,
    CategoryProfile,
    CategoryStats,
    get_category_profile,
)
from peerhaven.domain.models.conversation import ConversationTurn, History, TurnRole
from peerhaven.domain.models.emergency_contact import EmergencyContact, contact_priority
from peerhaven.domain.models.filter_criteria import ExperienceBand, FilterCriteria
from peerhaven.domain.models.helper import HelperRecord
from peerhaven.domain.models.intent import ComposedResponse, Intent
from peerhaven.domain.models.knowledge import KnowledgeEntry

__all__ = [
    "CATEGORY_PROFILES",
    "CategoryProfile",
    "CategoryStats",
    "get_category_profile",
    "ConversationTurn",
    "History",
    "TurnRole",
    "EmergencyContact",
    "contact_priority",
    "ExperienceBand",
    "FilterCriteria",
    "HelperRecord",
    "ComposedResponse",
    "Intent",
    "KnowledgeEntry",
]
