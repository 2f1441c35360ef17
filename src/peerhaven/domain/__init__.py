"""
PeerHaven Domain Layer

Core entities and value objects of the matching core.
These models are independent of storage and transport.
"""

from peerhaven.domain.enums import (
    AvailabilityStatus,
    ContactCategory,
    IntentKind,
    SortKey,
    SupportCategory,
    Urgency,
)
from peerhaven.domain.errors import (
    InvalidCriteriaError,
    PeerHavenError,
    SpeechUnavailableError,
    StoreUnavailableError,
)
from peerhaven.domain.models import (
    ComposedResponse,
    ConversationTurn,
    EmergencyContact,
    FilterCriteria,
    HelperRecord,
    Intent,
    KnowledgeEntry,
)

__all__ = [
    # Enums
    "AvailabilityStatus",
    "ContactCategory",
    "IntentKind",
    "SortKey",
    "SupportCategory",
    "Urgency",
    # Errors
    "InvalidCriteriaError",
    "PeerHavenError",
    "SpeechUnavailableError",
    "StoreUnavailableError",
    # Models
    "ComposedResponse",
    "ConversationTurn",
    "EmergencyContact",
    "FilterCriteria",
    "HelperRecord",
    "Intent",
    "KnowledgeEntry",
]
