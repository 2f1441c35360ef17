"""Domain enums package."""

from peerhaven.domain.enums.matching import AvailabilityStatus, IntentKind, SortKey, Urgency
from peerhaven.domain.enums.support_category import ContactCategory, SupportCategory

__all__ = [
    "AvailabilityStatus",
    "ContactCategory",
    "IntentKind",
    "SortKey",
    "SupportCategory",
    "Urgency",
]
