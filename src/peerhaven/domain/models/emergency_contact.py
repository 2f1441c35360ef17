"""
Emergency Contact Domain Model

Crisis lines and support organisations attached to urgent replies.

LEGAL_REVIEW_REQUIRED: Contact details must be verified for
accuracy in each country before production use.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from peerhaven.domain.enums.support_category import ContactCategory


@dataclass(frozen=True)
class EmergencyContact:
    """
    An emergency contact.
    
    Invariant: at least one of phone or website is present.
    
    Attributes:
        id: Contact identifier
        name: Organisation name
        description: Short description
        category: Contact kind (suicide, crisis, ...)
        country: Country name, or "Global"
        available_24_7: Whether reachable around the clock
        languages: Supported languages
        phone: Optional phone number
        website: Optional website URL
    """
    
    id: str
    name: str
    description: str
    category: ContactCategory
    country: str = "Global"
    available_24_7: bool = False
    languages: frozenset[str] = field(default_factory=frozenset)
    phone: Optional[str] = None
    website: Optional[str] = None
    
    def __post_init__(self) -> None:
        if not (self.phone or self.website):
            raise ValueError(f"Emergency contact {self.id} has neither phone nor website")
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmergencyContact":
        """
        Build from a store record.
        
        Raises:
            ValueError: Unknown category or missing phone/website
        """
        category = ContactCategory.parse(data.get("category"))
        if category is None:
            raise ValueError(f"Unknown contact category: {data.get('category')!r}")
        return cls(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description", ""),
            category=category,
            country=data.get("country") or "Global",
            available_24_7=bool(data.get("available_24_7", data.get("available24x7", False))),
            languages=frozenset(data.get("languages") or ()),
            phone=data.get("phone") or None,
            website=data.get("website") or None,
        )
    
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "country": self.country,
            "available_24_7": self.available_24_7,
            "languages": sorted(self.languages),
            "phone": self.phone,
            "website": self.website,
        }


def contact_priority(contact: EmergencyContact) -> tuple[bool, str, str]:
    """Sort key: 24/7 contacts first, then by name."""
    return (not contact.available_24_7, contact.name.lower(), contact.id)
