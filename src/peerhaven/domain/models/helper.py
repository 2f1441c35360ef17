"""
Helper Domain Model

A marketplace listing for a person offering peer support.
Owned by the external data layer; the ranking engine only
reads immutable snapshots.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from peerhaven.domain.enums.matching import AvailabilityStatus


@dataclass(frozen=True)
class HelperRecord:
    """
    Helper listing snapshot.
    
    Attributes:
        id: Helper identifier (tie-break key for ordering)
        display_name: Full display name
        title: Headline (e.g., "Licensed Counselor")
        rating: Average rating (0.0-5.0)
        review_count: Number of reviews
        hourly_rate: Price per hour (> 0)
        languages: Spoken languages
        specialties: Specialty labels
        category_id: Support category id
        experience_years: Years of experience
        location: Free-text location
        availability_status: online / busy / offline
        video_enabled: Offers video sessions
        voice_enabled: Offers voice AI sessions
        description: Profile text
        verified: Credentials verified
    """
    
    id: str
    display_name: str
    title: str
    rating: float
    review_count: int
    hourly_rate: float
    languages: frozenset[str] = field(default_factory=frozenset)
    specialties: tuple[str, ...] = field(default_factory=tuple)
    category_id: str = ""
    experience_years: int = 0
    location: str = ""
    availability_status: AvailabilityStatus = AvailabilityStatus.OFFLINE
    video_enabled: bool = False
    voice_enabled: bool = False
    description: str = ""
    verified: bool = False
    
    def __post_init__(self) -> None:
        if not 0.0 <= self.rating <= 5.0:
            raise ValueError(f"rating out of range: {self.rating}")
        if self.review_count < 0:
            raise ValueError(f"review_count must be non-negative: {self.review_count}")
        if not math.isfinite(self.hourly_rate) or self.hourly_rate <= 0:
            raise ValueError(f"hourly_rate must be positive: {self.hourly_rate}")
        if self.experience_years < 0:
            raise ValueError(f"experience_years must be non-negative: {self.experience_years}")
    
    @property
    def is_online(self) -> bool:
        return self.availability_status == AvailabilityStatus.ONLINE
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HelperRecord":
        """
        Build from a store record.
        
        Accepts the marketplace view column names
        (average_rating, total_reviews, first_name/last_name).
        
        Raises:
            ValueError: On out-of-range values
        """
        display_name = data.get("display_name") or " ".join(
            part for part in (data.get("first_name"), data.get("last_name")) if part
        )
        return cls(
            id=str(data["id"]),
            display_name=display_name,
            title=data.get("title", ""),
            rating=float(data.get("rating", data.get("average_rating", 0.0))),
            review_count=int(data.get("review_count", data.get("total_reviews", 0))),
            hourly_rate=float(data["hourly_rate"]),
            languages=frozenset(data.get("languages") or ()),
            specialties=tuple(data.get("specialties") or ()),
            category_id=str(data.get("category_id", data.get("category_name", ""))),
            experience_years=int(data.get("experience_years", 0)),
            location=data.get("location") or "",
            availability_status=AvailabilityStatus.parse(data.get("availability_status")),
            video_enabled=bool(data.get("video_enabled", False)),
            voice_enabled=bool(data.get("voice_enabled", False)),
            description=data.get("description") or "",
            verified=bool(data.get("verified", False)),
        )
    
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "title": self.title,
            "rating": self.rating,
            "review_count": self.review_count,
            "hourly_rate": self.hourly_rate,
            "languages": sorted(self.languages),
            "specialties": list(self.specialties),
            "category_id": self.category_id,
            "experience_years": self.experience_years,
            "location": self.location,
            "availability_status": self.availability_status.value,
            "video_enabled": self.video_enabled,
            "voice_enabled": self.voice_enabled,
            "description": self.description,
            "verified": self.verified,
        }
