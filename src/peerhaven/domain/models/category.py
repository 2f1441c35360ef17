"""
Support Category Catalog

Explicit presentation and routing data for each SupportCategory:
display title, color, icon name, the emergency contact kind that
serves the category, and quick tips.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from peerhaven.domain.enums.support_category import ContactCategory, SupportCategory


@dataclass(frozen=True)
class CategoryProfile:
    """Catalog entry for a support category."""
    
    category: SupportCategory
    title: str
    color: str
    icon: str
    contact_category: ContactCategory
    quick_tips: tuple[str, ...] = field(default_factory=tuple)
    
    def to_dict(self) -> dict:
        return {
            "id": self.category.value,
            "title": self.title,
            "color": self.color,
            "icon": self.icon,
            "contact_category": self.contact_category.value,
            "quick_tips": list(self.quick_tips),
        }


@dataclass(frozen=True)
class CategoryStats:
    """Live helper counts for a category."""
    
    category: SupportCategory
    helper_count: int = 0
    available_count: int = 0
    
    def to_dict(self) -> dict:
        return {
            "helper_count": self.helper_count,
            "available_count": self.available_count,
        }


CATEGORY_PROFILES: Mapping[SupportCategory, CategoryProfile] = MappingProxyType({
    SupportCategory.MENTAL_HEALTH: CategoryProfile(
        category=SupportCategory.MENTAL_HEALTH,
        title="Mental Health Support",
        color="blue",
        icon="brain",
        contact_category=ContactCategory.MENTAL_HEALTH,
        quick_tips=(
            "Practice 5-minute daily meditation",
            "Take regular walks in nature",
            "Limit social media before bed",
            "Maintain a consistent sleep schedule",
            "Stay connected with supportive people",
        ),
    ),
    SupportCategory.CAREER: CategoryProfile(
        category=SupportCategory.CAREER,
        title="Career Development",
        color="green",
        icon="briefcase",
        contact_category=ContactCategory.GENERAL,
        quick_tips=(
            "Network actively - most jobs are never posted",
            "Tailor your resume for each application",
            "Use the STAR method for interviews",
            "Research salary ranges before negotiating",
            "Keep learning new skills continuously",
        ),
    ),
    SupportCategory.RELATIONSHIPS: CategoryProfile(
        category=SupportCategory.RELATIONSHIPS,
        title="Relationship Support",
        color="pink",
        icon="heart",
        contact_category=ContactCategory.DOMESTIC_VIOLENCE,
        quick_tips=(
            "Practice active listening daily",
            'Use "I" statements instead of "you" statements',
            "Set and respect healthy boundaries",
            "Express appreciation regularly",
            "Maintain your individual interests",
        ),
    ),
    SupportCategory.LIFE_TRANSITIONS: CategoryProfile(
        category=SupportCategory.LIFE_TRANSITIONS,
        title="Life Transitions",
        color="purple",
        icon="home",
        contact_category=ContactCategory.CRISIS,
        quick_tips=(
            "Maintain some familiar routines",
            "Set small, achievable goals",
            "Connect with others in similar situations",
            "Journal about your experiences",
            "Focus on personal growth opportunities",
        ),
    ),
    SupportCategory.EDUCATION: CategoryProfile(
        category=SupportCategory.EDUCATION,
        title="Educational Support",
        color="indigo",
        icon="graduation-cap",
        contact_category=ContactCategory.GENERAL,
        quick_tips=(
            "Use active learning techniques",
            "Practice spaced repetition",
            "Break large tasks into smaller ones",
            "Practice relaxation before tests",
            "Form study groups with peers",
        ),
    ),
    SupportCategory.COMMUNITY: CategoryProfile(
        category=SupportCategory.COMMUNITY,
        title="Community & Social",
        color="teal",
        icon="users",
        contact_category=ContactCategory.GENERAL,
        quick_tips=(
            "Join groups based on your interests",
            "Practice active listening skills",
            "Volunteer for causes you care about",
            "Start with small social interactions",
            "Be genuinely interested in others",
        ),
    ),
})


def get_category_profile(category_id: Optional[str]) -> Optional[CategoryProfile]:
    """Look up a profile; unknown ids return None."""
    category = SupportCategory.parse(category_id)
    if category is None:
        return None
    return CATEGORY_PROFILES[category]
