"""
Unit Tests for Domain Models

Tests record invariants, store-record parsing and the
category catalog.
"""

import pytest

from peerhaven.domain.enums.matching import AvailabilityStatus, SortKey
from peerhaven.domain.enums.support_category import ContactCategory, SupportCategory
from peerhaven.domain.models.category import CATEGORY_PROFILES, get_category_profile
from peerhaven.domain.models.emergency_contact import EmergencyContact
from peerhaven.domain.models.helper import HelperRecord
from peerhaven.domain.models.knowledge import KnowledgeEntry


class TestKnowledgeEntry:
    
    def test_keywords_are_normalised_in_order(self) -> None:
        entry = KnowledgeEntry("k", "Topic", "Body", ("Panic", "stress", "panic", " "))
        
        assert entry.keywords == ("panic", "stress")
    
    def test_confidence_must_be_within_unit_range(self) -> None:
        with pytest.raises(ValueError):
            KnowledgeEntry("k", "Topic", "Body", (), confidence_level=1.5)
    
    def test_from_dict_accepts_camel_case(self) -> None:
        entry = KnowledgeEntry.from_dict({
            "id": "k1",
            "topic": "Study Strategies",
            "content": "Use spaced repetition.",
            "keywords": ["study"],
            "confidenceLevel": 0.7,
            "categoryId": "education",
        })
        
        assert entry.confidence_level == 0.7
        assert entry.category_id == "education"


class TestEmergencyContact:
    
    def test_requires_phone_or_website(self) -> None:
        with pytest.raises(ValueError):
            EmergencyContact("c", "Line", "", ContactCategory.CRISIS)
    
    def test_website_only_is_valid(self) -> None:
        contact = EmergencyContact("c", "Line", "", ContactCategory.GENERAL, website="https://example.org")
        
        assert contact.phone is None
    
    def test_from_dict_rejects_unknown_category(self) -> None:
        with pytest.raises(ValueError):
            EmergencyContact.from_dict({
                "id": "c",
                "name": "Line",
                "description": "",
                "category": "astrology",
                "phone": "123",
            })


class TestHelperRecord:
    
    @pytest.mark.parametrize("overrides", [
        {"rating": 5.1},
        {"rating": -1.0},
        {"review_count": -1},
        {"hourly_rate": 0},
        {"hourly_rate": float("nan")},
        {"hourly_rate": float("inf")},
        {"experience_years": -2},
    ])
    def test_invariants(self, make_helper, overrides: dict) -> None:
        with pytest.raises(ValueError):
            make_helper("h", **overrides)
    
    def test_from_marketplace_view_record(self) -> None:
        helper = HelperRecord.from_dict({
            "id": 42,
            "first_name": "Sam",
            "last_name": "Lee",
            "title": "Coach",
            "average_rating": 4.25,
            "total_reviews": 12,
            "hourly_rate": 35,
            "category_name": "career",
            "availability_status": "ONLINE",
        })
        
        assert helper.id == "42"
        assert helper.display_name == "Sam Lee"
        assert helper.rating == 4.25
        assert helper.review_count == 12
        assert helper.category_id == "career"
        assert helper.is_online
    
    def test_unknown_status_is_offline(self) -> None:
        assert AvailabilityStatus.parse("away") == AvailabilityStatus.OFFLINE
        assert AvailabilityStatus.parse(None) == AvailabilityStatus.OFFLINE


class TestEnums:
    
    def test_category_priority_order(self) -> None:
        assert [c.value for c in SupportCategory.priority_order()] == [
            "mental-health", "career", "relationships",
            "life-transitions", "education", "community",
        ]
    
    def test_unknown_category_is_rejected(self) -> None:
        assert SupportCategory.parse("astrology") is None
        assert SupportCategory.parse("Career") == SupportCategory.CAREER
    
    def test_sort_key_aliases(self) -> None:
        assert SortKey.parse("price-high") == SortKey.PRICE_DESC
        assert SortKey.parse("bogus") is None


class TestCategoryCatalog:
    
    def test_every_category_has_a_profile(self) -> None:
        assert set(CATEGORY_PROFILES) == set(SupportCategory)
        assert all(profile.quick_tips for profile in CATEGORY_PROFILES.values())
    
    @pytest.mark.parametrize("category,contact_category", [
        ("mental-health", ContactCategory.MENTAL_HEALTH),
        ("relationships", ContactCategory.DOMESTIC_VIOLENCE),
        ("life-transitions", ContactCategory.CRISIS),
        ("career", ContactCategory.GENERAL),
        ("education", ContactCategory.GENERAL),
        ("community", ContactCategory.GENERAL),
    ])
    def test_contact_mapping(self, category: str, contact_category: ContactCategory) -> None:
        assert get_category_profile(category).contact_category == contact_category
    
    def test_unknown_category_has_no_profile(self) -> None:
        assert get_category_profile("astrology") is None
        assert get_category_profile(None) is None
