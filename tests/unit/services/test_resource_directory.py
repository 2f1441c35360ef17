"""
Unit Tests for Contact Triage and Resource Directory

Tests triage priority, crisis replies including 24/7 contacts
and country-aware contact search.
"""

import pytest

from peerhaven.domain.enums.support_category import ContactCategory
from peerhaven.infrastructure.stores.memory import InMemoryContactStore
from peerhaven.services.matching.contact_triage import ContactTriage
from peerhaven.services.search.resource_directory import GENERAL_PROMPT, ResourceDirectory


class TestContactTriage:
    """Test suite for ContactTriage."""
    
    @pytest.fixture
    def triage(self) -> ContactTriage:
        return ContactTriage()
    
    @pytest.mark.parametrize("message,expected", [
        ("I've been thinking about suicide", ContactCategory.SUICIDE),
        ("This is an emergency", ContactCategory.CRISIS),
        ("I feel unsafe at home", ContactCategory.DOMESTIC_VIOLENCE),
        ("I'm struggling with alcohol", ContactCategory.SUBSTANCE_ABUSE),
        ("I need mental health support", ContactCategory.MENTAL_HEALTH),
    ])
    def test_triage_categories(self, triage: ContactTriage, message: str, expected: ContactCategory) -> None:
        assert triage.triage(message) == expected
    
    def test_suicide_wins_over_everything(self, triage: ContactTriage) -> None:
        """Test that suicide language beats other matching rules."""
        assert triage.triage("urgent: abuse, drugs and I want to end it all") == ContactCategory.SUICIDE
    
    def test_crisis_precedes_abuse(self, triage: ContactTriage) -> None:
        assert triage.triage("urgent help, I'm facing abuse") == ContactCategory.CRISIS
    
    @pytest.mark.parametrize("message", ["", "hello", "what can you do?"])
    def test_unmatched_returns_none(self, triage: ContactTriage, message: str) -> None:
        assert triage.triage(message) is None


class TestResourceDirectory:
    """Test suite for ResourceDirectory."""
    
    @pytest.fixture
    def directory(self, contact_store: InMemoryContactStore) -> ResourceDirectory:
        return ResourceDirectory(contact_store, timeout_seconds=1.0)
    
    async def test_suicide_reply_is_urgent(self, directory: ResourceDirectory) -> None:
        response = await directory.respond("I keep thinking about suicide")
        
        assert response.urgent
        assert [c.id for c in response.contacts] == ["ec-1", "ec-4", "ec-2", "ec-3"]
    
    async def test_crisis_reply_includes_all_round_the_clock_contacts(self, directory: ResourceDirectory) -> None:
        """Test that crisis replies add every 24/7 contact, 24/7 first."""
        response = await directory.respond("It's an emergency")
        ids = [c.id for c in response.contacts]
        
        assert response.urgent
        assert {"ec-5", "ec-6", "ec-7"} <= set(ids)
        assert "ec-12" in ids
        assert "ec-8" not in ids
        assert all(c.available_24_7 for c in response.contacts)
    
    async def test_domestic_violence_reply(self, directory: ResourceDirectory) -> None:
        response = await directory.respond("My partner is abusive, it's abuse")
        
        assert not response.urgent
        assert [c.category for c in response.contacts] == [ContactCategory.DOMESTIC_VIOLENCE]
    
    async def test_unmatched_reply_prompts_for_more(self, directory: ResourceDirectory) -> None:
        response = await directory.respond("hi")
        
        assert response.text == GENERAL_PROMPT
        assert response.contacts == ()
    
    async def test_list_orders_round_the_clock_first(self, directory: ResourceDirectory) -> None:
        contacts = await directory.list_contacts(ContactCategory.MENTAL_HEALTH)
        
        assert [c.id for c in contacts] == ["ec-9", "ec-8"]
    
    async def test_search_by_country_keeps_global(self, directory: ResourceDirectory) -> None:
        contacts = await directory.search("", country="united kingdom")
        countries = {c.country for c in contacts}
        
        assert countries == {"United Kingdom", "Global"}
    
    async def test_search_term_matches_name_and_category(self, directory: ResourceDirectory) -> None:
        by_name = await directory.search("samaritans")
        by_category = await directory.search("substance abuse")
        
        assert [c.id for c in by_name] == ["ec-2"]
        assert [c.id for c in by_category] == ["ec-11"]
