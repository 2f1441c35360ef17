"""Tests configuration and fixtures."""

from typing import Any, Callable

import pytest
from pydantic import SecretStr

from peerhaven.config import Settings
from peerhaven.config.settings import SpeechSettings, StoreSettings
from peerhaven.domain.models.helper import HelperRecord
from peerhaven.infrastructure.stores.memory import (
    InMemoryContactStore,
    InMemoryHelperStore,
    InMemoryKnowledgeStore,
    SeedData,
)


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings: memory stores, no speech key."""
    return Settings(
        env="development",
        debug=True,
        store=StoreSettings(backend="memory", timeout_seconds=0.5),
        speech=SpeechSettings(api_key=SecretStr("")),
    )


@pytest.fixture(scope="session")
def seed() -> SeedData:
    """Built-in seed document."""
    return SeedData.load()


@pytest.fixture
def knowledge_store(seed: SeedData) -> InMemoryKnowledgeStore:
    return InMemoryKnowledgeStore(seed.knowledge)


@pytest.fixture
def contact_store(seed: SeedData) -> InMemoryContactStore:
    return InMemoryContactStore(seed.contacts)


@pytest.fixture
def helper_store(seed: SeedData) -> InMemoryHelperStore:
    return InMemoryHelperStore(seed.helpers)


@pytest.fixture
def make_helper() -> Callable[..., HelperRecord]:
    """Factory for helper records with sensible defaults."""
    
    def _make(helper_id: str, **overrides: Any) -> HelperRecord:
        values: dict[str, Any] = {
            "id": helper_id,
            "display_name": f"Helper {helper_id}",
            "title": "Peer Supporter",
            "rating": 4.0,
            "review_count": 10,
            "hourly_rate": 50.0,
            "languages": frozenset({"English"}),
            "category_id": "mental-health",
            "experience_years": 5,
            "location": "Remote",
        }
        values.update(overrides)
        return HelperRecord(**values)
    
    return _make
