"""Knowledge, contact and helper stores."""

from peerhaven.infrastructure.stores.base import (
    ContactStore,
    HelperStore,
    KnowledgeStore,
    fetch_or_empty,
)
from peerhaven.infrastructure.stores.memory import (
    InMemoryContactStore,
    InMemoryHelperStore,
    InMemoryKnowledgeStore,
    SeedData,
)
from peerhaven.infrastructure.stores.sql import (
    SqlContactStore,
    SqlHelperStore,
    SqlKnowledgeStore,
)

__all__ = [
    "ContactStore",
    "HelperStore",
    "KnowledgeStore",
    "fetch_or_empty",
    "InMemoryContactStore",
    "InMemoryHelperStore",
    "InMemoryKnowledgeStore",
    "SeedData",
    "SqlContactStore",
    "SqlHelperStore",
    "SqlKnowledgeStore",
]
