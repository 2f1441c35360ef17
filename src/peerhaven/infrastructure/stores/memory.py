"""
In-Memory Stores

Knowledge, contact and helper stores backed by a JSON seed
document. Used for development, demos and tests; production
deployments point the stores at the managed database instead.

The seed document has three arrays: "knowledge", "contacts" and
"helpers". Records violating domain invariants are skipped with a
warning instead of failing the whole load.
"""

import json
from dataclasses import dataclass, field
from importlib import resources
from typing import Any, Callable, Optional, Sequence, TypeVar

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.support_category import ContactCategory
from peerhaven.domain.models.emergency_contact import EmergencyContact
from peerhaven.domain.models.helper import HelperRecord
from peerhaven.domain.models.knowledge import KnowledgeEntry
from peerhaven.infrastructure.stores.base import (
    ContactStore,
    HelperStore,
    KnowledgeStore,
    knowledge_search_order,
    matches_knowledge_term,
)

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SeedData:
    """Parsed seed document."""
    
    knowledge: tuple[KnowledgeEntry, ...] = field(default_factory=tuple)
    contacts: tuple[EmergencyContact, ...] = field(default_factory=tuple)
    helpers: tuple[HelperRecord, ...] = field(default_factory=tuple)
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeedData":
        return cls(
            knowledge=_parse_records(data.get("knowledge", []), KnowledgeEntry.from_dict, "knowledge"),
            contacts=_parse_records(data.get("contacts", []), EmergencyContact.from_dict, "contacts"),
            helpers=_parse_records(data.get("helpers", []), HelperRecord.from_dict, "helpers"),
        )
    
    @classmethod
    def load(cls, path: Optional[str] = None) -> "SeedData":
        """
        Load a seed document.
        
        Args:
            path: JSON file path; the packaged seed is used when None
        """
        if path:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            source = path
        else:
            seed_file = resources.files("peerhaven.data").joinpath("seed.json")
            data = json.loads(seed_file.read_text(encoding="utf-8"))
            source = "builtin"
        
        seed = cls.from_dict(data)
        logger.info(
            "Loaded seed data",
            source=source,
            knowledge_count=len(seed.knowledge),
            contact_count=len(seed.contacts),
            helper_count=len(seed.helpers),
        )
        return seed


def _parse_records(
    raw_records: list[dict[str, Any]],
    parse: Callable[[dict[str, Any]], T],
    section: str,
) -> tuple[T, ...]:
    parsed = []
    for raw in raw_records:
        try:
            parsed.append(parse(raw))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Skipping invalid seed record",
                section=section,
                record_id=raw.get("id") if isinstance(raw, dict) else None,
                error=str(e),
            )
    return tuple(parsed)


class InMemoryKnowledgeStore(KnowledgeStore):
    """Knowledge store over an in-memory snapshot."""
    
    def __init__(self, entries: Sequence[KnowledgeEntry]) -> None:
        self._entries = tuple(entries)
    
    async def list_knowledge(self, category_id: Optional[str] = None) -> Sequence[KnowledgeEntry]:
        if category_id is None:
            return self._entries
        return tuple(e for e in self._entries if e.category_id == category_id)
    
    async def search(self, term: str) -> Sequence[KnowledgeEntry]:
        found = [e for e in self._entries if matches_knowledge_term(e, term)]
        return tuple(sorted(found, key=knowledge_search_order))


class InMemoryContactStore(ContactStore):
    """Emergency contact store over an in-memory snapshot."""
    
    def __init__(self, contacts: Sequence[EmergencyContact]) -> None:
        self._contacts = tuple(contacts)
    
    async def list_contacts(self, category: Optional[ContactCategory] = None) -> Sequence[EmergencyContact]:
        if category is None:
            return self._contacts
        return tuple(c for c in self._contacts if c.category == category)


class InMemoryHelperStore(HelperStore):
    """Helper store over an in-memory snapshot."""
    
    def __init__(self, helpers: Sequence[HelperRecord]) -> None:
        self._helpers = tuple(helpers)
    
    async def list_helpers(self, category_id: Optional[str] = None) -> Sequence[HelperRecord]:
        if category_id is None:
            return self._helpers
        return tuple(h for h in self._helpers if h.category_id == category_id)
