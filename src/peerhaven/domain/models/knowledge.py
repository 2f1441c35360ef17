"""
Knowledge Entry Domain Model

Pre-authored topic content used to enrich assistant replies.
Entries are immutable and read-only to the matching core.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class KnowledgeEntry:
    """
    A single knowledge base entry.
    
    Attributes:
        id: Entry identifier
        topic: Short title (e.g., "Anxiety Management")
        content: Body text shown to the user
        keywords: Ordered, de-duplicated lowercase keywords
        confidence_level: Editorial confidence (0.0-1.0)
        category_id: Support category the entry belongs to
    """
    
    id: str
    topic: str
    content: str
    keywords: tuple[str, ...] = field(default_factory=tuple)
    confidence_level: float = 0.5
    category_id: str = ""
    
    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_level <= 1.0:
            raise ValueError(f"confidence_level out of range: {self.confidence_level}")
        # Normalise keywords while keeping first-seen order
        seen: dict[str, None] = {}
        for keyword in self.keywords:
            seen.setdefault(keyword.strip().lower(), None)
        object.__setattr__(self, "keywords", tuple(k for k in seen if k))
    
    def keyword_set(self) -> frozenset[str]:
        return frozenset(self.keywords)
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KnowledgeEntry":
        """Build from a store record (snake_case or camelCase keys)."""
        return cls(
            id=str(data["id"]),
            topic=data["topic"],
            content=data["content"],
            keywords=tuple(data.get("keywords") or ()),
            confidence_level=float(data.get("confidence_level", data.get("confidenceLevel", 0.5))),
            category_id=str(data.get("category_id", data.get("categoryId", ""))),
        )
    
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "topic": self.topic,
            "content": self.content,
            "keywords": list(self.keywords),
            "confidence_level": self.confidence_level,
            "category_id": self.category_id,
        }
