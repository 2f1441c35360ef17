"""
Knowledge Endpoints

Search the knowledge base the assistant draws on.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.infrastructure.stores.base import fetch_or_empty
from peerhaven.services.container import ServiceContainer, get_container

router = APIRouter()


@router.get("/search", summary="Search knowledge entries")
async def search_knowledge(
    q: str = Query(..., min_length=1, max_length=200, description="Topic, content or keyword"),
    category: Optional[str] = Query(default=None, max_length=100),
    container: ServiceContainer = Depends(get_container),
) -> dict:
    """
    Entries whose topic or content contains the term, or that carry
    it as a keyword; most confident first. An unknown category
    filter is ignored.
    """
    entries = await fetch_or_empty(
        "knowledge",
        container.knowledge_store.search(q),
        container.store_timeout,
    )
    wanted = SupportCategory.parse(category) if category else None
    if wanted is not None:
        entries = tuple(e for e in entries if e.category_id == wanted.value)
    return {
        "total": len(entries),
        "entries": [entry.to_dict() for entry in entries],
    }
