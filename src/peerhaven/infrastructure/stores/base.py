"""
Store Interfaces

Read-only data-access contracts for knowledge entries, emergency
contacts and helper listings. The matching core only depends on
these interfaces; persistence lives behind them.

ARCHITECTURE: Stores return unranked, unfiltered snapshots beyond
the simple category selector. Ranking is the core's job.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Awaitable, Optional, Sequence, TypeVar

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.support_category import ContactCategory
from peerhaven.domain.errors import StoreUnavailableError
from peerhaven.domain.models.emergency_contact import EmergencyContact
from peerhaven.domain.models.helper import HelperRecord
from peerhaven.domain.models.knowledge import KnowledgeEntry
from peerhaven.infrastructure.metrics.prometheus_metrics import track_store_failure

logger = get_logger(__name__)

T = TypeVar("T")


class KnowledgeStore(ABC):
    """Read access to the knowledge base."""
    
    @abstractmethod
    async def list_knowledge(self, category_id: Optional[str] = None) -> Sequence[KnowledgeEntry]:
        """
        List knowledge entries, optionally for a single category.
        
        Raises:
            StoreUnavailableError: When the backing store fails
        """
    
    @abstractmethod
    async def search(self, term: str) -> Sequence[KnowledgeEntry]:
        """
        Search entries by topic/content substring or exact keyword.
        
        Results are ordered by confidence descending, then topic.
        
        Raises:
            StoreUnavailableError: When the backing store fails
        """
    
    async def health_check(self) -> bool:
        try:
            await self.list_knowledge()
            return True
        except StoreUnavailableError:
            return False


class ContactStore(ABC):
    """Read access to emergency contacts."""
    
    @abstractmethod
    async def list_contacts(self, category: Optional[ContactCategory] = None) -> Sequence[EmergencyContact]:
        """
        List emergency contacts, optionally of one category.
        
        Raises:
            StoreUnavailableError: When the backing store fails
        """
    
    async def health_check(self) -> bool:
        try:
            await self.list_contacts()
            return True
        except StoreUnavailableError:
            return False


class HelperStore(ABC):
    """Read access to helper listings."""
    
    @abstractmethod
    async def list_helpers(self, category_id: Optional[str] = None) -> Sequence[HelperRecord]:
        """
        List helpers, optionally for a single category.
        
        Raises:
            StoreUnavailableError: When the backing store fails
        """
    
    async def health_check(self) -> bool:
        try:
            await self.list_helpers()
            return True
        except StoreUnavailableError:
            return False


def knowledge_search_order(entry: KnowledgeEntry) -> tuple[float, str, str]:
    """Sort key: highest confidence first, then topic, then id."""
    return (-entry.confidence_level, entry.topic.lower(), entry.id)


def matches_knowledge_term(entry: KnowledgeEntry, term: str) -> bool:
    """Topic/content substring or exact keyword, case-insensitive."""
    needle = term.strip().lower()
    if not needle:
        return False
    return (
        needle in entry.topic.lower()
        or needle in entry.content.lower()
        or needle in entry.keyword_set()
    )


async def fetch_or_empty(
    store_name: str,
    fetch: Awaitable[Sequence[T]],
    timeout_seconds: float,
) -> tuple[T, ...]:
    """
    Await a store fetch, degrading to an empty tuple on failure.
    
    A fetch that raises or exceeds the timeout is treated as
    StoreUnavailable: logged, counted and replaced by ().
    Cancellation of the caller propagates unchanged.
    
    Args:
        store_name: Store label for logs and metrics
        fetch: Pending store call
        timeout_seconds: Upper bound for the call
        
    Returns:
        Fetched records, or an empty tuple
    """
    try:
        records = await asyncio.wait_for(fetch, timeout=timeout_seconds)
        return tuple(records)
    except asyncio.TimeoutError:
        logger.warning(
            "Store fetch timed out, continuing without data",
            store=store_name,
            timeout_seconds=timeout_seconds,
        )
    except StoreUnavailableError as e:
        logger.warning(
            "Store unavailable, continuing without data",
            store=store_name,
            reason=e.reason,
        )
    except Exception as e:
        logger.error(
            "Unexpected store failure, continuing without data",
            store=store_name,
            error_type=type(e).__name__,
            error_message=str(e),
        )
    track_store_failure(store_name)
    return ()
