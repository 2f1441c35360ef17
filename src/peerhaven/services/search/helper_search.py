"""
Helper Search Service

Fetches a helper snapshot from the store and hands it to the
ranking engine. A failing or slow store yields an empty result,
never an error.
"""

from typing import Optional

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.domain.models.category import CategoryStats
from peerhaven.domain.models.filter_criteria import FilterCriteria
from peerhaven.domain.models.helper import HelperRecord
from peerhaven.infrastructure.metrics.prometheus_metrics import track_helper_search
from peerhaven.infrastructure.stores.base import HelperStore, fetch_or_empty
from peerhaven.services.matching.helper_ranking import HelperRankingEngine

logger = get_logger(__name__)


class HelperSearchService:
    """
    Store-backed helper search.
    
    Usage:
        service = HelperSearchService(store, timeout_seconds=2.0)
        helpers = await service.search(FilterCriteria(query="anxiety"))
    """
    
    def __init__(
        self,
        helper_store: HelperStore,
        engine: Optional[HelperRankingEngine] = None,
        timeout_seconds: float = 2.0,
    ) -> None:
        self._store = helper_store
        self._engine = engine or HelperRankingEngine()
        self._timeout = timeout_seconds
    
    async def search(self, criteria: FilterCriteria) -> tuple[HelperRecord, ...]:
        """
        Run a helper search.
        
        The store is asked for the criteria's category when it is a
        known one; the engine applies every predicate regardless.
        
        Args:
            criteria: Search criteria (may contain invalid fields)
            
        Returns:
            Ranked helpers
        """
        category = SupportCategory.parse(criteria.category) if criteria.category else None
        helpers = await fetch_or_empty(
            "helpers",
            self._store.list_helpers(category.value if category else None),
            self._timeout,
        )
        
        results = self._engine.rank(helpers, criteria)
        sort_key = criteria.resolved_sort_key
        track_helper_search(sort_key.value)
        logger.info(
            "Helper search completed",
            active_filters=criteria.active_filters(),
            sort_key=sort_key.value,
            candidate_count=len(helpers),
            result_count=len(results),
        )
        return results
    
    async def category_stats(self) -> dict[SupportCategory, CategoryStats]:
        """Helper and online counts for every category."""
        helpers = await fetch_or_empty("helpers", self._store.list_helpers(), self._timeout)
        return self._engine.category_stats(helpers)
