"""
Helper Ranking Engine

Reduces a helper snapshot to a filtered, deterministically ordered
result set.

Filter stage: every predicate is AND-combined and skipped while its
criteria field sits at the unset sentinel. Sort stage: stable sort by
the selected key with ties broken on helper id ascending, so repeated
calls over identical input give identical output.

Helper records are never mutated; a new tuple is returned.
"""

from typing import Callable, Iterable, Sequence

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.matching import SortKey
from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.domain.models.category import CategoryStats
from peerhaven.domain.models.filter_criteria import MAX_RATE_UNSET, MIN_RATING_UNSET, FilterCriteria
from peerhaven.domain.models.helper import HelperRecord

logger = get_logger(__name__)

Predicate = Callable[[HelperRecord], bool]


def _rating_key(helper: HelperRecord) -> tuple:
    return (-helper.rating, helper.id)


def _price_asc_key(helper: HelperRecord) -> tuple:
    return (helper.hourly_rate, helper.id)


def _price_desc_key(helper: HelperRecord) -> tuple:
    return (-helper.hourly_rate, helper.id)


def _experience_key(helper: HelperRecord) -> tuple:
    return (-helper.experience_years, helper.id)


def _reviews_key(helper: HelperRecord) -> tuple:
    return (-helper.review_count, helper.id)


SORT_KEYS: dict[SortKey, Callable[[HelperRecord], tuple]] = {
    SortKey.RATING: _rating_key,
    SortKey.PRICE_ASC: _price_asc_key,
    SortKey.PRICE_DESC: _price_desc_key,
    SortKey.EXPERIENCE: _experience_key,
    SortKey.REVIEWS: _reviews_key,
}


class HelperRankingEngine:
    """
    Filters and sorts helper listings.
    
    Stateless; safe to share across concurrent requests.
    
    Usage:
        engine = HelperRankingEngine()
        results = engine.rank(helpers, FilterCriteria(min_rating=4.5))
    """
    
    def rank(self, helpers: Sequence[HelperRecord], criteria: FilterCriteria) -> tuple[HelperRecord, ...]:
        """
        Filter and order helpers.
        
        Invalid criteria fields are treated as unset; valid fields
        still filter.
        
        Args:
            helpers: Unranked snapshot
            criteria: Search criteria
            
        Returns:
            New ordered tuple of matching helpers
        """
        clean, problems = criteria.sanitized()
        for problem in problems:
            logger.warning(
                "Ignoring invalid search criterion",
                field=problem.field,
                reason=problem.reason,
            )
        
        predicates = self.build_predicates(clean)
        matching = [h for h in helpers if all(p(h) for p in predicates)]
        return tuple(sorted(matching, key=SORT_KEYS[clean.resolved_sort_key]))
    
    def build_predicates(self, criteria: FilterCriteria) -> list[Predicate]:
        """
        Build the active predicate list for sanitized criteria.
        
        Predicates at their unset sentinel are omitted.
        """
        predicates: list[Predicate] = []
        
        if criteria.query:
            needle = criteria.query.lower()
            predicates.append(lambda h: _matches_query(h, needle))
        
        if criteria.category:
            category = criteria.category
            predicates.append(lambda h: h.category_id == category)
        
        if criteria.min_rating > MIN_RATING_UNSET:
            floor = criteria.min_rating
            predicates.append(lambda h: h.rating >= floor)
        
        if criteria.max_rate < MAX_RATE_UNSET:
            ceiling = criteria.max_rate
            predicates.append(lambda h: h.hourly_rate <= ceiling)
        
        band = criteria.band
        if band is not None:
            predicates.append(lambda h: band.contains(h.experience_years))
        
        if criteria.location:
            place = criteria.location.lower()
            predicates.append(lambda h: place in h.location.lower())
        
        if criteria.online_only:
            predicates.append(lambda h: h.is_online)
        
        if criteria.languages:
            wanted = _fold(criteria.languages)
            predicates.append(lambda h: bool(wanted & _fold(h.languages)))
        
        return predicates
    
    def category_stats(self, helpers: Iterable[HelperRecord]) -> dict[SupportCategory, CategoryStats]:
        """
        Count helpers and online helpers per category.
        
        Every known category is present; helpers with an unknown
        category id are ignored.
        """
        helper_counts = {category: 0 for category in SupportCategory}
        available_counts = {category: 0 for category in SupportCategory}
        for helper in helpers:
            category = SupportCategory.parse(helper.category_id)
            if category is None:
                continue
            helper_counts[category] += 1
            if helper.is_online:
                available_counts[category] += 1
        
        return {
            category: CategoryStats(
                category=category,
                helper_count=helper_counts[category],
                available_count=available_counts[category],
            )
            for category in SupportCategory
        }


def _matches_query(helper: HelperRecord, needle: str) -> bool:
    haystacks = (helper.display_name, helper.title, helper.description, *helper.specialties)
    return any(needle in text.lower() for text in haystacks)


def _fold(languages: Iterable[str]) -> frozenset[str]:
    return frozenset(lang.casefold() for lang in languages)
