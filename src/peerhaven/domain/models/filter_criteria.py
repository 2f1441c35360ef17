"""
Helper Search Criteria

Stateless value objects describing a helper search. Each field has
an "unset" sentinel under which its predicate is skipped. Malformed
or out-of-range fields are reset to unset rather than rejecting the
whole search.
"""

import math
import re
from dataclasses import dataclass, field, replace
from typing import Optional

from peerhaven.domain.enums.matching import SortKey
from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.domain.errors import InvalidCriteriaError

# Unset sentinels
MIN_RATING_UNSET: float = 0.0
MAX_RATE_UNSET: float = 500.0
MAX_RATING: float = 5.0

_BAND_RANGE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")
_BAND_OPEN = re.compile(r"^\s*(\d+)\s*\+\s*$")


@dataclass(frozen=True)
class ExperienceBand:
    """
    Inclusive range of experience years.
    
    Parsed from "min-max" (e.g. "3-5") or "min+" (e.g. "10+",
    unbounded above).
    """
    
    min_years: int
    max_years: Optional[int] = None
    
    @classmethod
    def parse(cls, value: str) -> "ExperienceBand":
        """
        Parse an experience band string.
        
        Raises:
            InvalidCriteriaError: If the string is malformed or min > max
        """
        match = _BAND_OPEN.match(value)
        if match:
            return cls(min_years=int(match.group(1)))
        
        match = _BAND_RANGE.match(value)
        if match:
            low, high = int(match.group(1)), int(match.group(2))
            if low > high:
                raise InvalidCriteriaError("experience_band", value, "(min greater than max)")
            return cls(min_years=low, max_years=high)
        
        raise InvalidCriteriaError("experience_band", value, "(expected 'min-max' or 'min+')")
    
    def contains(self, years: int) -> bool:
        if years < self.min_years:
            return False
        return self.max_years is None or years <= self.max_years


def _check_rating(value: float) -> float:
    if math.isnan(value) or not MIN_RATING_UNSET <= value <= MAX_RATING:
        raise InvalidCriteriaError("min_rating", value, "(expected 0-5)")
    return value


def _check_rate(value: float) -> float:
    if math.isnan(value) or value <= 0:
        raise InvalidCriteriaError("max_rate", value, "(expected a positive amount)")
    return min(value, MAX_RATE_UNSET)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Helper search criteria.
    
    Attributes:
        query: Free-text query (empty = unset)
        category: Support category id (None = unset)
        min_rating: Rating floor (0 = unset)
        max_rate: Hourly rate ceiling (500 = unset)
        experience_band: "min-max" or "min+" (None = unset)
        location: Location substring (None/empty = unset)
        online_only: Only helpers currently online
        languages: Accepted languages (empty = unset)
        sort_key: Result ordering
    """
    
    query: str = ""
    category: Optional[str] = None
    min_rating: float = MIN_RATING_UNSET
    max_rate: float = MAX_RATE_UNSET
    experience_band: Optional[str] = None
    location: Optional[str] = None
    online_only: bool = False
    languages: frozenset[str] = field(default_factory=frozenset)
    sort_key: str = SortKey.RATING
    
    def sanitized(self) -> tuple["FilterCriteria", list[InvalidCriteriaError]]:
        """
        Reset invalid fields to their unset sentinel.
        
        Returns:
            Tuple of (clean criteria, problems found). Valid fields
            are kept so partial filtering still applies.
        """
        problems: list[InvalidCriteriaError] = []
        changes: dict = {}
        
        if self.category:
            parsed = SupportCategory.parse(self.category)
            if parsed is None:
                problems.append(InvalidCriteriaError("category", self.category, "(unknown category)"))
                changes["category"] = None
            else:
                changes["category"] = parsed.value
        
        try:
            changes["min_rating"] = _check_rating(float(self.min_rating))
        except (InvalidCriteriaError, TypeError, ValueError) as e:
            problems.append(e if isinstance(e, InvalidCriteriaError)
                            else InvalidCriteriaError("min_rating", self.min_rating))
            changes["min_rating"] = MIN_RATING_UNSET
        
        try:
            changes["max_rate"] = _check_rate(float(self.max_rate))
        except (InvalidCriteriaError, TypeError, ValueError) as e:
            problems.append(e if isinstance(e, InvalidCriteriaError)
                            else InvalidCriteriaError("max_rate", self.max_rate))
            changes["max_rate"] = MAX_RATE_UNSET
        
        if self.experience_band:
            try:
                ExperienceBand.parse(self.experience_band)
            except InvalidCriteriaError as e:
                problems.append(e)
                changes["experience_band"] = None
        
        sort_key = SortKey.parse(str(self.sort_key)) if self.sort_key else SortKey.RATING
        if sort_key is None:
            problems.append(InvalidCriteriaError("sort_key", self.sort_key, "(unknown sort key)"))
            sort_key = SortKey.RATING
        changes["sort_key"] = sort_key
        
        changes["query"] = (self.query or "").strip()
        changes["location"] = (self.location or "").strip() or None
        changes["languages"] = frozenset(lang.strip() for lang in self.languages if lang and lang.strip())
        
        return replace(self, **changes), problems
    
    @property
    def band(self) -> Optional[ExperienceBand]:
        """Parsed experience band (call on sanitized criteria)."""
        if not self.experience_band:
            return None
        return ExperienceBand.parse(self.experience_band)
    
    @property
    def resolved_sort_key(self) -> SortKey:
        return SortKey.parse(str(self.sort_key)) or SortKey.RATING
    
    def active_filters(self) -> list[str]:
        """Names of predicates that are set (for logging and UI badges)."""
        active = []
        if self.query:
            active.append("query")
        if self.category:
            active.append("category")
        if self.min_rating != MIN_RATING_UNSET:
            active.append("min_rating")
        if self.max_rate < MAX_RATE_UNSET:
            active.append("max_rate")
        if self.experience_band:
            active.append("experience_band")
        if self.location:
            active.append("location")
        if self.online_only:
            active.append("online_only")
        if self.languages:
            active.append("languages")
        return active
