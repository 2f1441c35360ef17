"""
Unit Tests for Filter Criteria

Tests experience band parsing and per-field sanitization.
"""

import pytest

from peerhaven.domain.enums.matching import SortKey
from peerhaven.domain.errors import InvalidCriteriaError
from peerhaven.domain.models.filter_criteria import (
    MAX_RATE_UNSET,
    MIN_RATING_UNSET,
    ExperienceBand,
    FilterCriteria,
)


class TestExperienceBand:
    """Test suite for ExperienceBand."""
    
    @pytest.mark.parametrize("value,expected", [
        ("3-5", ExperienceBand(3, 5)),
        (" 0 - 2 ", ExperienceBand(0, 2)),
        ("10+", ExperienceBand(10, None)),
        ("7 +", ExperienceBand(7, None)),
        ("4-4", ExperienceBand(4, 4)),
    ])
    def test_parse(self, value: str, expected: ExperienceBand) -> None:
        assert ExperienceBand.parse(value) == expected
    
    @pytest.mark.parametrize("value", ["", "ten", "5-", "-5", "5-3", "1-2-3", "+10"])
    def test_parse_rejects_malformed(self, value: str) -> None:
        with pytest.raises(InvalidCriteriaError) as exc_info:
            ExperienceBand.parse(value)
        
        assert exc_info.value.field == "experience_band"
    
    def test_contains_is_inclusive(self) -> None:
        band = ExperienceBand(3, 5)
        
        assert [band.contains(y) for y in (2, 3, 4, 5, 6)] == [False, True, True, True, False]
    
    def test_open_band_has_no_upper_bound(self) -> None:
        band = ExperienceBand.parse("10+")
        
        assert band.contains(10)
        assert band.contains(60)
        assert not band.contains(9)


class TestFilterCriteriaSanitization:
    """Test suite for FilterCriteria.sanitized."""
    
    def test_valid_criteria_have_no_problems(self) -> None:
        criteria = FilterCriteria(
            query=" anxiety ",
            category="mental-health",
            min_rating=4.0,
            max_rate=80,
            experience_band="3-5",
            location=" London ",
            languages=frozenset({" English ", ""}),
            sort_key="priceAsc",
        )
        
        clean, problems = criteria.sanitized()
        
        assert problems == []
        assert clean.query == "anxiety"
        assert clean.location == "London"
        assert clean.languages == frozenset({"English"})
        assert clean.sort_key == SortKey.PRICE_ASC
        assert clean.band == ExperienceBand(3, 5)
    
    @pytest.mark.parametrize("rating", [-0.1, 5.5, float("nan")])
    def test_out_of_range_rating_resets(self, rating: float) -> None:
        clean, problems = FilterCriteria(min_rating=rating).sanitized()
        
        assert clean.min_rating == MIN_RATING_UNSET
        assert [p.field for p in problems] == ["min_rating"]
    
    @pytest.mark.parametrize("rate", [0, -20, float("nan")])
    def test_non_positive_rate_resets(self, rate: float) -> None:
        clean, problems = FilterCriteria(max_rate=rate).sanitized()
        
        assert clean.max_rate == MAX_RATE_UNSET
        assert [p.field for p in problems] == ["max_rate"]
    
    def test_rate_above_ceiling_is_clamped(self) -> None:
        clean, problems = FilterCriteria(max_rate=900).sanitized()
        
        assert clean.max_rate == MAX_RATE_UNSET
        assert problems == []
    
    def test_unknown_category_resets(self) -> None:
        clean, problems = FilterCriteria(category="astrology").sanitized()
        
        assert clean.category is None
        assert problems[0].field == "category"
    
    def test_bad_band_and_sort_key_reset_independently(self) -> None:
        clean, problems = FilterCriteria(
            experience_band="9-2",
            sort_key="random",
            min_rating=4.5,
        ).sanitized()
        
        assert clean.experience_band is None
        assert clean.sort_key == SortKey.RATING
        assert clean.min_rating == 4.5
        assert {p.field for p in problems} == {"experience_band", "sort_key"}
    
    def test_active_filters(self) -> None:
        clean, _ = FilterCriteria(query="x", online_only=True, max_rate=100).sanitized()
        
        assert clean.active_filters() == ["query", "max_rate", "online_only"]
    
    def test_defaults_have_no_active_filters(self) -> None:
        assert FilterCriteria().active_filters() == []
