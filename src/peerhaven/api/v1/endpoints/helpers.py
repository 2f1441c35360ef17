"""
Helper Search Endpoints

Filter and sort marketplace helpers. Out-of-range or malformed
criteria are ignored rather than rejected, so a partially bad
search still filters on its valid fields.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from peerhaven.domain.enums.matching import SortKey
from peerhaven.domain.models.filter_criteria import MAX_RATE_UNSET, MIN_RATING_UNSET, FilterCriteria
from peerhaven.services.container import ServiceContainer, get_container

router = APIRouter()


class HelperSearchRequest(BaseModel):
    """Helper search criteria. Every field is optional."""
    
    query: str = Field(default="", max_length=200)
    category: Optional[str] = None
    min_rating: float = MIN_RATING_UNSET
    max_rate: float = MAX_RATE_UNSET
    experience_band: Optional[str] = Field(default=None, description='"min-max" or "min+"')
    location: Optional[str] = Field(default=None, max_length=200)
    online_only: bool = False
    languages: list[str] = Field(default_factory=list, max_length=20)
    sort_key: str = Field(default=SortKey.RATING.value, description="rating, priceAsc, priceDesc, experience or reviews")
    
    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(
            query=self.query,
            category=self.category,
            min_rating=self.min_rating,
            max_rate=self.max_rate,
            experience_band=self.experience_band,
            location=self.location,
            online_only=self.online_only,
            languages=frozenset(self.languages),
            sort_key=self.sort_key,
        )


class HelperSearchResponse(BaseModel):
    total: int
    active_filters: list[str]
    helpers: list[dict]


@router.post(
    "/search",
    response_model=HelperSearchResponse,
    summary="Search helpers",
)
async def search_helpers(
    request: HelperSearchRequest,
    container: ServiceContainer = Depends(get_container),
) -> HelperSearchResponse:
    criteria = request.to_criteria()
    helpers = await container.helper_search.search(criteria)
    clean, _ = criteria.sanitized()
    return HelperSearchResponse(
        total=len(helpers),
        active_filters=clean.active_filters(),
        helpers=[helper.to_dict() for helper in helpers],
    )
