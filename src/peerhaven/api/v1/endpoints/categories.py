"""
Category Endpoints

Support category catalog with live helper counts.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from peerhaven.domain.enums.support_category import SupportCategory
from peerhaven.domain.models.category import CATEGORY_PROFILES, get_category_profile
from peerhaven.services.container import ServiceContainer, get_container

router = APIRouter()


@router.get("", summary="List support categories")
async def list_categories(
    container: ServiceContainer = Depends(get_container),
) -> list[dict]:
    stats = await container.helper_search.category_stats()
    return [
        {**CATEGORY_PROFILES[category].to_dict(), **stats[category].to_dict()}
        for category in SupportCategory.priority_order()
    ]


@router.get("/{category_id}", summary="Get one support category")
async def get_category(
    category_id: str,
    container: ServiceContainer = Depends(get_container),
) -> dict:
    profile = get_category_profile(category_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown category: {category_id}",
        )
    
    stats = await container.helper_search.category_stats()
    contacts = await container.resources.list_contacts(profile.contact_category)
    return {
        **profile.to_dict(),
        **stats[profile.category].to_dict(),
        "emergency_contacts": [contact.to_dict() for contact in contacts],
    }
