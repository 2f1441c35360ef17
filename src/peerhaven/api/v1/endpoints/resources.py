"""
Emergency Resource Endpoints

Emergency contact lookup and the resources chat.

SAFETY_NOTE: These endpoints never fail because a store is down;
they return an empty contact list instead.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from peerhaven.domain.enums.support_category import ContactCategory
from peerhaven.services.container import ServiceContainer, get_container

router = APIRouter()


class TriageRequest(BaseModel):
    message: str = Field(..., max_length=4000)


@router.get("/emergency", summary="List or search emergency contacts")
async def list_emergency_contacts(
    category: Optional[str] = None,
    q: Optional[str] = Query(default=None, max_length=200, description="Search term"),
    country: Optional[str] = Query(default=None, max_length=100),
    container: ServiceContainer = Depends(get_container),
) -> dict:
    """
    Contacts ordered 24/7-first then by name.
    
    With q or country the directory search is used (country also
    keeps Global contacts); otherwise the category listing.
    """
    contact_category = None
    if category:
        contact_category = ContactCategory.parse(category)
        if contact_category is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown contact category: {category}",
            )
    
    if q or country:
        contacts = await container.resources.search(q or "", country)
        if contact_category is not None:
            contacts = tuple(c for c in contacts if c.category == contact_category)
    else:
        contacts = await container.resources.list_contacts(contact_category)
    
    return {
        "total": len(contacts),
        "contacts": [contact.to_dict() for contact in contacts],
    }


@router.post("/triage", summary="Emergency resources chat")
async def triage(
    request: TriageRequest,
    container: ServiceContainer = Depends(get_container),
) -> dict:
    response = await container.resources.respond(request.message)
    return response.to_dict()
