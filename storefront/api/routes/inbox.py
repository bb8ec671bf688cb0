"""
Newsletter and contact-form API routes.
"""
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.dependencies import get_inbox_service
from storefront.models import Contact, ContactCreate, SubscriberCreate
from storefront.services import InboxService

router = APIRouter(tags=["inbox"])


@router.post("/subscribe", status_code=201)
async def subscribe(
    subscriber: SubscriberCreate,
    inbox: InboxService = Depends(get_inbox_service),
) -> JSONResponse:
    """
    Subscribe to the newsletter.

    Returns 201 for a new subscriber and 200 when the email is already on the list.
    """
    record, created = await inbox.subscribe(subscriber)
    if not created:
        return JSONResponse(
            status_code=200,
            content={"message": "Email already subscribed", "subscriber": record.model_dump(mode="json")},
        )
    return JSONResponse(
        status_code=201,
        content={"message": "Subscribed", "subscriber": record.model_dump(mode="json")},
    )


@router.post("/contact", response_model=Contact, status_code=201)
async def submit_contact(
    contact: ContactCreate,
    inbox: InboxService = Depends(get_inbox_service),
) -> Contact:
    return await inbox.submit_contact(contact)


@router.get("/contacts", response_model=List[Contact])
async def list_contacts(inbox: InboxService = Depends(get_inbox_service)) -> List[Contact]:
    return await inbox.list_contacts()
