from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.crud import lead as lead_crud
from lawdesk.schemas.base import Message
from lawdesk.schemas.client import Client
from lawdesk.schemas.contact import ContactHistory, ContactHistoryCreate
from lawdesk.schemas.lead import Lead, LeadCreate, LeadUpdate
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Lead])
async def get_leads(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve leads.
    """
    return storage.list_leads()


@router.post("", response_model=Lead, status_code=status.HTTP_201_CREATED)
async def create_lead(
    *,
    lead_in: LeadCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Create new lead.
    """
    lead = storage.create_lead(lead_in)
    logger.info(f"Lead {lead.id} created by user {current_user.id}")
    return lead


@router.get("/{lead_id}", response_model=Lead)
async def read_lead(
    lead_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Get lead by ID.
    """
    lead = storage.get_lead(lead_id)
    if not lead:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lead not found"
        )
    return lead


@router.put("/{lead_id}", response_model=Lead)
@router.patch("/{lead_id}", response_model=Lead)
async def update_lead(
    *,
    lead_id: int,
    lead_in: LeadUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Update lead. Conversion has its own endpoint.
    """
    lead = storage.update_lead(lead_id, lead_in)
    if not lead:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lead not found"
        )
    return lead


@router.delete("/{lead_id}", response_model=Message)
async def delete_lead(
    lead_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Delete lead.
    """
    if not storage.delete_lead(lead_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lead not found"
        )
    logger.info(f"Lead {lead_id} deleted by user {current_user.id}")
    return {"message": "Lead deleted successfully"}


@router.post("/{lead_id}/convert", response_model=Client, status_code=status.HTTP_201_CREATED)
async def convert_lead(
    lead_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Convert a lead into a client.

    Fails with 404 for an unknown lead and with 400 when the lead was
    already converted.
    """
    lead = storage.get_lead(lead_id)
    if not lead:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lead not found"
        )

    try:
        client = lead_crud.convert_lead(storage, lead)
    except lead_crud.LeadAlreadyConverted:
        logger.warning(f"Lead {lead_id} conversion refused: already converted")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Lead was already converted"
        )
    return client


@router.get("/{lead_id}/contacts", response_model=List[ContactHistory])
async def get_lead_contacts(
    lead_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Get the contact history of a lead, most recent first.
    """
    return storage.list_contact_history_by_lead(lead_id)


@router.post("/{lead_id}/contacts", response_model=ContactHistory, status_code=status.HTTP_201_CREATED)
async def create_lead_contact(
    *,
    lead_id: int,
    entry_in: ContactHistoryCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Record a contact with a lead.
    """
    if not storage.get_lead(lead_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lead not found"
        )
    return storage.create_contact_history(entry_in, created_by_id=current_user.id, lead_id=lead_id)
