from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.schemas.base import Message
from lawdesk.schemas.case import Case
from lawdesk.schemas.client import Client, ClientCreate, ClientUpdate
from lawdesk.schemas.contact import ContactHistory, ContactHistoryCreate
from lawdesk.schemas.document import Document
from lawdesk.schemas.task import Task
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Client])
async def get_clients(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve clients.
    """
    return storage.list_clients()


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
async def create_client(
    *,
    client_in: ClientCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Create new client.
    """
    client = storage.create_client(client_in)
    logger.info(f"Client {client.id} created by user {current_user.id}")
    return client


@router.get("/{client_id}", response_model=Client)
async def read_client(
    client_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Get client by ID.
    """
    client = storage.get_client(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client


@router.put("/{client_id}", response_model=Client)
@router.patch("/{client_id}", response_model=Client)
async def update_client(
    *,
    client_id: int,
    client_in: ClientUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Update client.
    """
    client = storage.update_client(client_id, client_in)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client


@router.delete("/{client_id}", response_model=Message)
async def delete_client(
    client_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Delete client. Cases, tasks and documents referring to it are kept.
    """
    if not storage.delete_client(client_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    logger.info(f"Client {client_id} deleted by user {current_user.id}")
    return {"message": "Client deleted successfully"}


@router.get("/{client_id}/contacts", response_model=List[ContactHistory])
async def get_client_contacts(
    client_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Get the contact history of a client, most recent first.
    """
    return storage.list_contact_history_by_client(client_id)


@router.post("/{client_id}/contacts", response_model=ContactHistory, status_code=status.HTTP_201_CREATED)
async def create_client_contact(
    *,
    client_id: int,
    entry_in: ContactHistoryCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Record a contact with a client.
    """
    if not storage.get_client(client_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return storage.create_contact_history(entry_in, created_by_id=current_user.id, client_id=client_id)


@router.get("/{client_id}/cases", response_model=List[Case])
async def get_client_cases(
    client_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Get all cases associated with a specific client.
    """
    return storage.list_cases_by_client(client_id)


@router.get("/{client_id}/tasks", response_model=List[Task])
async def get_client_tasks(
    client_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return storage.list_tasks_by_client(client_id)


@router.get("/{client_id}/documents", response_model=List[Document])
async def get_client_documents(
    client_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return storage.list_documents_by_client(client_id)
