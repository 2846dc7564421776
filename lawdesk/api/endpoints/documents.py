from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.schemas.base import Message
from lawdesk.schemas.document import Document, DocumentCreate, DocumentUpdate
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Document])
async def get_documents(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve document metadata.
    """
    return storage.list_documents()


@router.post("", response_model=Document, status_code=status.HTTP_201_CREATED)
async def create_document(
    *,
    document_in: DocumentCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Register a document. The upload itself is simulated: only the metadata
    (file name, URL, size) is kept.
    """
    document = storage.create_document(document_in, uploaded_by_id=current_user.id)
    logger.info(f"Document {document.id} ({document.filename}) registered by user {current_user.id}")
    return document


@router.get("/{document_id}", response_model=Document)
async def read_document(
    document_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    document = storage.get_document(document_id)
    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )
    return document


@router.put("/{document_id}", response_model=Document)
@router.patch("/{document_id}", response_model=Document)
async def update_document(
    *,
    document_id: int,
    document_in: DocumentUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    document = storage.update_document(document_id, document_in)
    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )
    return document


@router.delete("/{document_id}", response_model=Message)
async def delete_document(
    document_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    if not storage.delete_document(document_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )
    logger.info(f"Document {document_id} deleted by user {current_user.id}")
    return {"message": "Document deleted successfully"}
