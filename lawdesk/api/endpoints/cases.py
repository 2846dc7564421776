from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, Path, status

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.crud import case as case_crud
from lawdesk.schemas.base import Message
from lawdesk.schemas.case import Case, CaseCreate, CaseUpdate
from lawdesk.schemas.document import Document
from lawdesk.schemas.task import Task
from lawdesk.schemas.transaction import Transaction
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Case])
async def get_cases(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve cases.
    """
    cases = storage.list_cases()
    logger.debug(f"Retrieved {len(cases)} cases")
    return cases


@router.post("", response_model=Case, status_code=status.HTTP_201_CREATED)
async def create_case(
    *,
    case_in: CaseCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Create new case.

    A case created with a value also bills an unpaid revenue transaction
    for that value, due in 30 days.
    """
    logger.info(f"Case creation requested by user: {current_user.id}")
    new_case = case_crud.create_case(storage, case_in, created_by_id=current_user.id)
    logger.info(f"Case created successfully: {new_case.id}")
    return new_case


@router.get("/{case_id}", response_model=Case)
async def read_case(
    case_id: int = Path(..., description="The ID of the case to retrieve"),
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Get case by ID.
    """
    case = storage.get_case(case_id)
    if not case:
        logger.warning(f"Case not found: {case_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Case not found"
        )
    return case


@router.put("/{case_id}", response_model=Case)
@router.patch("/{case_id}", response_model=Case)
async def update_case(
    *,
    case_id: int = Path(..., description="The ID of the case to update"),
    case_in: CaseUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Update case.
    """
    case = storage.update_case(case_id, case_in)
    if not case:
        logger.warning(f"Case not found for update: {case_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Case not found"
        )
    logger.info(f"Case updated successfully: {case_id}")
    return case


@router.delete("/{case_id}", response_model=Message)
async def delete_case(
    case_id: int = Path(..., description="The ID of the case to delete"),
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Delete case.
    """
    if not storage.delete_case(case_id):
        logger.warning(f"Case not found for deletion: {case_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Case not found"
        )
    logger.info(f"Case deleted successfully: {case_id}")
    return {"message": "Case deleted successfully"}


@router.get("/{case_id}/tasks", response_model=List[Task])
async def get_case_tasks(
    case_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return storage.list_tasks_by_case(case_id)


@router.get("/{case_id}/transactions", response_model=List[Transaction])
async def get_case_transactions(
    case_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return storage.list_transactions_by_case(case_id)


@router.get("/{case_id}/documents", response_model=List[Document])
async def get_case_documents(
    case_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return storage.list_documents_by_case(case_id)
