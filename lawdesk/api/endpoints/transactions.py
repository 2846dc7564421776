from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.schemas.base import Message
from lawdesk.schemas.transaction import Transaction, TransactionCreate, TransactionUpdate
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Transaction])
async def get_transactions(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve financial transactions.
    """
    return storage.list_transactions()


@router.post("", response_model=Transaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    *,
    transaction_in: TransactionCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Record a revenue or expense.
    """
    transaction = storage.create_transaction(transaction_in, created_by_id=current_user.id)
    logger.info(
        f"Transaction {transaction.id} ({transaction.type.value}, {transaction.amount}) "
        f"created by user {current_user.id}"
    )
    return transaction


@router.get("/{transaction_id}", response_model=Transaction)
async def read_transaction(
    transaction_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    transaction = storage.get_transaction(transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return transaction


@router.put("/{transaction_id}", response_model=Transaction)
@router.patch("/{transaction_id}", response_model=Transaction)
async def update_transaction(
    *,
    transaction_id: int,
    transaction_in: TransactionUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Update a transaction, e.g. to mark it as paid.
    """
    transaction = storage.update_transaction(transaction_id, transaction_in)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    return transaction


@router.delete("/{transaction_id}", response_model=Message)
async def delete_transaction(
    transaction_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    if not storage.delete_transaction(transaction_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found"
        )
    logger.info(f"Transaction {transaction_id} deleted by user {current_user.id}")
    return {"message": "Transaction deleted successfully"}
