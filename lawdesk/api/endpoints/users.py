from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from lawdesk.core.auth import get_current_active_superuser
from lawdesk.core.database import get_session_store, get_storage
from lawdesk.core.sessions import SessionStore
from lawdesk.crud import user as user_crud
from lawdesk.schemas.base import Message
from lawdesk.schemas.user import User, UserCreate, UserInDB, UserUpdate
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[User])
async def read_users(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_active_superuser),
) -> Any:
    """
    Retrieve users.
    """
    return storage.list_users()


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    *,
    user_in: UserCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_active_superuser),
) -> Any:
    """
    Create new user.
    """
    if storage.get_user_by_username(user_in.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )
    user = user_crud.create_user(storage, user_in)
    logger.info(f"User {user.id} ({user.role.value}) created by {current_user.id}")
    return user


@router.get("/{user_id}", response_model=User)
async def read_user_by_id(
    user_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_active_superuser),
) -> Any:
    """
    Get a specific user by id.
    """
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.put("/{user_id}", response_model=User)
@router.patch("/{user_id}", response_model=User)
async def update_user(
    *,
    user_id: int,
    user_in: UserUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_active_superuser),
) -> Any:
    """
    Update a user. A new password is hashed before it is stored.
    """
    if user_in.username:
        existing = storage.get_user_by_username(user_in.username)
        if existing and existing.id != user_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already exists"
            )

    user = user_crud.update_user(storage, user_id, user_in)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.delete("/{user_id}", response_model=Message)
async def delete_user(
    user_id: int,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
    current_user: UserInDB = Depends(get_current_active_superuser),
) -> Any:
    """
    Delete a user. Administrators cannot delete their own account.
    """
    if user_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete the current user"
        )

    if not storage.delete_user(user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    sessions.destroy_user_sessions(user_id)
    logger.info(f"User {user_id} deleted by {current_user.id}")
    return {"message": "User deleted successfully"}
